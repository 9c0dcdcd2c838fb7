"""
Infrastructure layer - external service integrations.

Each subdirectory wraps an external dependency:
- storage: Amazon S3 via boto3
- qr: QR code rendering via qrcode/Pillow
- actions: GitHub Actions outputs and workflow commands
"""
