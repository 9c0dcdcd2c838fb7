"""
s3-upload-action - upload a build artifact to S3 from a CI pipeline step.

This package contains the complete action:
- core: Framework-agnostic upload rules (keys, tags, checksums, URLs)
- infrastructure: boto3 storage client, QR encoder, GitHub Actions I/O
- config: Runtime settings and action inputs
"""

__version__ = "0.1.0"
