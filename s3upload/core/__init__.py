"""
Core upload logic.

This module is framework-agnostic - it doesn't import boto3, qrcode,
or anything about the CI host. Storage and image encoding come in
through the protocols in `upload.uploader`.
"""
