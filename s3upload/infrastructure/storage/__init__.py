"""
Object storage integration for uploaded artifacts.

Amazon S3 via boto3, plus an in-memory mock for local runs.
"""

from .client import (
    MockStorageClient,
    S3StorageClient,
    StorageConfig,
    create_storage_client,
)

__all__ = [
    "MockStorageClient",
    "S3StorageClient",
    "StorageConfig",
    "create_storage_client",
]
