"""
Object storage client for artifact uploads.

Talks to Amazon S3 through boto3, with an in-memory mock for local
runs and tests. Both implement the StorageClient protocol from the
core upload package.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from s3upload.core.upload.models import ObjectUpload
from s3upload.core.upload.uploader import StorageClient

logger = logging.getLogger(__name__)


@dataclass
class StorageConfig:
    """
    Configuration for S3 storage.

    Empty credentials fall through to boto3's default credential chain
    (environment, shared config, instance role).
    """
    bucket_name: str
    region: str
    access_key_id: str = ""
    secret_access_key: str = ""
    endpoint_url: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.bucket_name:
            raise ValueError("bucket_name is required")


def build_put_object_params(bucket_name: str, upload: ObjectUpload) -> dict[str, Any]:
    """Translate an ObjectUpload into boto3 put_object keyword arguments."""
    params: dict[str, Any] = {
        "Bucket": bucket_name,
        "Key": upload.key,
        "Body": upload.body,
        "ACL": upload.acl.value,
    }

    if upload.content_type:
        params["ContentType"] = upload.content_type
    if upload.content_disposition:
        params["ContentDisposition"] = upload.content_disposition
    if upload.tagging:
        params["Tagging"] = upload.tagging

    if upload.checksum is not None:
        params["ChecksumAlgorithm"] = upload.checksum.algorithm.value
        # A precomputed value replaces the one the SDK would calculate
        if upload.checksum.value:
            params[upload.checksum.algorithm.field_name] = upload.checksum.value

    return params


class S3StorageClient:
    """
    Amazon S3 storage client.

    Presigned URLs use SigV4 with virtual-hosted addressing, so they
    come back as https://<bucket>.s3.<region>.amazonaws.com/<key>?...
    """

    def __init__(self, config: StorageConfig) -> None:
        import boto3
        from botocore.config import Config

        self._config = config

        boto_config = Config(
            signature_version="s3v4",
            s3={"addressing_style": "virtual"},
        )

        self._s3_client = boto3.client(
            "s3",
            endpoint_url=config.endpoint_url,
            aws_access_key_id=config.access_key_id or None,
            aws_secret_access_key=config.secret_access_key or None,
            region_name=config.region,
            config=boto_config,
        )

        logger.info(
            "Initialized S3 storage client",
            extra={
                "bucket": config.bucket_name,
                "region": config.region,
            }
        )

    def put_object(self, upload: ObjectUpload) -> None:
        """Upload one object. botocore errors are re-raised unchanged."""
        params = build_put_object_params(self._config.bucket_name, upload)

        try:
            self._s3_client.put_object(**params)
        except Exception as e:
            logger.error(
                "Failed to upload object",
                extra={
                    "bucket": self._config.bucket_name,
                    "key": upload.key,
                    "error": str(e),
                }
            )
            raise

        logger.debug(
            "Uploaded object",
            extra={
                "key": upload.key,
                "acl": upload.acl.value,
                "size_bytes": upload.size_bytes,
            }
        )

    def get_presigned_url(
        self,
        storage_path: str,
        expiry_seconds: int = 3600,
    ) -> str:
        """Generate a temporary GET URL valid for expiry_seconds."""
        try:
            return self._s3_client.generate_presigned_url(
                "get_object",
                Params={
                    "Bucket": self._config.bucket_name,
                    "Key": storage_path,
                },
                ExpiresIn=expiry_seconds,
            )
        except Exception as e:
            logger.error(
                "Failed to generate presigned URL",
                extra={"storage_path": storage_path, "error": str(e)}
            )
            raise


# ---------------------------------------------------------------------------
# Mock Storage for Local Development
# ---------------------------------------------------------------------------

class MockStorageClient:
    """
    In-memory storage for local runs and tests.

    Objects are kept in a dictionary keyed by object key. Presigned
    URLs mimic the S3 shape, including X-Amz-Expires, but carry no
    real signature.
    """

    def __init__(self, config: Optional[StorageConfig] = None) -> None:
        self._bucket = config.bucket_name if config else "mock-bucket"
        self._region = config.region if config else "us-east-1"
        self.objects: dict[str, ObjectUpload] = {}
        logger.info("Initialized mock storage client (in-memory)")

    def put_object(self, upload: ObjectUpload) -> None:
        """Store object in memory."""
        self.objects[upload.key] = upload

        logger.debug(
            "Stored object in mock storage",
            extra={"key": upload.key, "size_bytes": upload.size_bytes},
        )

    def get_presigned_url(
        self,
        storage_path: str,
        expiry_seconds: int = 3600,
    ) -> str:
        return (
            f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{storage_path}"
            f"?X-Amz-Expires={expiry_seconds}&X-Amz-Signature=mock"
        )


# ---------------------------------------------------------------------------
# Factory Function
# ---------------------------------------------------------------------------

def create_storage_client(
    config: Optional[StorageConfig] = None,
    mock_mode: bool = False,
) -> StorageClient:
    """
    Create storage client based on configuration.

    Args:
        config: Storage configuration (required if not mock_mode)
        mock_mode: If True, return the in-memory client

    Returns:
        StorageClient implementation (S3 or Mock)
    """
    if mock_mode:
        return MockStorageClient(config)

    if config is None:
        raise ValueError("config is required when not in mock mode")

    return S3StorageClient(config)
