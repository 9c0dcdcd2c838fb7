"""
Domain models for artifact uploads.

These models describe what gets stored and where. They have no
dependencies on boto3 or the CI host.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ObjectAcl(Enum):
    """Canned ACLs applied to uploaded objects."""
    PUBLIC_READ = "public-read"
    PRIVATE = "private"

    @classmethod
    def for_visibility(cls, public: bool) -> "ObjectAcl":
        return cls.PUBLIC_READ if public else cls.PRIVATE


class ChecksumAlgorithm(Enum):
    """Checksum algorithms accepted by S3 PutObject."""
    CRC32 = "CRC32"
    CRC32C = "CRC32C"
    CRC64NVME = "CRC64NVME"
    SHA1 = "SHA1"
    SHA256 = "SHA256"

    @property
    def field_name(self) -> str:
        """PutObject parameter carrying a precomputed value, e.g. ChecksumSHA256."""
        return f"Checksum{self.value}"


class RunResult(Enum):
    """Overall result reported back to the pipeline."""
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class Tag:
    """A single object tag."""
    key: str
    value: str = ""


@dataclass(frozen=True)
class Checksum:
    """
    Checksum settings for an upload.

    When value is None S3 (or the SDK) computes the checksum itself.
    The value is always base64, which is what the S3 API expects.
    """
    algorithm: ChecksumAlgorithm
    value: Optional[str] = None


@dataclass(frozen=True)
class ObjectLocation:
    """
    Where an object lives.

    URLs are derived from a location by a URL strategy rather than
    stored, so the same object can be presented through S3 or through
    an alternative domain.
    """
    bucket: str
    region: str
    key: str
    bucket_root: str = ""

    @property
    def relative_key(self) -> str:
        """Key below the bucket root."""
        if self.bucket_root and self.key.startswith(self.bucket_root):
            return self.key[len(self.bucket_root):]
        return self.key


@dataclass
class ObjectUpload:
    """Everything a single PutObject call needs, minus the bucket."""
    key: str
    body: bytes
    acl: ObjectAcl
    content_type: Optional[str] = None
    content_disposition: Optional[str] = None
    tagging: Optional[str] = None
    checksum: Optional[Checksum] = None

    @property
    def size_bytes(self) -> int:
        return len(self.body)


@dataclass
class UploadResult:
    """Keys written and URLs resolved by one run."""
    file_key: str
    qr_key: Optional[str] = None
    file_url: Optional[str] = None
    qr_url: Optional[str] = None
