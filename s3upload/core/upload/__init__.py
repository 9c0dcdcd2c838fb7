"""
Artifact upload rules.

Contains the upload request, key/tag/checksum rules, URL strategies,
and the uploader service.
"""

from .errors import InputValidationError, UnsupportedChecksumAlgorithm
from .models import (
    Checksum,
    ChecksumAlgorithm,
    ObjectAcl,
    ObjectLocation,
    ObjectUpload,
    RunResult,
    Tag,
    UploadResult,
)
from .request import UploadRequest
from .uploader import ArtifactUploader, QrEncoder, StorageClient

__all__ = [
    "InputValidationError",
    "UnsupportedChecksumAlgorithm",
    "Checksum",
    "ChecksumAlgorithm",
    "ObjectAcl",
    "ObjectLocation",
    "ObjectUpload",
    "RunResult",
    "Tag",
    "UploadResult",
    "UploadRequest",
    "ArtifactUploader",
    "QrEncoder",
    "StorageClient",
]
