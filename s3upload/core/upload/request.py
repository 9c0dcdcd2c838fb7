"""
Validated upload request.

Raw action inputs are strings. This module turns them into an
UploadRequest whose invariants are checked at construction time, so
nothing touches the network with an out-of-range value.
"""

import mimetypes
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .errors import InputValidationError
from .keys import build_object_key, build_qr_key
from .models import Checksum, ObjectAcl, ObjectLocation, Tag

MIN_EXPIRE_SECONDS = 0
MAX_EXPIRE_SECONDS = 604800  # 7 days, the SigV4 presign limit
MIN_QR_WIDTH = 100
MAX_QR_WIDTH = 1000

DEFAULT_CONTENT_DISPOSITION = "inline"

EXPIRE_ERROR = (
    f'"expire" input should be a number between '
    f"{MIN_EXPIRE_SECONDS} and {MAX_EXPIRE_SECONDS}."
)
QR_WIDTH_ERROR = (
    f'"qr-width" input should be a number between '
    f"{MIN_QR_WIDTH} and {MAX_QR_WIDTH}."
)


def _parse_int(raw: str, message: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise InputValidationError(message) from None


def parse_expire(raw: str) -> int:
    expire = _parse_int(raw, EXPIRE_ERROR)
    if not MIN_EXPIRE_SECONDS <= expire <= MAX_EXPIRE_SECONDS:
        raise InputValidationError(EXPIRE_ERROR)
    return expire


def parse_qr_width(raw: str) -> int:
    width = _parse_int(raw, QR_WIDTH_ERROR)
    if not MIN_QR_WIDTH <= width <= MAX_QR_WIDTH:
        raise InputValidationError(QR_WIDTH_ERROR)
    return width


def parse_flag(raw: str) -> bool:
    """Only the string "true" (any case) enables a flag."""
    return raw.strip().lower() == "true"


def guess_content_type(file_path: str) -> Optional[str]:
    content_type, _ = mimetypes.guess_type(file_path)
    return content_type


@dataclass
class UploadRequest:
    """
    A fully validated upload.

    bucket_root and destination_dir are expected already normalized
    (see keys.normalize_prefix); both are shared by the file and its
    QR companion.
    """
    bucket: str
    region: str
    file_path: Path
    bucket_root: str
    destination_dir: str
    public: bool = False
    expire: int = 120
    qr_width: int = 120
    content_type: Optional[str] = None
    content_disposition: str = DEFAULT_CONTENT_DISPOSITION
    alternative_domain_public: str = ""
    alternative_domain_private: str = ""
    tags: list[Tag] = field(default_factory=list)
    checksum: Optional[Checksum] = None
    output_file_url: bool = True
    output_qr_url: bool = False

    def __post_init__(self) -> None:
        if not self.bucket:
            raise InputValidationError("Bucket name is required")
        if not MIN_EXPIRE_SECONDS <= self.expire <= MAX_EXPIRE_SECONDS:
            raise InputValidationError(EXPIRE_ERROR)
        if not MIN_QR_WIDTH <= self.qr_width <= MAX_QR_WIDTH:
            raise InputValidationError(QR_WIDTH_ERROR)
        self.file_path = Path(self.file_path)

    @property
    def acl(self) -> ObjectAcl:
        return ObjectAcl.for_visibility(self.public)

    @property
    def file_key(self) -> str:
        return build_object_key(self.bucket_root, self.destination_dir, str(self.file_path))

    @property
    def qr_key(self) -> str:
        return build_qr_key(self.bucket_root, self.destination_dir)

    @property
    def file_location(self) -> ObjectLocation:
        return self._location(self.file_key)

    @property
    def qr_location(self) -> ObjectLocation:
        return self._location(self.qr_key)

    @property
    def resolved_content_type(self) -> Optional[str]:
        """Explicit content type, else a guess from the file name."""
        return self.content_type or guess_content_type(self.file_path.name)

    @property
    def wants_file_url(self) -> bool:
        """The file URL is needed for its own output and to encode the QR."""
        return self.output_file_url or self.output_qr_url

    def _location(self, key: str) -> ObjectLocation:
        return ObjectLocation(
            bucket=self.bucket,
            region=self.region,
            key=key,
            bucket_root=self.bucket_root,
        )
