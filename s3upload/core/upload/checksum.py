"""
Checksum validation and normalization.

Callers may hand us a checksum computed by another tool. Most tools
print hex digests while the S3 API wants base64, so hex values are
re-encoded; anything else is assumed to be base64 already.
"""

import base64
import binascii
import re
from typing import Optional

from .errors import UnsupportedChecksumAlgorithm
from .models import Checksum, ChecksumAlgorithm

_HEX_PATTERN = re.compile(r"^[0-9a-fA-F]+$")


def parse_algorithm(raw: str) -> Optional[ChecksumAlgorithm]:
    """Parse a checksum algorithm name. Empty input means no checksum."""
    name = raw.strip().upper()
    if not name:
        return None

    try:
        return ChecksumAlgorithm(name)
    except ValueError:
        raise UnsupportedChecksumAlgorithm(
            f"Unsupported checksum algorithm: {raw}"
        ) from None


def normalize_checksum_value(value: str) -> str:
    """
    Convert a hex digest to base64, pass anything else through.

    Odd-length hex strings can't be decoded to bytes. They are passed
    through unchanged, not truncated or padded, so S3 sees exactly what
    was supplied and rejects it if it doesn't match the object.
    """
    if not _HEX_PATTERN.match(value):
        return value

    try:
        digest = binascii.unhexlify(value)
    except binascii.Error:
        return value

    return base64.b64encode(digest).decode("ascii")


def build_checksum(algorithm_raw: str, value_raw: str = "") -> Optional[Checksum]:
    algorithm = parse_algorithm(algorithm_raw)
    if algorithm is None:
        return None

    value = value_raw.strip()
    return Checksum(
        algorithm=algorithm,
        value=normalize_checksum_value(value) if value else None,
    )
