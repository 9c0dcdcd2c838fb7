"""
Object key construction.

Keys are built as <bucket root><destination dir><file name>. Both
directory segments are normalized the same way so callers can pass
"/a/b", "a/b" or "a/b/" interchangeably.
"""

import secrets
from pathlib import PurePath

DEFAULT_BUCKET_ROOT = "artifacts/"
QR_FILE_NAME = "qr.png"

RANDOM_DIR_LENGTH = 32
# 61 characters; uppercase "I" is not part of the alphabet.
RANDOM_DIR_ALPHABET = (
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHJKLMNOPQRSTUVWXYZ"
    "0123456789"
)


def normalize_prefix(value: str) -> str:
    """
    Normalize a directory-like key segment.

    Strips one leading slash and appends a trailing slash when the
    result is non-empty and not already slash-terminated.
    """
    if value.startswith("/"):
        value = value[1:]
    if value and not value.endswith("/"):
        value += "/"
    return value


def random_directory(length: int = RANDOM_DIR_LENGTH) -> str:
    """Generate a random directory name (without trailing slash)."""
    return "".join(secrets.choice(RANDOM_DIR_ALPHABET) for _ in range(length))


def resolve_bucket_root(raw: str) -> str:
    """Normalized bucket root, defaulting to artifacts/ when empty."""
    if not raw:
        return DEFAULT_BUCKET_ROOT
    return normalize_prefix(raw)


def resolve_destination_dir(raw: str, directory_factory=random_directory) -> str:
    """Normalized destination dir, generating a random one when empty."""
    if not raw:
        return directory_factory() + "/"
    return normalize_prefix(raw)


def build_object_key(bucket_root: str, destination_dir: str, file_path: str) -> str:
    return bucket_root + destination_dir + PurePath(file_path).name


def build_qr_key(bucket_root: str, destination_dir: str) -> str:
    return bucket_root + destination_dir + QR_FILE_NAME
