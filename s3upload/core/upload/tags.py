"""Object tag parsing and serialization."""

from urllib.parse import quote, urlencode

from .errors import InputValidationError
from .models import Tag


def parse_tags(raw: str) -> list[Tag]:
    """
    Parse comma-separated Key=Value pairs.

    "A=1, B=2,,C=" -> [Tag("A", "1"), Tag("B", "2"), Tag("C", "")]

    The key is everything before the first "=", the value is the rest.
    Empty pairs are skipped; a pair without "=" gets an empty value.
    """
    tags = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue

        key, _, value = pair.partition("=")
        key = key.strip()
        # S3 rejects an empty tag key; fail before anything is uploaded.
        if not key:
            raise InputValidationError(f"Tag key cannot be empty: {pair!r}")

        tags.append(Tag(key=key, value=value.strip()))

    return tags


def serialize_tagging(tags: list[Tag]) -> str:
    """Encode tags as the query string S3 expects in the Tagging header."""
    return urlencode([(tag.key, tag.value) for tag in tags], quote_via=quote)
