"""
URL presentation strategies.

An uploaded object is identified by its ObjectLocation. How that
location is shown to people depends on the deployment:
- straight from S3 (virtual-hosted style URL)
- through an alternative domain, e.g. a CDN in front of the bucket
  root

Signed URLs are produced by the storage client; strategies only decide
which host and path they are presented on.
"""

from abc import ABC, abstractmethod
from urllib.parse import quote, urlsplit, urlunsplit

from .models import ObjectLocation


def _quote_key(key: str) -> str:
    return quote(key, safe="/~")


class UrlStrategy(ABC):
    """Base class for turning object locations into URLs."""

    @abstractmethod
    def public_url(self, location: ObjectLocation) -> str:
        """URL for an object readable by anyone."""
        ...

    @abstractmethod
    def signed_url(self, location: ObjectLocation, presigned_url: str) -> str:
        """URL for a private object, given the storage client's signed URL."""
        ...


class S3UrlStrategy(UrlStrategy):
    """
    Present objects on their S3 virtual-hosted host.

    https://<bucket>.s3.<region>.amazonaws.com/<key>
    """

    def public_url(self, location: ObjectLocation) -> str:
        return (
            f"https://{location.bucket}.s3.{location.region}.amazonaws.com/"
            f"{_quote_key(location.key)}"
        )

    def signed_url(self, location: ObjectLocation, presigned_url: str) -> str:
        return presigned_url


class AlternativeDomainStrategy(UrlStrategy):
    """
    Present objects through a domain mapped onto the bucket root.

    The domain replaces "<bucket host>/<bucket root>", so with domain
    cdn.example.com the key artifacts/x/y.txt becomes
    https://cdn.example.com/x/y.txt. The domain may include a scheme
    and a path prefix (cdn.example.com/files). Signed URLs keep their
    query string.
    """

    def __init__(self, domain: str) -> None:
        domain = domain.strip()
        if not domain:
            raise ValueError("Alternative domain cannot be empty")
        if "://" not in domain:
            domain = f"https://{domain}"

        parts = urlsplit(domain)
        self._scheme = parts.scheme
        self._netloc = parts.netloc
        self._path_prefix = parts.path.rstrip("/")

    def _path(self, location: ObjectLocation) -> str:
        return f"{self._path_prefix}/{_quote_key(location.relative_key)}"

    def public_url(self, location: ObjectLocation) -> str:
        return urlunsplit((self._scheme, self._netloc, self._path(location), "", ""))

    def signed_url(self, location: ObjectLocation, presigned_url: str) -> str:
        query = urlsplit(presigned_url).query
        return urlunsplit((self._scheme, self._netloc, self._path(location), query, ""))


def select_url_strategy(alternative_domain: str = "") -> UrlStrategy:
    """Pick the strategy for a (possibly empty) alternative domain input."""
    if alternative_domain.strip():
        return AlternativeDomainStrategy(alternative_domain)
    return S3UrlStrategy()
