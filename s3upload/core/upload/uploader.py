"""
Artifact upload orchestration.

ArtifactUploader runs the whole flow for one validated request:
upload the file, resolve its URL, and optionally publish a QR code of
that URL next to it. Storage and QR rendering are injected, so the
flow can run against in-memory fakes.
"""

import logging
from typing import Protocol

from .models import ObjectAcl, ObjectUpload, UploadResult
from .request import UploadRequest
from .tags import serialize_tagging
from .urls import select_url_strategy

logger = logging.getLogger(__name__)

QR_CONTENT_TYPE = "image/png"


# ---------------------------------------------------------------------------
# Protocols (interfaces)
# ---------------------------------------------------------------------------

class StorageClient(Protocol):
    """Object storage operations needed by an upload run."""

    def put_object(self, upload: ObjectUpload) -> None:
        """Store one object in the configured bucket."""
        ...

    def get_presigned_url(self, storage_path: str, expiry_seconds: int = 3600) -> str:
        """Generate a temporary GET URL for a stored object."""
        ...


class QrEncoder(Protocol):
    """Renders text as a square PNG QR code."""

    def render_png(self, data: str, width: int) -> bytes:
        ...


# ---------------------------------------------------------------------------
# Uploader Service
# ---------------------------------------------------------------------------

class ArtifactUploader:
    """
    Uploads one artifact and reports where it can be fetched.

    Holds no per-run state; everything about a run is in the
    UploadRequest passed to upload().
    """

    def __init__(self, storage_client: StorageClient, qr_encoder: QrEncoder) -> None:
        self._storage = storage_client
        self._qr_encoder = qr_encoder

    def upload(self, request: UploadRequest) -> UploadResult:
        """
        Run the upload flow.

        Errors from storage or the filesystem propagate unchanged.
        Objects already written stay in the bucket when a later step
        fails.
        """
        body = request.file_path.read_bytes()

        self._storage.put_object(
            ObjectUpload(
                key=request.file_key,
                body=body,
                acl=request.acl,
                content_type=request.resolved_content_type,
                content_disposition=request.content_disposition,
                tagging=serialize_tagging(request.tags) if request.tags else None,
                checksum=request.checksum,
            )
        )

        logger.info(
            "Uploaded file",
            extra={
                "bucket": request.bucket,
                "key": request.file_key,
                "acl": request.acl.value,
                "size_bytes": len(body),
            }
        )

        result = UploadResult(file_key=request.file_key)

        if not request.wants_file_url:
            return result

        file_url = self.resolve_file_url(request)
        if request.output_file_url:
            result.file_url = file_url

        if request.output_qr_url:
            try:
                result.qr_key = request.qr_key
                result.qr_url = self._publish_qr(request, file_url)
            except Exception:
                logger.warning(
                    "QR upload failed; uploaded file is left in place",
                    extra={"bucket": request.bucket, "key": request.file_key},
                )
                raise

        return result

    def resolve_file_url(self, request: UploadRequest) -> str:
        """Public URL for public files, signed URL otherwise."""
        location = request.file_location

        if request.public:
            strategy = select_url_strategy(request.alternative_domain_public)
            return strategy.public_url(location)

        strategy = select_url_strategy(request.alternative_domain_private)
        presigned_url = self._storage.get_presigned_url(
            location.key,
            expiry_seconds=request.expire,
        )

        logger.debug(
            "Generated presigned URL",
            extra={"key": location.key, "expire": request.expire},
        )

        return strategy.signed_url(location, presigned_url)

    def _publish_qr(self, request: UploadRequest, file_url: str) -> str:
        """
        Upload a QR code of file_url and return its URL.

        The QR object is always public and always presented through the
        public alternative domain, whatever the file's visibility.
        """
        image = self._qr_encoder.render_png(file_url, request.qr_width)

        self._storage.put_object(
            ObjectUpload(
                key=request.qr_key,
                body=image,
                acl=ObjectAcl.PUBLIC_READ,
                content_type=QR_CONTENT_TYPE,
            )
        )

        logger.info(
            "Uploaded QR code",
            extra={"key": request.qr_key, "width": request.qr_width},
        )

        strategy = select_url_strategy(request.alternative_domain_public)
        return strategy.public_url(request.qr_location)
