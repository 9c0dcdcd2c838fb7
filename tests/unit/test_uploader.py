"""
Unit tests for the upload flow.

ArtifactUploader runs against the in-memory storage client and a
recording QR encoder, so these tests cover the whole flow without
network access.
"""

from urllib.parse import parse_qs, urlsplit

import pytest

from s3upload.core.upload.errors import InputValidationError
from s3upload.core.upload.models import ChecksumAlgorithm, ObjectAcl
from s3upload.core.upload.request import UploadRequest
from s3upload.core.upload.uploader import ArtifactUploader

from ..fakes import FailingStorageClient


class TestUploadRequest:
    """Tests for request validation and derived values."""

    def test_builds_keys_from_inputs(self, make_inputs, artifact):
        """Keys combine bucket root, destination and file name."""
        request = make_inputs(bucket_root="/a/b").to_upload_request()

        assert request.file_key == f"a/b/x/{artifact.name}"
        assert request.qr_key == "a/b/x/qr.png"

    def test_random_directory_shared_by_file_and_qr(self, make_inputs):
        """File and QR share one random directory."""
        request = make_inputs(destination_dir="").to_upload_request()
        directory = request.destination_dir

        assert len(directory) == 33
        assert request.file_key.startswith("artifacts/" + directory)
        assert request.qr_key == "artifacts/" + directory + "qr.png"

    def test_two_runs_get_different_directories(self, make_inputs):
        """Each run draws a new random directory."""
        inputs = make_inputs(destination_dir="")
        assert inputs.to_upload_request().destination_dir != inputs.to_upload_request().destination_dir

    def test_defaults(self, make_inputs):
        """Private, inline, 120-second expiry and file URL only by default."""
        request = make_inputs().to_upload_request()

        assert request.acl is ObjectAcl.PRIVATE
        assert request.content_disposition == "inline"
        assert request.expire == 120
        assert request.output_file_url is True
        assert request.output_qr_url is False

    def test_content_type_guessed_when_empty(self, make_inputs):
        """An empty content type is guessed from the file name."""
        request = make_inputs().to_upload_request()
        assert request.resolved_content_type == "text/plain"

    def test_explicit_content_type_wins(self, make_inputs):
        """A supplied content type is used as given."""
        request = make_inputs(content_type="application/octet-stream").to_upload_request()
        assert request.resolved_content_type == "application/octet-stream"

    def test_invalid_expire_rejected(self, make_inputs):
        """Bad expiry fails when the request is built."""
        with pytest.raises(InputValidationError):
            make_inputs(expire="604801").to_upload_request()

    def test_direct_construction_checks_ranges(self, artifact):
        """Constructing UploadRequest directly still checks ranges."""
        with pytest.raises(InputValidationError, match='"qr-width"'):
            UploadRequest(
                bucket="b",
                region="r",
                file_path=artifact,
                bucket_root="artifacts/",
                destination_dir="x/",
                qr_width=0,
            )


class TestArtifactUploader:
    """Tests for the upload orchestration."""

    def test_public_file_url(self, make_inputs, storage, qr_encoder, artifact):
        """Public files get the plain S3 URL."""
        request = make_inputs(public="true").to_upload_request()

        result = ArtifactUploader(storage, qr_encoder).upload(request)

        assert result.file_url == f"https://b.s3.r.amazonaws.com/artifacts/x/{artifact.name}"
        stored = storage.objects[request.file_key]
        assert stored.acl is ObjectAcl.PUBLIC_READ
        assert stored.body == b"artifact-bytes"

    def test_public_file_alternative_domain(self, make_inputs, storage, qr_encoder, artifact):
        """The public domain replaces host and bucket root."""
        request = make_inputs(
            public="true",
            alternative_domain_public="cdn.example.com",
        ).to_upload_request()

        result = ArtifactUploader(storage, qr_encoder).upload(request)

        assert result.file_url == f"https://cdn.example.com/x/{artifact.name}"

    def test_private_file_gets_signed_url_with_expiry(self, make_inputs, storage, qr_encoder):
        """Private files get a signed URL with the requested expiry."""
        request = make_inputs(expire="180").to_upload_request()

        result = ArtifactUploader(storage, qr_encoder).upload(request)

        query = parse_qs(urlsplit(result.file_url).query)
        assert query["X-Amz-Expires"] == ["180"]
        assert storage.objects[request.file_key].acl is ObjectAcl.PRIVATE

    def test_private_file_uses_private_domain(self, make_inputs, storage, qr_encoder, artifact):
        """The private domain keeps the signature query."""
        request = make_inputs(
            alternative_domain_public="public.example.com",
            alternative_domain_private="private.example.com",
        ).to_upload_request()

        result = ArtifactUploader(storage, qr_encoder).upload(request)

        parts = urlsplit(result.file_url)
        assert parts.netloc == "private.example.com"
        assert parts.path == f"/x/{artifact.name}"

    def test_upload_metadata(self, make_inputs, storage, qr_encoder):
        """Content settings, tags and checksum reach put_object."""
        request = make_inputs(
            tags="A=1, B=2,,C=",
            checksum_algorithm="SHA256",
            checksum="deadbeef",
            content_disposition="attachment",
        ).to_upload_request()

        ArtifactUploader(storage, qr_encoder).upload(request)

        stored = storage.objects[request.file_key]
        assert stored.tagging == "A=1&B=2&C="
        assert stored.checksum.algorithm is ChecksumAlgorithm.SHA256
        assert stored.checksum.value == "3q2+7w=="
        assert stored.content_disposition == "attachment"

    def test_no_urls_requested(self, make_inputs, storage, qr_encoder):
        """Nothing is resolved when no URL output is wanted."""
        request = make_inputs(output_file_url="false").to_upload_request()

        result = ArtifactUploader(storage, qr_encoder).upload(request)

        assert result.file_url is None
        assert result.qr_url is None
        assert list(storage.objects) == [request.file_key]

    def test_qr_is_public_even_for_private_file(self, make_inputs, storage, qr_encoder):
        """The QR object is public-read regardless of the file."""
        request = make_inputs(output_qr_url="true", qr_width="200").to_upload_request()

        result = ArtifactUploader(storage, qr_encoder).upload(request)

        qr = storage.objects["artifacts/x/qr.png"]
        assert qr.acl is ObjectAcl.PUBLIC_READ
        assert qr.content_type == "image/png"
        assert qr_encoder.calls == [(result.file_url, 200)]
        assert result.qr_url == "https://b.s3.r.amazonaws.com/artifacts/x/qr.png"

    def test_qr_url_uses_public_domain(self, make_inputs, storage, qr_encoder):
        """The QR URL uses the public domain."""
        request = make_inputs(
            output_qr_url="true",
            alternative_domain_public="public.example.com",
            alternative_domain_private="private.example.com",
        ).to_upload_request()

        result = ArtifactUploader(storage, qr_encoder).upload(request)

        assert result.qr_url == "https://public.example.com/x/qr.png"

    def test_qr_without_file_url_output(self, make_inputs, storage, qr_encoder):
        """The file URL is still resolved to encode it, just not reported."""
        request = make_inputs(output_file_url="false", output_qr_url="true").to_upload_request()

        result = ArtifactUploader(storage, qr_encoder).upload(request)

        assert result.file_url is None
        assert result.qr_url is not None
        assert len(qr_encoder.calls) == 1

    def test_qr_failure_leaves_file_in_place(self, make_inputs, storage_config, qr_encoder):
        """A failed QR upload leaves the file object in the bucket."""
        storage = FailingStorageClient(storage_config, fail_suffix="qr.png")
        request = make_inputs(output_qr_url="true").to_upload_request()

        with pytest.raises(RuntimeError, match="Access Denied"):
            ArtifactUploader(storage, qr_encoder).upload(request)

        assert request.file_key in storage.objects

    def test_missing_file_propagates(self, make_inputs, storage, qr_encoder, tmp_path):
        """A missing source file fails before any upload."""
        request = make_inputs(file_path=str(tmp_path / "missing.txt")).to_upload_request()

        with pytest.raises(FileNotFoundError):
            ArtifactUploader(storage, qr_encoder).upload(request)

        assert storage.objects == {}
