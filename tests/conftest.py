"""Shared fixtures for unit tests."""

import pytest

from s3upload.config.inputs import ActionInputs
from s3upload.config.settings import get_settings
from s3upload.infrastructure.storage.client import MockStorageClient, StorageConfig

from .fakes import RecordingQrEncoder


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def artifact(tmp_path):
    path = tmp_path / "build-report.txt"
    path.write_bytes(b"artifact-bytes")
    return path


@pytest.fixture
def storage_config():
    return StorageConfig(bucket_name="b", region="r")


@pytest.fixture
def storage(storage_config):
    return MockStorageClient(storage_config)


@pytest.fixture
def qr_encoder():
    return RecordingQrEncoder()


@pytest.fixture
def make_inputs(artifact):
    """Build ActionInputs for the artifact fixture with overrides."""
    def _make(**overrides) -> ActionInputs:
        values = {
            "aws_access_key_id": "AKIDEXAMPLE",
            "aws_secret_access_key": "secret",
            "aws_region": "r",
            "aws_bucket": "b",
            "file_path": str(artifact),
            "destination_dir": "x",
        }
        values.update(overrides)
        return ActionInputs(**values)

    return _make
