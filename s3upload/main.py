"""
Command-line entry point.

Runs one upload as a workflow step:

    python -m s3upload

For a local run against the fixed local profile:

    APP_ENV=local python -m s3upload --mock-storage
"""

import argparse
import logging
import os
import sys
from typing import Optional

from .config.inputs import ActionInputs, load_action_inputs
from .config.settings import Settings, get_settings
from .core.upload.models import RunResult
from .core.upload.uploader import ArtifactUploader, QrEncoder, StorageClient
from .infrastructure.actions.outputs import ActionReporter
from .infrastructure.qr.encoder import QrCodeEncoder
from .infrastructure.storage.client import StorageConfig, create_storage_client

logger = logging.getLogger(__name__)


def build_storage_client(
    inputs: ActionInputs,
    settings: Settings,
    mock_mode: bool = False,
) -> StorageClient:
    config = StorageConfig(
        bucket_name=inputs.aws_bucket,
        region=inputs.aws_region,
        access_key_id=inputs.aws_access_key_id,
        secret_access_key=inputs.aws_secret_access_key,
        endpoint_url=settings.aws_endpoint_url,
    )
    return create_storage_client(config, mock_mode=mock_mode or settings.storage_mock_mode)


def run_action(
    settings: Settings,
    reporter: ActionReporter,
    storage_client: Optional[StorageClient] = None,
    qr_encoder: Optional[QrEncoder] = None,
    mock_storage: bool = False,
) -> RunResult:
    """
    Run one upload and report the outcome.

    Every exception ends up here: the result output is set to failure
    and the exception message becomes the step's failure text.
    """
    try:
        inputs = load_action_inputs(settings)
        if not settings.is_local:
            reporter.mask(inputs.aws_secret_access_key)

        request = inputs.to_upload_request()

        if storage_client is None:
            storage_client = build_storage_client(inputs, settings, mock_mode=mock_storage)

        uploader = ArtifactUploader(
            storage_client=storage_client,
            qr_encoder=qr_encoder or QrCodeEncoder(),
        )
        result = uploader.upload(request)

        if result.file_url is not None:
            reporter.set_output("file-url", result.file_url)
        if result.qr_url is not None:
            reporter.set_output("qr-url", result.qr_url)

    except Exception as exc:
        logger.error(
            "Upload failed",
            extra={"error": str(exc)},
            exc_info=exc,
        )
        reporter.set_output("result", RunResult.FAILURE.value)
        reporter.set_failed(str(exc))
        return RunResult.FAILURE

    reporter.set_output("result", RunResult.SUCCESS.value)

    logger.info(
        "Upload finished",
        extra={"key": result.file_key, "qr_key": result.qr_key},
    )

    return RunResult.SUCCESS


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Upload a file to S3 from a workflow step")
    parser.add_argument(
        "--mock-storage",
        action="store_true",
        help="Store objects in memory instead of S3",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (defaults to LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)

    try:
        settings = get_settings()

        # stderr only; stdout carries workflow commands
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=(args.log_level or settings.log_level).upper(),
            stream=sys.stderr,
        )
    except Exception as exc:
        logger.error("Startup failed", extra={"error": str(exc)}, exc_info=exc)
        # Settings are unusable, so GITHUB_OUTPUT is read directly.
        reporter = ActionReporter(output_path=os.environ.get("GITHUB_OUTPUT"))
        reporter.set_output("result", RunResult.FAILURE.value)
        reporter.set_failed(str(exc))
        return 1

    reporter = ActionReporter(output_path=settings.github_output)
    result = run_action(settings, reporter, mock_storage=args.mock_storage)

    return 0 if result is RunResult.SUCCESS else 1


if __name__ == "__main__":
    sys.exit(main())
