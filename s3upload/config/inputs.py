"""
Action inputs.

Inputs arrive as strings. In a workflow the runner exposes each one as
an INPUT_<NAME> environment variable (upper-cased, hyphens kept, e.g.
INPUT_AWS-ACCESS-KEY-ID). The local profile uses a fixed set instead.
"""

import os
from typing import Callable, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from s3upload.core.upload.checksum import build_checksum
from s3upload.core.upload.keys import (
    random_directory,
    resolve_bucket_root,
    resolve_destination_dir,
)
from s3upload.core.upload.request import (
    DEFAULT_CONTENT_DISPOSITION,
    UploadRequest,
    parse_expire,
    parse_flag,
    parse_qr_width,
)
from s3upload.core.upload.tags import parse_tags

from .settings import Settings

REQUIRED_INPUTS = (
    "aws_access_key_id",
    "aws_secret_access_key",
    "aws_region",
    "aws_bucket",
    "file_path",
)


class ConfigurationError(Exception):
    """Raised when required inputs are missing."""
    pass


def input_name(field_name: str) -> str:
    """aws_bucket -> aws-bucket"""
    return field_name.replace("_", "-")


def input_env_var(field_name: str) -> str:
    """aws_bucket -> INPUT_AWS-BUCKET"""
    return "INPUT_" + input_name(field_name).upper()


class ActionInputs(BaseModel):
    """
    Raw action inputs.

    Defaults mirror action.yml so a missing optional input behaves the
    same as one the runner filled with its default.
    """
    model_config = ConfigDict(frozen=True)

    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    aws_region: str = ""
    aws_bucket: str = ""
    file_path: str = ""
    destination_dir: str = ""
    bucket_root: str = ""
    output_file_url: str = "true"
    content_type: str = ""
    content_disposition: str = ""
    output_qr_url: str = "false"
    qr_width: str = "120"
    public: str = "false"
    expire: str = "120"
    alternative_domain_public: str = ""
    alternative_domain_private: str = ""
    tags: str = ""
    checksum_algorithm: str = ""
    checksum: str = ""

    def missing_required(self) -> list[str]:
        """Input names (hyphenated) of required inputs left empty."""
        return [
            input_name(name)
            for name in REQUIRED_INPUTS
            if not getattr(self, name)
        ]

    def to_upload_request(
        self,
        directory_factory: Callable[[], str] = random_directory,
    ) -> UploadRequest:
        """
        Validate and normalize into an UploadRequest.

        Raises InputValidationError (or UnsupportedChecksumAlgorithm) on
        bad values. The random destination directory, when needed, is
        drawn here exactly once.
        """
        return UploadRequest(
            bucket=self.aws_bucket,
            region=self.aws_region,
            file_path=self.file_path,
            bucket_root=resolve_bucket_root(self.bucket_root),
            destination_dir=resolve_destination_dir(self.destination_dir, directory_factory),
            public=parse_flag(self.public),
            expire=parse_expire(self.expire),
            qr_width=parse_qr_width(self.qr_width),
            content_type=self.content_type or None,
            content_disposition=self.content_disposition or DEFAULT_CONTENT_DISPOSITION,
            alternative_domain_public=self.alternative_domain_public,
            alternative_domain_private=self.alternative_domain_private,
            tags=parse_tags(self.tags),
            checksum=build_checksum(self.checksum_algorithm, self.checksum),
            output_file_url=parse_flag(self.output_file_url),
            output_qr_url=parse_flag(self.output_qr_url),
        )


def read_action_inputs(environ: Optional[Mapping[str, str]] = None) -> ActionInputs:
    """
    Read inputs from INPUT_* environment variables (pipeline profile).

    Values are trimmed. Raises ConfigurationError naming every missing
    required input.
    """
    environ = os.environ if environ is None else environ

    values = {}
    for name in ActionInputs.model_fields:
        raw = environ.get(input_env_var(name))
        if raw is not None:
            values[name] = raw.strip()

    inputs = ActionInputs(**values)

    missing = inputs.missing_required()
    if missing:
        raise ConfigurationError(
            f"Input required and not supplied: {', '.join(missing)}"
        )

    return inputs


def local_action_inputs(settings: Settings) -> ActionInputs:
    """Fixed inputs for running from a checkout (local profile)."""
    return ActionInputs(
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
        aws_region="ap-northeast-1",
        aws_bucket=settings.aws_bucket,
        file_path="./README.md",
        output_file_url="true",
        output_qr_url="true",
        qr_width="120",
        public="false",
        expire="180",
    )


def load_action_inputs(
    settings: Settings,
    environ: Optional[Mapping[str, str]] = None,
) -> ActionInputs:
    if settings.is_local:
        return local_action_inputs(settings)
    return read_action_inputs(environ)
