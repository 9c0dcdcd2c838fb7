"""Errors raised while validating upload inputs."""


class InputValidationError(ValueError):
    """Raised when an input fails validation before any network call."""
    pass


class UnsupportedChecksumAlgorithm(InputValidationError):
    """Raised when the checksum algorithm is not one S3 accepts."""
    pass
