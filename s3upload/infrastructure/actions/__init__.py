"""GitHub Actions outputs and workflow commands."""

from .outputs import ActionReporter, escape_command_data

__all__ = ["ActionReporter", "escape_command_data"]
