"""
GitHub Actions output plumbing.

Outputs go to the file named by $GITHUB_OUTPUT using the multiline
heredoc syntax; failures and secret masks are workflow commands on
stdout. Outside a workflow, outputs are printed as name=value lines.
"""

import logging
import sys
import uuid
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


def escape_command_data(value: str) -> str:
    """Escape a workflow command payload."""
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionReporter:
    """Reports outputs and failures back to the workflow runner."""

    def __init__(
        self,
        output_path: Optional[str] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._output_path = output_path
        self._stream = stream if stream is not None else sys.stdout

    def set_output(self, name: str, value: str) -> None:
        if self._output_path:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            with open(self._output_path, "a", encoding="utf-8") as f:
                f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        else:
            self._write(f"{name}={value}")

        logger.debug("Set output", extra={"output": name})

    def set_failed(self, message: str) -> None:
        self._write(f"::error::{escape_command_data(message)}")

    def mask(self, value: str) -> None:
        """Ask the runner to redact value from the job log."""
        if value:
            self._write(f"::add-mask::{escape_command_data(value)}")

    def _write(self, line: str) -> None:
        self._stream.write(line + "\n")
        self._stream.flush()
