"""GitHub Actions runtime helpers: step outputs and failure reporting."""

import os
import sys
import uuid
from pathlib import Path
from typing import Protocol, TextIO

from loguru import logger


class OutputWriter(Protocol):
    """Sink for run outputs."""

    def set_output(self, name: str, value: object) -> None: ...


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsOutputWriter:
    """Write step outputs to the file named by ``GITHUB_OUTPUT``."""

    def __init__(self, path: str | Path | None = None):
        path = path or os.environ.get("GITHUB_OUTPUT")
        self.path = Path(path) if path else None

    def set_output(self, name: str, value: object) -> None:
        text = str(value)
        if self.path is None:
            logger.info(f"Output {name}: {text}")
            return
        # Heredoc form so multi-line summaries survive intact.
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with self.path.open("a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")


def set_failed(message: str, stream: TextIO | None = None) -> None:
    """Mark the step failed with an ``::error::`` workflow command."""
    stream = stream or sys.stdout
    logger.error(message)
    stream.write(f"::error::{_escape_data(message)}\n")
    stream.flush()
