"""Validate and pretty-print synthesized Go source.

``GofmtFormatter`` pipes text through the gofmt binary. gofmt parses its
input, so anything that is not syntactically valid Go (an illegal identifier
in a package clause, say) comes back as a FormatError.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol

from .config import PluginConfig
from .errors import FormatError

logger = logging.getLogger(__name__)


class Formatter(Protocol):
    def format(self, source: str, name: str) -> str:
        """Return formatted ``source`` or raise FormatError."""


class PassthroughFormatter:
    """Return source unchanged. Used when formatting is switched off."""

    def format(self, source: str, name: str) -> str:
        return source


class GofmtFormatter:
    """Format Go source with an external gofmt executable."""

    def __init__(self, executable: str = "gofmt") -> None:
        self.executable = executable

    def format(self, source: str, name: str) -> str:
        try:
            proc = subprocess.run(
                [self.executable],
                input=source,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise FormatError(f"{name}: cannot run {self.executable}: {exc}", source) from exc

        if proc.returncode != 0:
            message = proc.stderr.strip() or f"{self.executable} exited with status {proc.returncode}"
            logger.error("gofmt rejected %s: %s\n%s", name, message, source)
            raise FormatError(f"{name}: {message}", source)
        return proc.stdout


def formatter_for(config: PluginConfig) -> Formatter:
    """Pick the formatter ``config`` asks for."""
    if not config.format:
        return PassthroughFormatter()
    return GofmtFormatter(config.gofmt)
