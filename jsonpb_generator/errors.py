"""Failures that end a generation run.

Every failure after the request has been decoded is one of these. The plugin
reports it through CodeGeneratorResponse.error rather than crashing.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for failures reported back to protoc."""


class ConfigError(GenerationError):
    """The plugin parameter string could not be parsed."""


class SynthesisError(GenerationError):
    """A template could not be rendered for a file."""


class FormatError(GenerationError):
    """Synthesized text was rejected by the formatter."""

    def __init__(self, message: str, source: str = "") -> None:
        super().__init__(message)
        self.source = source


class PackageConflictError(GenerationError):
    """Requested files resolve to more than one Go package."""

    def __init__(self, packages: dict[str, str]) -> None:
        self.packages = packages
        listing = ", ".join(f"{name} -> {pkg}" for name, pkg in packages.items())
        super().__init__(f"files resolve to different go packages: {listing}")
