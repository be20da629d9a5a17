"""Exception hierarchy shared by discovery, assembly, and rendering.

Fatal errors (:class:`DiscoveryError`, :class:`ManifestError`) propagate to the
caller and end the run. :class:`SkippedNodeError` subclasses describe a single
section or subsection that could not be used; assembly catches them, logs a
warning, and drops the subtree. :class:`MetadataUnavailableError` never leaves
the date helper.
"""

from __future__ import annotations

from pathlib import Path


class WgenError(Exception):
    """Base class for every error raised by wgen."""


class DiscoveryError(WgenError):
    """Raised when the content root has no usable ``manifest.toml``."""


class ManifestError(WgenError):
    """Raised when the root manifest cannot be read or decoded."""


class SkippedNodeError(WgenError):
    """A section or subsection that is dropped from the build.

    Attributes
    ----------
    path : Path
        Directory or spec file that caused the node to be skipped.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class MissingSpecError(SkippedNodeError):
    """The directory lacks the spec file that makes it a section/subsection."""


class SpecFileError(SkippedNodeError):
    """The section/subsection spec file exists but is unreadable or invalid."""


class MetadataUnavailableError(WgenError):
    """A file's modification time could not be read or converted.

    Raised by the date helper, which turns it into the ``"Unknown"`` date.
    """


class RenderError(WgenError):
    """Raised when the renderer cannot produce an output file."""


__all__ = [
    "DiscoveryError",
    "ManifestError",
    "MetadataUnavailableError",
    "MissingSpecError",
    "RenderError",
    "SkippedNodeError",
    "SpecFileError",
    "WgenError",
]
