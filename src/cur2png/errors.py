"""Exception hierarchy for cursor conversion runs.

Fatal errors (setup and flush) propagate to the CLI and terminate the run.
Per-file errors are captured by the conversion use-case and reported as
failure outcomes so that one broken cursor never aborts a batch.
"""

from __future__ import annotations

from pathlib import Path


class Cur2PngError(Exception):
    """Base class for all cur2png errors."""

    exit_code: int = 1


class FatalSetupError(Cur2PngError):
    """Raised before any conversion when the run cannot be set up."""


class InputDirectoryError(FatalSetupError):
    """Input directory is missing or is not a directory."""


class OutputDirectoryError(FatalSetupError):
    """Output directory could not be created."""


class FatalFlushError(Cur2PngError):
    """Raised when the aggregated metadata cannot be persisted."""


class MetadataWriteError(FatalFlushError):
    """Metadata JSON file could not be written."""


class PerFileError(Cur2PngError):
    """Failure scoped to a single cursor file.

    Parameters
    ----------
    path : Path
        Cursor file that failed.
    reason : str
        Human-readable failure description.
    """

    kind: str = "error"

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(reason)
        self.path = path
        self.reason = reason


class CursorReadError(PerFileError):
    """Cursor file could not be read."""

    kind = "io"


class MalformedContainerError(PerFileError):
    """Icon/cursor header or directory is malformed."""

    kind = "format"


class NoEntriesError(PerFileError):
    """Container directory lists zero images."""

    kind = "no-entries"


class FrameDecodeError(PerFileError):
    """Embedded image data could not be decoded."""

    kind = "decode"


class RasterWriteError(PerFileError):
    """Decoded image could not be encoded or written."""

    kind = "encode"
