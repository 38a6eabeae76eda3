"""Top-level API for cursor-to-PNG conversion with hotspot extraction."""

from __future__ import annotations

from pathlib import Path

from cur2png.application.results import BatchResult
from cur2png.schemas import HotspotRecord

__version__ = "1.0.0"


def convert_directory(
    input_dir: Path,
    output_dir: Path,
    metadata_path: Path | None = None,
) -> BatchResult:
    """Convert all cursor files of a directory to PNG.

    Parameters
    ----------
    input_dir : Path
        Directory holding ``.cur`` files; not searched recursively.
    output_dir : Path
        Destination for PNG files, created when missing.
    metadata_path : Path | None, default=None
        Aggregated hotspot JSON path. Defaults to ``hotspots.json``.

    Returns
    -------
    BatchResult
        Hotspot mapping and per-file outcomes.
    """
    from .api import convert_directory as _impl

    return _impl(input_dir, output_dir, metadata_path)


def convert_cursor_to_png(cursor_path: Path, output_dir: Path) -> HotspotRecord:
    """Convert one cursor file to PNG.

    Parameters
    ----------
    cursor_path : Path
        Source ``.cur`` file.
    output_dir : Path
        Destination directory for ``<stem>.png``.

    Returns
    -------
    HotspotRecord
        Hotspot and size of the converted first frame.
    """
    from .api import convert_cursor_to_png as _impl

    return _impl(cursor_path, output_dir)


__all__ = [
    "BatchResult",
    "HotspotRecord",
    "convert_cursor_to_png",
    "convert_directory",
    "__version__",
]
