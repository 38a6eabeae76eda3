"""Directory scanner for candidate cursor files."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from cur2png.application.models import CursorFileEntry
from cur2png.errors import InputDirectoryError

logger = logging.getLogger(__name__)


def has_extension(path: Path, extensions: Sequence[str]) -> bool:
    """Return ``True`` when the path's last suffix matches, ignoring case."""
    suffix = path.suffix
    if not suffix:
        return False
    wanted = {ext.lower().lstrip(".") for ext in extensions}
    return suffix[1:].lower() in wanted


def scan_cursor_files(
    input_dir: Path, extensions: Sequence[str] = ("cur",)
) -> list[CursorFileEntry]:
    """List cursor files directly inside ``input_dir``.

    Parameters
    ----------
    input_dir : Path
        Directory to enumerate. Subdirectories are not descended into.
    extensions : Sequence[str], default=("cur",)
        Accepted extensions without the leading dot, compared case-insensitively.

    Returns
    -------
    list[CursorFileEntry]
        Matching files sorted by name.

    Raises
    ------
    InputDirectoryError
        If ``input_dir`` does not exist, is not a directory or cannot be listed.
    """
    if not input_dir.exists():
        raise InputDirectoryError(f"Input directory '{input_dir}' does not exist")
    if not input_dir.is_dir():
        raise InputDirectoryError(f"Input path '{input_dir}' is not a directory")

    try:
        children = sorted(input_dir.iterdir(), key=lambda child: child.name)
    except OSError as exc:
        raise InputDirectoryError(
            f"Cannot read input directory '{input_dir}': {exc}"
        ) from exc

    entries: list[CursorFileEntry] = []
    for child in children:
        if not has_extension(child, extensions):
            logger.debug("Skipping %s: extension not in %s", child.name, extensions)
            continue
        if child.is_dir():
            logger.debug("Skipping directory %s", child.name)
            continue
        entries.append(CursorFileEntry(path=child))
    logger.debug("Found %d cursor file(s) in %s", len(entries), input_dir)
    return entries


class DirectoryCursorScanner:
    """Default non-recursive directory scanner."""

    def scan(
        self, input_dir: Path, extensions: Sequence[str]
    ) -> list[CursorFileEntry]:
        """Return cursor files directly inside ``input_dir``."""
        return scan_cursor_files(input_dir, extensions)
