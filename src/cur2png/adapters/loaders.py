"""Raw byte loading for cursor files."""

from __future__ import annotations

from pathlib import Path

from cur2png.errors import CursorReadError


class FileCursorReader:
    """Read cursor files from the local filesystem."""

    def read(self, path: Path) -> bytes:
        """Return the full content of ``path``.

        Raises
        ------
        CursorReadError
            If the file cannot be opened or read.
        """
        try:
            return path.read_bytes()
        except OSError as exc:
            raise CursorReadError(path, f"cannot read file: {exc}") from exc
