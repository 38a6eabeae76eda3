"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Protocol

from cur2png.application.models import CursorFileEntry, DecodedCursorImage
from cur2png.schemas import HotspotRecord


class CursorScanner(Protocol):
    """Enumerate candidate cursor files in a directory."""

    def scan(
        self, input_dir: Path, extensions: Sequence[str]
    ) -> Sequence[CursorFileEntry]:
        """Return candidate files, raising on a missing directory."""


class CursorReader(Protocol):
    """Read raw cursor bytes."""

    def read(self, path: Path) -> bytes:
        """Return the full file content."""


class CursorDecoder(Protocol):
    """Decode the first frame of a cursor container."""

    def decode(self, path: Path, data: bytes) -> DecodedCursorImage:
        """Parse, select the first entry and decode it."""


class RasterWriter(Protocol):
    """Encode a decoded image to a raster file."""

    def write(self, image: DecodedCursorImage, output_path: Path, fmt: str) -> Path:
        """Write the image and return the written path."""


class MetadataWriter(Protocol):
    """Persist the aggregated hotspot mapping."""

    def write(
        self, hotspots: Mapping[str, HotspotRecord], metadata_path: Path, indent: int
    ) -> Path:
        """Serialize the mapping and return the written path."""
