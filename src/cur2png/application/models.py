"""Data models passed between the scanner, codec and use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cur2png.types import Hotspot, RasterImage, ResourceType

ICON_RESOURCE: ResourceType = 1
CURSOR_RESOURCE: ResourceType = 2


@dataclass(frozen=True)
class CursorFileEntry:
    """Candidate cursor file discovered in the input directory."""

    path: Path

    @property
    def name(self) -> str:
        """File name including extension."""
        return self.path.name

    @property
    def stem(self) -> str:
        """File name with its last extension removed."""
        return self.path.stem


@dataclass(frozen=True)
class CursorDirectoryEntry:
    """One ICONDIRENTRY record.

    For cursor resources ``planes`` and ``bit_count`` hold the hotspot X and Y
    coordinates instead of their icon meaning.
    """

    width: int
    height: int
    color_count: int
    planes: int
    bit_count: int
    size: int
    offset: int


@dataclass(frozen=True)
class CursorContainer:
    """Parsed icon/cursor container header and directory."""

    resource_type: ResourceType
    entries: tuple[CursorDirectoryEntry, ...]
    data: bytes

    @property
    def is_cursor(self) -> bool:
        return self.resource_type == CURSOR_RESOURCE

    def payload(self, entry: CursorDirectoryEntry) -> bytes:
        """Return the raw image bytes referenced by ``entry``."""
        return self.data[entry.offset : entry.offset + entry.size]


@dataclass
class DecodedCursorImage:
    """First frame of a cursor decoded into pixels."""

    image: RasterImage
    hotspot: Hotspot = (0, 0)

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def hotspot_x(self) -> int:
        return self.hotspot[0]

    @property
    def hotspot_y(self) -> int:
        return self.hotspot[1]

    def close(self) -> None:
        """Release the decoded pixel buffer."""
        self.image.close()
