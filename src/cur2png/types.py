"""Shared type aliases and protocols for cursor conversion modules."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Protocol

type ResourceType = Literal[1, 2]
type Hotspot = tuple[int, int]


class RasterImage(Protocol):
    """Decoded pixel image as exposed by the imaging backend."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def save(self, fp: Path, format: str | None = None) -> None: ...

    def close(self) -> None: ...
