"""Application-layer use-cases, option objects and results."""

from __future__ import annotations

from cur2png.application.models import (
    CursorContainer,
    CursorDirectoryEntry,
    CursorFileEntry,
    DecodedCursorImage,
)
from cur2png.application.options import ConversionOptions
from cur2png.application.ports import (
    CursorDecoder,
    CursorReader,
    CursorScanner,
    MetadataWriter,
    RasterWriter,
)
from cur2png.application.results import (
    BatchResult,
    ConversionFailure,
    ConversionOutcome,
    ConversionSuccess,
    HotspotMapping,
)

__all__ = [
    "BatchResult",
    "ConversionFailure",
    "ConversionOptions",
    "ConversionOutcome",
    "ConversionSuccess",
    "CursorContainer",
    "CursorDecoder",
    "CursorDirectoryEntry",
    "CursorFileEntry",
    "CursorReader",
    "CursorScanner",
    "DecodedCursorImage",
    "HotspotMapping",
    "MetadataWriter",
    "RasterWriter",
]
