"""Raster and metadata writer implementations."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from cur2png.application.models import DecodedCursorImage
from cur2png.errors import MetadataWriteError, RasterWriteError
from cur2png.schemas import HotspotRecord

logger = logging.getLogger(__name__)


class PillowRasterWriter:
    """Encode decoded cursor frames with Pillow."""

    def write(self, image: DecodedCursorImage, output_path: Path, fmt: str) -> Path:
        """Write ``image`` to ``output_path``, replacing any existing file.

        Parameters
        ----------
        image : DecodedCursorImage
            Decoded frame to encode.
        output_path : Path
            Destination raster file.
        fmt : str
            Pillow format name, e.g. ``"PNG"``.

        Returns
        -------
        Path
            The written path.

        Raises
        ------
        RasterWriteError
            If encoding or writing fails.
        """
        try:
            image.image.save(output_path, format=fmt)
        except Exception as exc:
            raise RasterWriteError(
                output_path, f"cannot write {fmt} file: {exc}"
            ) from exc
        logger.debug("Wrote %s", output_path)
        return output_path


def render_hotspots(hotspots: Mapping[str, HotspotRecord], indent: int = 2) -> str:
    """Render the hotspot mapping as pretty-printed JSON with a trailing newline."""
    payload = {name: record.model_dump() for name, record in hotspots.items()}
    return json.dumps(payload, indent=indent, ensure_ascii=False) + "\n"


class JsonMetadataWriter:
    """Persist the hotspot mapping as one JSON document."""

    def write(
        self,
        hotspots: Mapping[str, HotspotRecord],
        metadata_path: Path,
        indent: int = 2,
    ) -> Path:
        """Serialize ``hotspots`` to ``metadata_path``.

        Raises
        ------
        MetadataWriteError
            If the parent directory cannot be created or the file written.
        """
        text = render_hotspots(hotspots, indent=indent)
        try:
            metadata_path.parent.mkdir(parents=True, exist_ok=True)
            metadata_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise MetadataWriteError(
                f"Cannot write hotspot data to '{metadata_path}': {exc}"
            ) from exc
        logger.debug("Wrote %d hotspot record(s) to %s", len(hotspots), metadata_path)
        return metadata_path
