"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionOptions:
    """Per-run conversion settings."""

    cursor_extensions: tuple[str, ...] = ("cur",)
    raster_format: str = "PNG"
    raster_extension: str = "png"
    json_indent: int = 2

    def output_name(self, stem: str) -> str:
        """Derive the raster file name for a cursor stem."""
        return f"{stem}.{self.raster_extension}"
