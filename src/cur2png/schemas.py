"""Pydantic schemas for runtime validation of run inputs and metadata."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_METADATA_FILENAME = "hotspots.json"


class BatchConversionConfig(BaseModel):
    """Validated input for a directory conversion run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_dir: Path
    output_dir: Path
    metadata_path: Path = Path(DEFAULT_METADATA_FILENAME)

    @field_validator("metadata_path")
    @classmethod
    def _validate_metadata_path(cls, value: Path) -> Path:
        if not value.name:
            raise ValueError("metadata_path must name a file.")
        return value


class HotspotRecord(BaseModel):
    """Metadata recorded for one converted cursor.

    Field order is the serialized key order.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    hotspot_x: int = Field(ge=0)
    hotspot_y: int = Field(ge=0)
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    source_file: str = Field(min_length=1)
