"""Public conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from cur2png.application.models import CursorFileEntry
from cur2png.application.options import ConversionOptions
from cur2png.application.results import BatchResult, ConversionFailure
from cur2png.application.use_cases import (
    OutcomeCallback,
    build_batch_config,
    convert_cursor_file,
    prepare_output_dir,
    run_batch,
)
from cur2png.schemas import HotspotRecord


def convert_directory(
    input_dir: Path,
    output_dir: Path,
    metadata_path: Optional[Path] = None,
    on_outcome: Optional[OutcomeCallback] = None,
) -> BatchResult:
    """Convert every ``.cur`` file of ``input_dir`` and write the hotspot JSON."""
    config = build_batch_config(
        input_dir=Path(input_dir),
        output_dir=Path(output_dir),
        metadata_path=Path(metadata_path) if metadata_path is not None else None,
    )
    return run_batch(config, on_outcome=on_outcome)


def convert_cursor_to_png(cursor_path: Path, output_dir: Path) -> HotspotRecord:
    """Convert a single cursor file and return its hotspot record.

    Unlike :func:`convert_directory`, per-file errors are raised.
    """
    output_dir = prepare_output_dir(Path(output_dir))
    outcome = convert_cursor_file(
        CursorFileEntry(path=Path(cursor_path)), output_dir, ConversionOptions()
    )
    if isinstance(outcome, ConversionFailure):
        raise outcome.error
    return outcome.record
