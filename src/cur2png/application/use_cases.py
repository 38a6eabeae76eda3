"""Application use-cases orchestrating cursor conversion runs."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError

from cur2png.adapters.codec import PillowCursorDecoder
from cur2png.adapters.loaders import FileCursorReader
from cur2png.adapters.scanner import DirectoryCursorScanner
from cur2png.application.models import CursorFileEntry, DecodedCursorImage
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
from cur2png.errors import (
    FatalSetupError,
    FrameDecodeError,
    OutputDirectoryError,
    PerFileError,
)
from cur2png.infrastructure.writers import JsonMetadataWriter, PillowRasterWriter
from cur2png.schemas import (
    DEFAULT_METADATA_FILENAME,
    BatchConversionConfig,
    HotspotRecord,
)

logger = logging.getLogger(__name__)

type OutcomeCallback = Callable[[ConversionOutcome], None]


def _hotspot_record(
    entry: CursorFileEntry, decoded: DecodedCursorImage
) -> HotspotRecord:
    try:
        return HotspotRecord(
            hotspot_x=decoded.hotspot_x,
            hotspot_y=decoded.hotspot_y,
            width=decoded.width,
            height=decoded.height,
            source_file=entry.name,
        )
    except ValidationError as exc:
        raise FrameDecodeError(
            entry.path,
            f"decoded frame is unusable ({decoded.width}x{decoded.height}, "
            f"hotspot {decoded.hotspot}): {exc.error_count()} invalid field(s)",
        ) from exc


def convert_cursor_file(
    entry: CursorFileEntry,
    output_dir: Path,
    options: ConversionOptions | None = None,
    *,
    reader: CursorReader | None = None,
    decoder: CursorDecoder | None = None,
    raster_writer: RasterWriter | None = None,
) -> ConversionOutcome:
    """Use-case: convert one cursor file into a raster file.

    Per-file errors are returned as :class:`ConversionFailure` instead of
    being raised.
    """
    options = options or ConversionOptions()
    reader = reader or FileCursorReader()
    decoder = decoder or PillowCursorDecoder()
    raster_writer = raster_writer or PillowRasterWriter()

    try:
        data = reader.read(entry.path)
        decoded = decoder.decode(entry.path, data)
        try:
            record = _hotspot_record(entry, decoded)
            output_name = options.output_name(entry.stem)
            output_path = raster_writer.write(
                decoded, output_dir / output_name, options.raster_format
            )
        finally:
            decoded.close()
    except PerFileError as exc:
        return ConversionFailure(entry=entry, error=exc)

    return ConversionSuccess(
        entry=entry,
        output_name=output_name,
        output_path=output_path,
        record=record,
    )


def prepare_output_dir(output_dir: Path) -> Path:
    """Create ``output_dir`` and any missing parents.

    Raises
    ------
    OutputDirectoryError
        If the directory cannot be created.
    """
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError(
            f"Cannot create output directory '{output_dir}': {exc}"
        ) from exc
    return output_dir


def record_outcome(hotspots: HotspotMapping, outcome: ConversionOutcome) -> None:
    """Insert a successful outcome into ``hotspots``; later names replace earlier ones."""
    if not isinstance(outcome, ConversionSuccess):
        return
    previous = hotspots.get(outcome.output_name)
    if previous is not None:
        logger.warning(
            "%s replaces %s (from %s) written earlier in this run",
            outcome.entry.name,
            outcome.output_name,
            previous.source_file,
        )
    hotspots[outcome.output_name] = outcome.record


def run_batch(
    config: BatchConversionConfig,
    options: ConversionOptions | None = None,
    *,
    scanner: CursorScanner | None = None,
    reader: CursorReader | None = None,
    decoder: CursorDecoder | None = None,
    raster_writer: RasterWriter | None = None,
    metadata_writer: MetadataWriter | None = None,
    on_outcome: OutcomeCallback | None = None,
) -> BatchResult:
    """Use-case: convert every cursor file of a directory and flush metadata.

    Parameters
    ----------
    config : BatchConversionConfig
        Validated input, output and metadata locations.
    options : ConversionOptions | None, default=None
        Conversion settings; defaults are used when omitted.
    on_outcome : Callable[[ConversionOutcome], None] | None, default=None
        Invoked after each file, in scan order.

    Returns
    -------
    BatchResult
        Final hotspot mapping and every per-file outcome.

    Raises
    ------
    InputDirectoryError
        Before anything is written, if the input directory cannot be listed.
    OutputDirectoryError
        If the output directory cannot be created.
    MetadataWriteError
        If the metadata file cannot be written after all conversions.
    """
    options = options or ConversionOptions()
    scanner = scanner or DirectoryCursorScanner()
    metadata_writer = metadata_writer or JsonMetadataWriter()

    entries = list(scanner.scan(config.input_dir, options.cursor_extensions))
    prepare_output_dir(config.output_dir)

    result = BatchResult(
        output_dir=config.output_dir, metadata_path=config.metadata_path
    )
    for entry in entries:
        outcome = convert_cursor_file(
            entry,
            config.output_dir,
            options,
            reader=reader,
            decoder=decoder,
            raster_writer=raster_writer,
        )
        record_outcome(result.hotspots, outcome)
        result.outcomes.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome)

    metadata_writer.write(result.hotspots, config.metadata_path, options.json_indent)
    logger.info(
        "Converted %d of %d cursor file(s)",
        result.processed_count,
        len(result.outcomes),
    )
    return result


def build_batch_config(
    *,
    input_dir: Path,
    output_dir: Path,
    metadata_path: Path | None = None,
) -> BatchConversionConfig:
    """Build a validated run config from command/API params."""
    try:
        return BatchConversionConfig(
            input_dir=input_dir,
            output_dir=output_dir,
            metadata_path=metadata_path or Path(DEFAULT_METADATA_FILENAME),
        )
    except ValidationError as exc:
        raise FatalSetupError(f"Invalid conversion parameters: {exc}") from exc
