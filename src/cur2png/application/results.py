"""Application-layer result objects."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from cur2png.application.models import CursorFileEntry
from cur2png.errors import PerFileError
from cur2png.schemas import HotspotRecord

type HotspotMapping = dict[str, HotspotRecord]


@dataclass(frozen=True)
class ConversionSuccess:
    """Cursor converted and written to disk."""

    entry: CursorFileEntry
    output_name: str
    output_path: Path
    record: HotspotRecord

    ok: bool = field(default=True, init=False)


@dataclass(frozen=True)
class ConversionFailure:
    """Cursor skipped because of a per-file error."""

    entry: CursorFileEntry
    error: PerFileError

    ok: bool = field(default=False, init=False)

    @property
    def reason(self) -> str:
        return self.error.reason


type ConversionOutcome = ConversionSuccess | ConversionFailure


@dataclass
class BatchResult:
    """Structured outcome of a directory run."""

    output_dir: Path
    metadata_path: Path
    hotspots: HotspotMapping = field(default_factory=dict)
    outcomes: list[ConversionOutcome] = field(default_factory=list)

    @property
    def processed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.ok)

    @property
    def failed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.ok)

    def failures(self) -> Iterator[ConversionFailure]:
        for outcome in self.outcomes:
            if isinstance(outcome, ConversionFailure):
                yield outcome
