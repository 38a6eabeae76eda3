"""Shared pytest configuration, marker assignment and cursor builders."""

from __future__ import annotations

import io
import struct
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

import pytest
from PIL import Image

HEADER = struct.Struct("<HHH")
ENTRY = struct.Struct("<BBBBHHII")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@dataclass(frozen=True)
class Frame:
    """One embedded cursor image to generate."""

    width: int = 32
    height: int = 32
    hotspot: tuple[int, int] = (0, 0)
    color: tuple[int, int, int, int] = (255, 0, 0, 255)
    bitmap: bool = False


def _png_payload(frame: Frame) -> bytes:
    image = Image.new("RGBA", (frame.width, frame.height), frame.color)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def _bitmap_payload(frame: Frame) -> bytes:
    image = Image.new("RGBA", (frame.width, frame.height), frame.color)
    buffer = io.BytesIO()
    image.save(
        buffer,
        format="ICO",
        sizes=[(frame.width, frame.height)],
        bitmap_format="bmp",
    )
    data = buffer.getvalue()
    *_, size, offset = ENTRY.unpack_from(data, HEADER.size)
    return data[offset : offset + size]


def build_cursor(frames: Sequence[Frame], resource_type: int = 2) -> bytes:
    """Assemble an ICONDIR container; type 2 stores hotspots, type 1 does not."""
    payloads = [
        _bitmap_payload(frame) if frame.bitmap else _png_payload(frame)
        for frame in frames
    ]
    header = HEADER.pack(0, resource_type, len(frames))
    offset = HEADER.size + ENTRY.size * len(frames)
    directory = b""
    for frame, payload in zip(frames, payloads):
        if resource_type == 2:
            field_a, field_b = frame.hotspot
        else:
            field_a, field_b = 1, 32
        directory += ENTRY.pack(
            frame.width % 256,
            frame.height % 256,
            0,
            0,
            field_a,
            field_b,
            len(payload),
            offset,
        )
        offset += len(payload)
    return header + directory + b"".join(payloads)


@pytest.fixture
def frame() -> type[Frame]:
    """Return the Frame type used by the builders."""
    return Frame


@pytest.fixture
def cursor_bytes() -> Callable[..., bytes]:
    """Return the container builder."""
    return build_cursor


@pytest.fixture
def write_cursor() -> Callable[..., Path]:
    """Return a helper writing a generated cursor to a path."""

    def _write(
        path: Path,
        frames: Sequence[Frame] | None = None,
        resource_type: int = 2,
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(build_cursor(frames or [Frame()], resource_type))
        return path

    return _write


@pytest.fixture
def cursor_dir(tmp_path: Path, write_cursor: Callable[..., Path]) -> Path:
    """Input directory with one 32x32 cursor, ``arrow.cur``, hotspot (2, 3)."""
    input_dir = tmp_path / "cursors"
    write_cursor(input_dir / "arrow.cur", [Frame(hotspot=(2, 3))])
    return input_dir
