"""Unit tests for icon/cursor container parsing and first-frame decoding."""

from __future__ import annotations

import struct
from collections.abc import Callable
from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cur2png.adapters import codec as codec_module
from cur2png.adapters.codec import (
    PillowCursorDecoder,
    as_icon_resource,
    parse_container,
)
from cur2png.errors import (
    FrameDecodeError,
    MalformedContainerError,
    NoEntriesError,
    PerFileError,
)

SOURCE = Path("sample.cur")


def test_parse_container_reads_cursor_directory(
    cursor_bytes: Callable[..., bytes], frame: type
) -> None:
    """Read resource type and entry fields; planes/bit count carry the hotspot."""
    data = cursor_bytes([frame(width=32, height=32, hotspot=(5, 7))])

    container = parse_container(data, SOURCE)

    assert container.is_cursor
    assert len(container.entries) == 1
    entry = container.entries[0]
    assert (entry.width, entry.height) == (32, 32)
    assert (entry.planes, entry.bit_count) == (5, 7)
    assert container.payload(entry).startswith(b"\x89PNG")


def test_parse_container_maps_zero_dimension_to_256(
    cursor_bytes: Callable[..., bytes], frame: type
) -> None:
    """A zero width/height byte in the directory means 256 pixels."""
    data = bytearray(cursor_bytes([frame()]))
    data[6] = 0
    data[7] = 0

    entry = parse_container(bytes(data), SOURCE).entries[0]

    assert (entry.width, entry.height) == (256, 256)


@pytest.mark.parametrize(
    ("data", "message"),
    [
        (b"", "too short"),
        (b"\x00\x00\x02", "too short"),
        (struct.pack("<HHH", 1, 2, 1), "reserved"),
        (struct.pack("<HHH", 0, 3, 1), "resource type"),
        (struct.pack("<HHH", 0, 2, 2) + b"\x00" * 16, "truncated"),
    ],
)
def test_parse_container_rejects_malformed_headers(data: bytes, message: str) -> None:
    """Raise MalformedContainerError for broken headers and directories."""
    with pytest.raises(MalformedContainerError, match=message) as excinfo:
        parse_container(data, SOURCE)
    assert excinfo.value.path == SOURCE


def test_parse_container_rejects_entry_outside_file() -> None:
    """Entries whose data range exceeds the file are malformed."""
    data = struct.pack("<HHH", 0, 2, 1) + struct.pack(
        "<BBBBHHII", 32, 32, 0, 0, 1, 1, 4096, 22
    )
    with pytest.raises(MalformedContainerError, match="outside file"):
        parse_container(data, SOURCE)


def test_parse_container_zero_entries() -> None:
    """A well-formed header with an empty directory raises NoEntriesError."""
    with pytest.raises(NoEntriesError):
        parse_container(struct.pack("<HHH", 0, 2, 0), SOURCE)


@given(st.binary(max_size=128))
def test_parse_container_only_raises_per_file_errors(data: bytes) -> None:
    """Arbitrary bytes either parse or fail with a file-scoped error."""
    try:
        container = parse_container(data, SOURCE)
    except PerFileError as exc:
        assert exc.path == SOURCE
    else:
        assert container.entries


def test_decode_png_cursor_keeps_hotspot_and_true_height(
    cursor_bytes: Callable[..., bytes], frame: type
) -> None:
    """Width and height come from the decoded image, not the directory."""
    data = cursor_bytes([frame(width=24, height=40, hotspot=(11, 2))])

    decoded = PillowCursorDecoder().decode(SOURCE, data)

    assert (decoded.width, decoded.height) == (24, 40)
    assert decoded.hotspot == (11, 2)
    assert decoded.image.getpixel((0, 0)) == (255, 0, 0, 255)


def test_decode_bitmap_cursor_restores_alpha(
    cursor_bytes: Callable[..., bytes], frame: type
) -> None:
    """DIB payloads decode to RGBA despite hotspot values in the bpp field."""
    data = cursor_bytes(
        [frame(width=32, height=32, hotspot=(0, 31), color=(0, 0, 255, 128), bitmap=True)]
    )

    decoded = PillowCursorDecoder().decode(SOURCE, data)

    assert decoded.image.size == (32, 32)
    assert decoded.hotspot == (0, 31)
    assert decoded.image.convert("RGBA").getpixel((3, 3))[3] == 128


def test_decode_icon_resource_defaults_hotspot(
    cursor_bytes: Callable[..., bytes], frame: type
) -> None:
    """Icon containers carry no hotspot; it defaults to (0, 0)."""
    data = cursor_bytes([frame(hotspot=(9, 9))], resource_type=1)

    decoded = PillowCursorDecoder().decode(SOURCE, data)

    assert decoded.hotspot == (0, 0)


def test_decode_uses_first_entry_only(
    cursor_bytes: Callable[..., bytes], frame: type
) -> None:
    """Later, larger entries are ignored."""
    data = cursor_bytes(
        [
            frame(width=16, height=16, hotspot=(1, 1), color=(0, 255, 0, 255)),
            frame(width=48, height=48, hotspot=(3, 3)),
        ]
    )

    decoded = PillowCursorDecoder().decode(SOURCE, data)

    assert decoded.image.size == (16, 16)
    assert decoded.hotspot == (1, 1)
    assert decoded.image.getpixel((0, 0)) == (0, 255, 0, 255)


def test_decode_corrupt_payload_raises_decode_error() -> None:
    """Garbage pixel data is reported as FrameDecodeError."""
    payload = b"\x28\x00\x00\x00" + b"\xff" * 60
    data = (
        struct.pack("<HHH", 0, 2, 1)
        + struct.pack("<BBBBHHII", 32, 32, 0, 0, 1, 1, len(payload), 22)
        + payload
    )
    with pytest.raises(FrameDecodeError) as excinfo:
        PillowCursorDecoder().decode(SOURCE, data)
    assert excinfo.value.path == SOURCE


def test_as_icon_resource_rejects_short_bitmap_header(
    cursor_bytes: Callable[..., bytes], frame: type
) -> None:
    """Payloads too short for a DIB header cannot be wrapped."""
    container = parse_container(cursor_bytes([frame()]), SOURCE)
    with pytest.raises(FrameDecodeError, match="too short"):
        as_icon_resource(container.entries[0], b"\x28\x00", SOURCE)


def test_as_icon_resource_replaces_hotspot_fields(
    cursor_bytes: Callable[..., bytes], frame: type
) -> None:
    """The wrapped resource is a one-entry icon with planes 1."""
    container = parse_container(
        cursor_bytes([frame(hotspot=(4, 6), bitmap=True)]), SOURCE
    )
    entry = container.entries[0]

    resource = as_icon_resource(entry, container.payload(entry), SOURCE)

    assert struct.unpack_from("<HHH", resource) == (0, 1, 1)
    _, _, _, _, planes, bit_count, size, offset = struct.unpack_from(
        "<BBBBHHII", resource, 6
    )
    assert (planes, bit_count) == (1, 32)
    assert (size, offset) == (entry.size, 22)


def test_as_icon_resource_reads_core_header_bit_count(
    cursor_bytes: Callable[..., bytes], frame: type
) -> None:
    """12-byte BITMAPCOREHEADER payloads store the bit count at offset 10."""
    container = parse_container(cursor_bytes([frame()]), SOURCE)
    payload = struct.pack("<IHHHH", 12, 4, 8, 1, 24) + b"\x00" * 48

    resource = as_icon_resource(container.entries[0], payload, SOURCE)

    _, _, _, _, planes, bit_count, _, _ = struct.unpack_from("<BBBBHHII", resource, 6)
    assert (planes, bit_count) == (1, 24)


def test_decode_maps_unexpected_pillow_errors(
    cursor_bytes: Callable[..., bytes],
    frame: type,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Any exception from the imaging backend stays a per-file error."""

    def explode(*_: object, **__: object) -> None:
        raise TypeError("unsupported operand")

    monkeypatch.setattr(codec_module.Image, "open", explode)

    with pytest.raises(FrameDecodeError, match="unsupported operand"):
        PillowCursorDecoder().decode(SOURCE, cursor_bytes([frame()]))
