"""Icon/cursor container parsing and first-frame decoding.

The ICONDIR header and its directory are read with :mod:`struct`. Pixel
decoding is delegated to Pillow: the selected entry is re-wrapped as a
single-image ICO resource so the ICO plugin handles both PNG payloads and
DIB payloads with their AND transparency mask.
"""

from __future__ import annotations

import io
import logging
import struct
from pathlib import Path

from PIL import Image

from cur2png.application.models import (
    CURSOR_RESOURCE,
    ICON_RESOURCE,
    CursorContainer,
    CursorDirectoryEntry,
    DecodedCursorImage,
)
from cur2png.errors import FrameDecodeError, MalformedContainerError, NoEntriesError

logger = logging.getLogger(__name__)

_HEADER = struct.Struct("<HHH")
_ENTRY = struct.Struct("<BBBBHHII")
_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_DIB_HEADER_SIZE = struct.Struct("<I")
_DIB_BIT_COUNT = struct.Struct("<H")
# BITMAPCOREHEADER keeps biBitCount at offset 10; every later header at 14.
_CORE_HEADER_SIZE = 12
_CORE_BIT_COUNT_OFFSET = 10
_INFO_BIT_COUNT_OFFSET = 14


def parse_container(data: bytes, path: Path) -> CursorContainer:
    """Parse the ICONDIR header and directory of an icon or cursor file.

    Parameters
    ----------
    data : bytes
        Complete file content.
    path : Path
        Source path, used for error reporting only.

    Returns
    -------
    CursorContainer
        Resource type and ordered directory entries.

    Raises
    ------
    MalformedContainerError
        If the header is truncated, the reserved field is not zero, the
        resource type is neither icon nor cursor, the directory is truncated,
        or an entry points outside the file.
    NoEntriesError
        If the directory lists zero images.
    """
    if len(data) < _HEADER.size:
        raise MalformedContainerError(path, "file too short for an ICONDIR header")
    reserved, resource_type, count = _HEADER.unpack_from(data, 0)
    if reserved != 0:
        raise MalformedContainerError(
            path, f"invalid reserved field {reserved} (expected 0)"
        )
    if resource_type not in (ICON_RESOURCE, CURSOR_RESOURCE):
        raise MalformedContainerError(
            path, f"invalid resource type {resource_type} (expected 1 or 2)"
        )
    if count == 0:
        raise NoEntriesError(path, "No cursor entries found in file")

    directory_end = _HEADER.size + count * _ENTRY.size
    if len(data) < directory_end:
        raise MalformedContainerError(
            path, f"directory of {count} entries truncated at {len(data)} bytes"
        )

    entries: list[CursorDirectoryEntry] = []
    for index in range(count):
        (
            width,
            height,
            color_count,
            _reserved,
            planes,
            bit_count,
            size,
            offset,
        ) = _ENTRY.unpack_from(data, _HEADER.size + index * _ENTRY.size)
        if size == 0 or offset < directory_end or offset + size > len(data):
            raise MalformedContainerError(
                path,
                f"entry {index} data range {offset}+{size} outside file "
                f"of {len(data)} bytes",
            )
        entries.append(
            CursorDirectoryEntry(
                width=width or 256,
                height=height or 256,
                color_count=color_count,
                planes=planes,
                bit_count=bit_count,
                size=size,
                offset=offset,
            )
        )

    logger.debug(
        "%s: resource type %d with %d entr%s",
        path.name,
        resource_type,
        count,
        "y" if count == 1 else "ies",
    )
    return CursorContainer(
        resource_type=resource_type, entries=tuple(entries), data=data
    )


def _payload_bit_count(payload: bytes, path: Path) -> int:
    if payload.startswith(_PNG_SIGNATURE):
        return 32
    if len(payload) < _DIB_HEADER_SIZE.size:
        raise FrameDecodeError(path, "image data too short for a bitmap header")
    (header_size,) = _DIB_HEADER_SIZE.unpack_from(payload, 0)
    if header_size == _CORE_HEADER_SIZE:
        offset = _CORE_BIT_COUNT_OFFSET
    else:
        offset = _INFO_BIT_COUNT_OFFSET
    if len(payload) < offset + _DIB_BIT_COUNT.size:
        raise FrameDecodeError(path, "image data too short for a bitmap header")
    (bit_count,) = _DIB_BIT_COUNT.unpack_from(payload, offset)
    return bit_count


def as_icon_resource(entry: CursorDirectoryEntry, payload: bytes, path: Path) -> bytes:
    """Wrap one entry's payload in a standalone single-image ICO resource.

    Cursor directory entries store the hotspot in the planes and bit-count
    fields; those are replaced by the real values so the ICO decoder picks
    the right mask handling.
    """
    bit_count = _payload_bit_count(payload, path)
    header = _HEADER.pack(0, ICON_RESOURCE, 1)
    directory = _ENTRY.pack(
        entry.width % 256,
        entry.height % 256,
        entry.color_count,
        0,
        1,
        bit_count,
        len(payload),
        _HEADER.size + _ENTRY.size,
    )
    return header + directory + payload


def decode_entry(
    container: CursorContainer, entry: CursorDirectoryEntry, path: Path
) -> DecodedCursorImage:
    """Decode ``entry`` of ``container`` into pixels plus its hotspot.

    Raises
    ------
    FrameDecodeError
        If Pillow cannot decode the embedded image or it decodes to zero
        width or height.
    """
    resource = as_icon_resource(entry, container.payload(entry), path)
    try:
        with Image.open(io.BytesIO(resource), formats=["ICO"]) as icon:
            icon.load()
            image = icon.copy()
    except Exception as exc:
        # Pillow plugins raise many unrelated types on hostile data.
        raise FrameDecodeError(path, f"cannot decode image data: {exc}") from exc
    if not image.width or not image.height:
        image.close()
        raise FrameDecodeError(
            path, f"decoded image has no pixels ({image.width}x{image.height})"
        )

    hotspot = (entry.planes, entry.bit_count) if container.is_cursor else (0, 0)
    logger.debug(
        "%s: decoded %dx%d %s image, hotspot %s",
        path.name,
        image.width,
        image.height,
        image.mode,
        hotspot,
    )
    return DecodedCursorImage(image=image, hotspot=hotspot)


class PillowCursorDecoder:
    """Default decoder: first directory entry only, decoded with Pillow."""

    def decode(self, path: Path, data: bytes) -> DecodedCursorImage:
        """Parse ``data`` and decode its first entry.

        Parameters
        ----------
        path : Path
            Source path, used for error reporting.
        data : bytes
            Complete file content.

        Returns
        -------
        DecodedCursorImage
            Decoded first frame and its hotspot; (0, 0) for icon resources.
        """
        container = parse_container(data, path)
        if len(container.entries) > 1:
            logger.debug(
                "%s: ignoring %d additional entr%s",
                path.name,
                len(container.entries) - 1,
                "y" if len(container.entries) == 2 else "ies",
            )
        return decode_entry(container, container.entries[0], path)
