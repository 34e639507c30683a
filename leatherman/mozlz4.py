"""Reader and writer for the mozlz4 (jsonlz4) container used by Firefox.

The format is a magic header, a little-endian 32-bit uncompressed length and
a raw LZ4 block.
"""

from __future__ import annotations

import struct
from typing import BinaryIO

import lz4.block

MAGIC_HEADER = b"mozLz40\x00"
_SIZE = struct.Struct("<I")


class MozLz4Error(ValueError):
    """The data could not be read as mozlz4."""


class WrongHeaderError(MozLz4Error):
    """The data does not start with the mozlz4 magic header."""


class WrongSizeError(MozLz4Error):
    """The decompressed length differs from the length in the header."""


def _read_run_length(src: bytes, pos: int, base: int) -> tuple[int, int]:
    length = base
    if base != 15:
        return length, pos
    while True:
        if pos >= len(src):
            raise ValueError("truncated length")
        byte = src[pos]
        pos += 1
        length += byte
        if byte != 255:
            return length, pos


def _uncompress_block(src: bytes, capacity: int) -> bytes:
    """Decode a raw LZ4 block whose output may not exceed ``capacity`` bytes."""
    out = bytearray()
    pos = 0
    end = len(src)
    while pos < end:
        token = src[pos]
        pos += 1

        literal_len, pos = _read_run_length(src, pos, token >> 4)
        if pos + literal_len > end:
            raise ValueError("literals run past end of input")
        if len(out) + literal_len > capacity:
            raise ValueError("output buffer too short")
        out += src[pos : pos + literal_len]
        pos += literal_len
        if pos == end:
            break

        if pos + 2 > end:
            raise ValueError("truncated match offset")
        offset = src[pos] | (src[pos + 1] << 8)
        pos += 2
        if offset == 0 or offset > len(out):
            raise ValueError(f"invalid match offset {offset}")

        match_len, pos = _read_run_length(src, pos, token & 0x0F)
        match_len += 4
        if len(out) + match_len > capacity:
            raise ValueError("output buffer too short")

        start = len(out) - offset
        if match_len <= offset:
            out += out[start : start + match_len]
        else:
            pattern = bytes(out[start:])
            repeats, remainder = divmod(match_len, offset)
            out += pattern * repeats + pattern[:remainder]
    return bytes(out)


def decompress(stream: BinaryIO) -> bytes:
    """Read a mozlz4 container from ``stream`` and return the decompressed data."""
    try:
        header = stream.read(len(MAGIC_HEADER))
    except OSError as exc:
        raise MozLz4Error(f"couldn't read header: {exc}") from exc
    if not header:
        raise MozLz4Error("couldn't read header: EOF")
    if header != MAGIC_HEADER:
        raise WrongHeaderError("no mozLz4 header")

    try:
        raw_size = stream.read(_SIZE.size)
    except OSError as exc:
        raise MozLz4Error(f"couldn't read size: {exc}") from exc
    if len(raw_size) < _SIZE.size:
        reason = "EOF" if not raw_size else "unexpected EOF"
        raise MozLz4Error(f"couldn't read size: {reason}")
    (size,) = _SIZE.unpack(raw_size)

    try:
        src = stream.read()
    except OSError as exc:
        raise MozLz4Error(f"couldn't read compressed data: {exc}") from exc

    try:
        out = _uncompress_block(src, size)
    except ValueError as exc:
        raise MozLz4Error(f"couldn't decompress data: {exc}") from exc

    if len(out) != size:
        raise WrongSizeError(f"Header size {size}, got {len(out)}: header size incorrect")
    return out


def compress(data: bytes, size: int | None = None) -> bytes:
    """Build a mozlz4 container for ``data``.

    ``size`` is the length written to the header; it defaults to ``len(data)``.
    """
    payload = bytes(data)
    header_size = len(payload) if size is None else size
    body = lz4.block.compress(payload, mode="high_compression", store_size=False)
    return MAGIC_HEADER + _SIZE.pack(header_size) + body