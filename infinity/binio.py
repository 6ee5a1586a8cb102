"""Binary helpers for the engine's asset file format."""

from __future__ import annotations

import struct
from typing import Any, BinaryIO

from .enums import AssetType
from .geometry import Vec2

MAX_WSTRING_LENGTH = 255

_SIZE = struct.Struct("<Q")
_INT = struct.Struct("<i")
_FLOAT = struct.Struct("<f")


def _read_exact(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count)
    if len(data) != count:
        raise EOFError(f"expected {count} bytes, got {len(data)}")
    return data


def write_wstring(stream: BinaryIO, text: str) -> None:
    """Write a string as a one-byte length and UTF-16LE code units."""
    data = text.encode("utf-16-le")
    units = len(data) // 2
    if units > MAX_WSTRING_LENGTH:
        raise ValueError(
            f"string of {units} code units exceeds {MAX_WSTRING_LENGTH}"
        )
    stream.write(bytes([units]))
    stream.write(data)


def read_wstring(stream: BinaryIO) -> str:
    """Read a string written by write_wstring."""
    units = _read_exact(stream, 1)[0]
    text = _read_exact(stream, units * 2).decode("utf-16-le")
    return text.split("\0", 1)[0]


def write_size(stream: BinaryIO, value: int) -> None:
    """Write an unsigned 64-bit count."""
    stream.write(_SIZE.pack(value))


def read_size(stream: BinaryIO) -> int:
    return _SIZE.unpack(_read_exact(stream, _SIZE.size))[0]


def write_int(stream: BinaryIO, value: int) -> None:
    """Write a signed 32-bit integer."""
    stream.write(_INT.pack(int(value)))


def read_int(stream: BinaryIO) -> int:
    return _INT.unpack(_read_exact(stream, _INT.size))[0]


def write_float(stream: BinaryIO, value: float) -> None:
    """Write a 32-bit float."""
    stream.write(_FLOAT.pack(value))


def read_float(stream: BinaryIO) -> float:
    return _FLOAT.unpack(_read_exact(stream, _FLOAT.size))[0]


def write_vec2(stream: BinaryIO, vec: Vec2) -> None:
    """Write a vector as two 32-bit floats."""
    write_float(stream, vec.x)
    write_float(stream, vec.y)


def read_vec2(stream: BinaryIO) -> Vec2:
    x = read_float(stream)
    y = read_float(stream)
    return Vec2(x, y)


def write_asset_info(stream: BinaryIO, asset: Any) -> None:
    """Write a reference to an asset: a presence flag, its key and path."""
    if asset is None:
        stream.write(b"\x00")
        return
    stream.write(b"\x01")
    write_wstring(stream, asset.key)
    write_wstring(stream, asset.relative_path)


def read_asset_info(stream: BinaryIO, asset_type: AssetType, manager: Any) -> Any:
    """Read an asset reference and load it through the manager.

    Returns None when no asset was stored or the type has no loader.
    """
    present = _read_exact(stream, 1)[0] != 0
    if not present:
        return None
    key = read_wstring(stream)
    path = read_wstring(stream)
    match AssetType(asset_type):
        case AssetType.TEXTURE:
            return manager.load_texture(key, path)
        case AssetType.SPRITE:
            return manager.load_sprite(key, path)
        case AssetType.FLIPBOOK:
            return manager.load_flipbook(key, path)
        case AssetType.TILE:
            return manager.load_tile(key, path)
        case _:
            return None