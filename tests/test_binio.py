import io
from dataclasses import dataclass

import pytest

from infinity import binio
from infinity.enums import AssetType
from infinity.geometry import Vec2


@dataclass
class _Ref:
    key: str
    relative_path: str


class _Manager:
    def __init__(self):
        self.calls = []

    def _record(self, kind, key, path):
        self.calls.append((kind, key, path))
        return (kind, key, path)

    def load_texture(self, key, path):
        return self._record("texture", key, path)

    def load_sprite(self, key, path):
        return self._record("sprite", key, path)

    def load_flipbook(self, key, path):
        return self._record("flipbook", key, path)

    def load_tile(self, key, path):
        return self._record("tile", key, path)


def test_wstring_wire_format():
    buf = io.BytesIO()
    binio.write_wstring(buf, "AB")
    assert buf.getvalue() == b"\x02A\x00B\x00"


@pytest.mark.parametrize("text", ["", "Player", "BackBuffer", "포켓몬"])
def test_wstring_round_trip(text):
    buf = io.BytesIO()
    binio.write_wstring(buf, text)
    buf.seek(0)
    assert binio.read_wstring(buf) == text
    assert buf.read() == b""


def test_wstring_too_long_raises():
    with pytest.raises(ValueError):
        binio.write_wstring(io.BytesIO(), "x" * 256)


def test_wstring_max_length_round_trips():
    text = "y" * binio.MAX_WSTRING_LENGTH
    buf = io.BytesIO()
    binio.write_wstring(buf, text)
    buf.seek(0)
    assert binio.read_wstring(buf) == text


def test_truncated_wstring_raises_eof():
    with pytest.raises(EOFError):
        binio.read_wstring(io.BytesIO(b"\x03A\x00"))


def test_size_is_eight_bytes_and_round_trips():
    buf = io.BytesIO()
    binio.write_size(buf, 1)
    assert len(buf.getvalue()) == 8
    buf.seek(0)
    assert binio.read_size(buf) == 1


def test_int_round_trip_negative():
    buf = io.BytesIO()
    binio.write_int(buf, -42)
    assert len(buf.getvalue()) == 4
    buf.seek(0)
    assert binio.read_int(buf) == -42


def test_float_and_vec2_round_trip():
    buf = io.BytesIO()
    binio.write_float(buf, 0.5)
    binio.write_vec2(buf, Vec2(32.0, -16.25))
    buf.seek(0)
    assert binio.read_float(buf) == 0.5
    assert binio.read_vec2(buf) == Vec2(32.0, -16.25)


def test_read_int_from_empty_stream_raises():
    with pytest.raises(EOFError):
        binio.read_int(io.BytesIO())


def test_missing_asset_writes_flag_only():
    buf = io.BytesIO()
    binio.write_asset_info(buf, None)
    assert buf.getvalue() == b"\x00"
    buf.seek(0)
    manager = _Manager()
    assert binio.read_asset_info(buf, AssetType.SPRITE, manager) is None
    assert manager.calls == []


@pytest.mark.parametrize(
    "asset_type, kind",
    [
        (AssetType.TEXTURE, "texture"),
        (AssetType.SPRITE, "sprite"),
        (AssetType.FLIPBOOK, "flipbook"),
        (AssetType.TILE, "tile"),
    ],
)
def test_asset_info_round_trip_dispatches_to_loader(asset_type, kind):
    buf = io.BytesIO()
    binio.write_asset_info(buf, _Ref("Red_0", "Sprite\\Red_0.sprite"))
    buf.seek(0)
    manager = _Manager()
    result = binio.read_asset_info(buf, asset_type, manager)
    assert result == (kind, "Red_0", "Sprite\\Red_0.sprite")
    assert manager.calls == [result]


def test_asset_info_for_sound_consumes_record_and_returns_none():
    buf = io.BytesIO()
    binio.write_asset_info(buf, _Ref("beep", "Sound\\beep.wav"))
    binio.write_int(buf, 7)
    buf.seek(0)
    manager = _Manager()
    assert binio.read_asset_info(buf, AssetType.SOUND, manager) is None
    assert manager.calls == []
    assert binio.read_int(buf) == 7