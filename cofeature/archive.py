"""Binary table files: one record after another, little-endian, no header."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Union

from .records import (
    FeatureKind,
    LineFeature,
    LineStyle,
    Point,
    PointFeature,
    PointStyle,
    PolygonFeature,
    PolygonStyle,
    TagFeature,
    TagStyle,
)

Feature = Union[PointFeature, LineFeature, PolygonFeature, TagFeature]
PathType = Union[str, os.PathLike]

_POINT = struct.Struct("<iiiiidd")
_LINE_HEADER = struct.Struct("<iiiiii")
_POLYGON_HEADER = struct.Struct("<idiiiii")
_COORD = struct.Struct("<dd")
_TAG_HEAD = struct.Struct("<ifi")
_TAG_MIDDLE = struct.Struct("<iii")
_TAG_TAIL = struct.Struct("<if")


class ArchiveError(ValueError):
    """Raised when a feature cannot be encoded or a table is corrupt."""


class _Truncated(Exception):
    pass


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    def _take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._data):
            raise _Truncated
        chunk = self._data[self._pos:end]
        self._pos = end
        return chunk

    def unpack(self, layout: struct.Struct) -> tuple:
        return layout.unpack(self._take(layout.size))

    def string(self) -> str:
        (length,) = struct.unpack("<B", self._take(1))
        if length == 0xFF:
            (length,) = struct.unpack("<H", self._take(2))
            if length == 0xFFFF:
                (length,) = struct.unpack("<I", self._take(4))
        return self._take(length).decode("utf-8", errors="replace")


def _encode_string(text: str) -> bytes:
    raw = text.encode("utf-8")
    size = len(raw)
    if size < 0xFF:
        prefix = struct.pack("<B", size)
    elif size < 0xFFFE:
        prefix = b"\xff" + struct.pack("<H", size)
    else:
        prefix = b"\xff\xff\xff" + struct.pack("<I", size)
    return prefix + raw


def _encode_coords(points: Iterable[Point]) -> bytes:
    return b"".join(_COORD.pack(p.x, p.y) for p in points)


def _encode_point(feature: PointFeature) -> bytes:
    s, p = feature.style, feature.point
    return _POINT.pack(s.id, s.radius, s.style, s.color, s.layer, p.x, p.y)


def _encode_line(feature: LineFeature) -> bytes:
    s = feature.style
    header = _LINE_HEADER.pack(s.id, s.style, s.width, s.color, s.layer, len(feature.points))
    return header + _encode_coords(feature.points)


def _encode_polygon(feature: PolygonFeature) -> bytes:
    s = feature.style
    header = _POLYGON_HEADER.pack(
        s.id, s.area, s.color, s.fill_style, s.style, s.layer, len(feature.points)
    )
    return header + _encode_coords(feature.points)


def _encode_tag(feature: TagFeature) -> bytes:
    s, p = feature.style, feature.point
    return b"".join(
        [
            _TAG_HEAD.pack(s.id, s.angle, s.color),
            _encode_string(s.font),
            _TAG_MIDDLE.pack(s.height, s.layer, s.offset),
            _encode_string(s.text),
            _TAG_TAIL.pack(s.width, s.text_angle),
            _COORD.pack(p.x, p.y),
        ]
    )


def _read_coords(reader: _Reader, count: int) -> List[Point]:
    try:
        return [Point(*reader.unpack(_COORD)) for _ in range(count)]
    except _Truncated:
        raise ArchiveError("table ends inside a coordinate list") from None


def _decode_point(reader: _Reader) -> PointFeature:
    fid, radius, style, color, layer, x, y = reader.unpack(_POINT)
    return PointFeature(Point(x, y), PointStyle(fid, radius, style, color, layer))


def _decode_line(reader: _Reader) -> LineFeature:
    fid, style, width, color, layer, count = reader.unpack(_LINE_HEADER)
    points = _read_coords(reader, count)
    return LineFeature(points, LineStyle(fid, style, width, color, layer))


def _decode_polygon(reader: _Reader) -> PolygonFeature:
    fid, area, color, fill, style, layer, count = reader.unpack(_POLYGON_HEADER)
    points = _read_coords(reader, count)
    return PolygonFeature(points, PolygonStyle(fid, area, color, fill, style, layer))


def _decode_tag(reader: _Reader) -> TagFeature:
    fid, angle, color = reader.unpack(_TAG_HEAD)
    font = reader.string()
    height, layer, offset = reader.unpack(_TAG_MIDDLE)
    text = reader.string()
    width, text_angle = reader.unpack(_TAG_TAIL)
    x, y = reader.unpack(_COORD)
    style = TagStyle(fid, angle, color, font, height, layer, offset, text, width, text_angle)
    return TagFeature(Point(x, y), style)


_ENCODERS: Dict[FeatureKind, tuple] = {
    FeatureKind.POINT: (PointFeature, _encode_point),
    FeatureKind.LINE: (LineFeature, _encode_line),
    FeatureKind.POLYGON: (PolygonFeature, _encode_polygon),
    FeatureKind.TAG: (TagFeature, _encode_tag),
}

_DECODERS: Dict[FeatureKind, Callable[[_Reader], Feature]] = {
    FeatureKind.POINT: _decode_point,
    FeatureKind.LINE: _decode_line,
    FeatureKind.POLYGON: _decode_polygon,
    FeatureKind.TAG: _decode_tag,
}


def encode_feature(kind: FeatureKind, feature: Feature) -> bytes:
    """Return the on-disk record for one feature of the given kind."""
    expected, encoder = _ENCODERS[kind]
    if not isinstance(feature, expected):
        raise TypeError(f"{kind.name} table cannot hold {type(feature).__name__}")
    try:
        return encoder(feature)
    except struct.error as exc:
        raise ArchiveError(f"cannot encode feature: {exc}") from exc


def decode_features(data: bytes, kind: FeatureKind) -> List[Feature]:
    """Decode every complete record in ``data``.

    A record cut short before its coordinate list ends the table quietly;
    a coordinate list cut short raises ArchiveError.
    """
    reader = _Reader(data)
    decoder = _DECODERS[kind]
    features: List[Feature] = []
    while True:
        try:
            features.append(decoder(reader))
        except _Truncated:
            return features


def read_features(path: PathType, kind: FeatureKind) -> List[Feature]:
    """Read a table file, creating it empty if it does not exist."""
    target = Path(path)
    target.touch(exist_ok=True)
    return decode_features(target.read_bytes(), kind)


def write_features(path: PathType, kind: FeatureKind, features: Iterable[Feature]) -> None:
    """Replace the table file with the given features."""
    data = b"".join(encode_feature(kind, f) for f in features)
    Path(path).write_bytes(data)


def append_feature(path: PathType, kind: FeatureKind, feature: Feature) -> None:
    """Append one feature to the end of a table file, creating it if needed."""
    record = encode_feature(kind, feature)
    with open(path, "ab") as handle:
        handle.write(record)