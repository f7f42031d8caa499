"""GeoJSON-style export of feature tables."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from .records import (
    FeatureKind,
    LineFeature,
    Point,
    PointFeature,
    PolygonFeature,
    TagFeature,
)

Feature = Union[PointFeature, LineFeature, PolygonFeature, TagFeature]
PathType = Union[str, os.PathLike]

_EXPORT_SUFFIXES = {
    FeatureKind.POINT: "_point.geojson",
    FeatureKind.LINE: "_line.geojson",
    FeatureKind.POLYGON: "_polygon.geojson",
    FeatureKind.TAG: "_tag.geojson",
}


class EmptyCollectionError(ValueError):
    """Raised when an empty table is exported."""


def _num(value: Union[int, float]) -> str:
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    return format(value, "g")


def _text(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _coords(points: Sequence[Point]) -> str:
    return "[" + ",".join(f"[{_num(p.x)},{_num(p.y)}]" for p in points) + "]"


def _properties(pairs: Iterable[tuple]) -> str:
    return "{" + ",".join(f'"{name}":{value}' for name, value in pairs) + "}"


def _feature(properties: str, geometry_type: str, coordinates: str) -> str:
    return (
        '{"type":"Feature","properties":'
        + properties
        + ',"geometry":{"type":"'
        + geometry_type
        + '","coordinates":'
        + coordinates
        + "}}"
    )


def _point(feature: PointFeature) -> str:
    s = feature.style
    props = _properties(
        [
            ("PntID", _num(s.id)),
            ("PntRadio", _num(s.radius)),
            ("PntStyle", _num(s.style)),
            ("PntColor", _num(s.color)),
            ("PntLayer", _num(s.layer)),
        ]
    )
    return _feature(props, "Point", _coords([feature.point]))


def _line(feature: LineFeature) -> str:
    s = feature.style
    props = _properties(
        [
            ("LineID", _num(s.id)),
            ("LineStyle", _num(s.style)),
            ("LineWidth", _num(s.width)),
            ("LineColor", _num(s.color)),
            ("LineLayer", _num(s.layer)),
            ("size", _num(len(feature.points))),
        ]
    )
    return _feature(props, "LineString", _coords(feature.points))


def _polygon(feature: PolygonFeature) -> str:
    s = feature.style
    props = _properties(
        [
            ("PolyID", _num(s.id)),
            ("PolyArea", _num(s.area)),
            ("PolyColor", _num(s.color)),
            ("PolyFillStyle", _num(s.fill_style)),
            ("PolyStyle", _num(s.style)),
            ("PolyLayer", _num(s.layer)),
            ("size", _num(len(feature.points))),
        ]
    )
    return _feature(props, "Polygon", _coords(feature.points))


def _tag(feature: TagFeature) -> str:
    s = feature.style
    props = _properties(
        [
            ("ID", _num(s.id)),
            ("TagAngle", _num(s.angle)),
            ("TagColor", _num(s.color)),
            ("TagFont", _text(s.font)),
            ("TagHeight", _num(s.height)),
            ("TagLayer", _num(s.layer)),
            ("TagOffsite", _num(s.offset)),
            ("TagStr", _text(s.text)),
            ("TagWidth", _num(s.width)),
            ("TextAngle", _num(s.text_angle)),
        ]
    )
    return _feature(props, "Tag", _coords([feature.point]))


def feature_to_geojson(feature: Feature) -> str:
    """Return the JSON text of one feature object."""
    if isinstance(feature, PointFeature):
        return _point(feature)
    if isinstance(feature, LineFeature):
        return _line(feature)
    if isinstance(feature, PolygonFeature):
        return _polygon(feature)
    if isinstance(feature, TagFeature):
        return _tag(feature)
    raise TypeError(f"not a feature: {type(feature).__name__}")


def collection_to_geojson(features: Iterable[Feature]) -> str:
    """Return the JSON text of a FeatureCollection holding the features."""
    body = ",".join(feature_to_geojson(f) for f in features)
    return '{"type":"FeatureCollection","features":[' + body + "]}"


def export_path(table_path: PathType, kind: FeatureKind) -> Path:
    """Path of the export file: the table path without its extension plus a kind suffix."""
    return Path(os.fspath(table_path)[:-4] + _EXPORT_SUFFIXES[kind])


def write_geojson(table_path: PathType, kind: FeatureKind, features: Iterable[Feature]) -> Path:
    """Write the features next to the table file and return the written path."""
    items: List[Feature] = list(features)
    if not items:
        raise EmptyCollectionError("cannot export an empty table")
    for item in items:
        if item.kind is not kind:
            raise TypeError(f"{kind.name} export cannot hold {type(item).__name__}")
    target = export_path(table_path, kind)
    target.write_text(collection_to_geojson(items), encoding="utf-8")
    return target