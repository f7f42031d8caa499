"""Feature records: coordinates, display styles and the four feature kinds."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterable, Tuple, Union


class FeatureKind(Enum):
    """The kind of features a table file holds, named by its extension."""

    POINT = ".COP"
    LINE = ".COL"
    POLYGON = ".COA"
    TAG = ".CON"

    @classmethod
    def from_path(cls, path: Union[str, os.PathLike]) -> "FeatureKind":
        """Return the kind for a table path from its last four characters.

        The match is case-sensitive. Unknown extensions raise ValueError.
        """
        suffix = os.fspath(path)[-4:]
        try:
            return cls(suffix)
        except ValueError:
            raise ValueError(f"unknown feature table extension: {suffix!r}") from None


@dataclass(frozen=True)
class Point:
    """A map coordinate."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))


PointLike = Union[Point, Tuple[float, float]]


def _as_points(points: Iterable[PointLike]) -> Tuple[Point, ...]:
    return tuple(p if isinstance(p, Point) else Point(*p) for p in points)


@dataclass(frozen=True)
class PointStyle:
    """Attributes of a point feature."""

    id: int = 0
    radius: int = 1
    style: int = 0
    color: int = 0
    layer: int = 0


@dataclass(frozen=True)
class LineStyle:
    """Attributes of a line feature."""

    id: int = 0
    style: int = 0
    width: int = 1
    color: int = 0
    layer: int = 0


@dataclass(frozen=True)
class PolygonStyle:
    """Attributes of a polygon feature."""

    id: int = 0
    area: float = 0.0
    color: int = 0
    fill_style: int = 0
    style: int = 1
    layer: int = 0


@dataclass(frozen=True)
class TagStyle:
    """Attributes of a text annotation (tag)."""

    id: int = 0
    angle: float = 0.0
    color: int = 0
    font: str = "华文楷体"
    height: int = 20
    layer: int = 0
    offset: int = 1
    text: str = ""
    width: int = 10
    text_angle: float = 0.0


@dataclass(frozen=True)
class PointFeature:
    """A single point with its style."""

    kind: ClassVar[FeatureKind] = FeatureKind.POINT

    point: Point
    style: PointStyle = field(default_factory=PointStyle)

    def __post_init__(self) -> None:
        if not isinstance(self.point, Point):
            object.__setattr__(self, "point", Point(*self.point))


@dataclass(frozen=True)
class LineFeature:
    """A polyline with its style."""

    kind: ClassVar[FeatureKind] = FeatureKind.LINE

    points: Tuple[Point, ...]
    style: LineStyle = field(default_factory=LineStyle)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", _as_points(self.points))


@dataclass(frozen=True)
class PolygonFeature:
    """A polygon outline with its style."""

    kind: ClassVar[FeatureKind] = FeatureKind.POLYGON

    points: Tuple[Point, ...]
    style: PolygonStyle = field(default_factory=PolygonStyle)

    def __post_init__(self) -> None:
        object.__setattr__(self, "points", _as_points(self.points))


@dataclass(frozen=True)
class TagFeature:
    """A text annotation anchored at a point."""

    kind: ClassVar[FeatureKind] = FeatureKind.TAG

    point: Point
    style: TagStyle = field(default_factory=TagStyle)

    def __post_init__(self) -> None:
        if not isinstance(self.point, Point):
            object.__setattr__(self, "point", Point(*self.point))