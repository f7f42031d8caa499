"""A feature table file and a cursor over its records."""

from __future__ import annotations

import dataclasses
import os
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .archive import append_feature, read_features, write_features
from .geojson import write_geojson
from .records import FeatureKind, LineFeature, PointFeature, PolygonFeature, TagFeature

Feature = Union[PointFeature, LineFeature, PolygonFeature, TagFeature]
PathType = Union[str, os.PathLike]


def current_time_string(now: Optional[datetime] = None) -> str:
    """Local time as 'Y-M-D h:m:s' with no zero padding."""
    t = now if now is not None else datetime.now()
    return f"{t.year}-{t.month}-{t.day} {t.hour}:{t.minute}:{t.second}"


def _with_id(feature: Feature, feature_id: int) -> Feature:
    return dataclasses.replace(feature, style=dataclasses.replace(feature.style, id=feature_id))


class FeatureSet:
    """One table file of a single feature kind, chosen by its extension."""

    def __init__(self, path: PathType) -> None:
        self.path = Path(path)
        self.kind = FeatureKind.from_path(path)
        self.features: List[Feature] = []

    def _check(self, feature: Feature) -> None:
        if getattr(feature, "kind", None) is not self.kind:
            raise TypeError(f"{self.kind.name} table cannot hold {type(feature).__name__}")

    def load(self) -> List[Feature]:
        """Re-read the table file (creating it if missing) and return its features."""
        self.features = read_features(self.path, self.kind)
        return self.features

    def save(self) -> None:
        """Rewrite the table file from the features held in memory."""
        write_features(self.path, self.kind, self.features)

    def max_id(self) -> int:
        """Largest feature id in the table, or 0 when there is none above 0."""
        return max([0, *(f.style.id for f in self.load())])

    def all_ids(self) -> List[int]:
        """Ids of every feature, in file order."""
        return [f.style.id for f in self.load()]

    def add(self, feature: Feature) -> int:
        """Append a feature under the next free id and return that id."""
        self._check(feature)
        new_id = self.max_id() + 1
        record = _with_id(feature, new_id)
        if isinstance(record, PolygonFeature) and record.style.style != 1:
            record = dataclasses.replace(
                record, style=dataclasses.replace(record.style, area=0.0)
            )
        append_feature(self.path, self.kind, record)
        self.features.append(record)
        return new_id

    def delete(self, feature_id: int) -> int:
        """Remove every feature with the id and return the id."""
        self.features = [f for f in self.load() if f.style.id != feature_id]
        self.save()
        return feature_id

    def update(self, feature: Feature) -> int:
        """Replace the first feature sharing the given feature's id; return the id."""
        self._check(feature)
        feature_id = feature.style.id
        features = self.load()
        for index, existing in enumerate(features):
            if existing.style.id == feature_id:
                features[index] = feature
                break
        self.save()
        return feature_id

    def get(self, feature_id: int) -> Feature:
        """The first feature with the id; KeyError if there is none."""
        for feature in self.load():
            if feature.style.id == feature_id:
                return feature
        raise KeyError(feature_id)

    def delete_all(self) -> None:
        """Truncate the table file to nothing."""
        self.path.write_bytes(b"")
        self.features = []

    def save_geojson(self) -> Path:
        """Export the features held in memory next to the table; return the path."""
        return write_geojson(self.path, self.kind, self.features)


class Recordset:
    """A cursor over the ids a feature set held when it was opened."""

    def __init__(self, featureset: FeatureSet) -> None:
        self.featureset = featureset
        self.ids: List[int] = featureset.all_ids()
        self.location = 0

    def close(self) -> None:
        """Forget the ids and rewind."""
        self.ids = []
        self.location = 0

    def move_next(self) -> None:
        self.location += 1

    def move_first(self) -> None:
        self.location = 0

    def move_last(self) -> None:
        self.location = len(self.ids) - 1

    def at_end(self) -> bool:
        """True when the cursor has moved past the last id."""
        return self.location == len(self.ids)

    def current_id(self) -> int:
        if not 0 <= self.location < len(self.ids):
            raise IndexError("recordset cursor is out of range")
        return self.ids[self.location]

    def current(self) -> Feature:
        """The feature under the cursor, read from the table."""
        return self.featureset.get(self.current_id())

    def __iter__(self) -> Iterator[Feature]:
        for feature_id in list(self.ids):
            yield self.featureset.get(feature_id)