# cofeature

A small, file-backed store for vector GIS features. It handles four kinds of
feature: points, lines, polygons and text annotations (tags). Each feature
carries a style record with a numeric ID. Features are kept in binary table
files, and the last four characters of the file name pick the kind. The match
is case-sensitive:

| Extension | Kind     | Feature class    | Style class    |
|-----------|----------|------------------|----------------|
| `.COP`    | points   | `PointFeature`   | `PointStyle`   |
| `.COL`    | lines    | `LineFeature`    | `LineStyle`    |
| `.COA`    | polygons | `PolygonFeature` | `PolygonStyle` |
| `.CON`    | tags     | `TagFeature`     | `TagStyle`     |

All of these classes, together with `Point` and `FeatureKind`, are in
`cofeature.records`. `FeatureKind.from_path` raises `ValueError` for any other
extension. Any table can also be exported as GeoJSON-style text.

## Installation

```
pip install .
```

The package uses only the Python standard library. It needs Python 3.10 or
later.

## Usage

```python
from cofeature.featureset import FeatureSet, Recordset
from cofeature.records import Point, PointFeature, PointStyle

wells = FeatureSet("wells.COP")
new_id = wells.add(PointFeature(Point(10.0, 20.0), PointStyle(radius=3)))

feature = wells.get(new_id)
wells.delete(new_id)
```

### `FeatureSet`

- `add(feature)` stores the feature under the ID one above the current highest
  ID and returns that ID. Any ID already set on the feature is ignored. For a
  polygon whose `style.style` is not `1`, the stored `area` is set to `0.0`.
  For style `1`, the stored area is the one you give.
- `update(feature)` replaces the first stored feature that has the same ID and
  rewrites the file. It does nothing if no feature has that ID.
- `delete(feature_id)` removes every feature with that ID.
- `get(feature_id)` returns the first feature with that ID. It raises
  `KeyError` if there is none.
- `max_id()` returns the highest ID, or `0` for an empty table.
- `all_ids()` returns the IDs in file order.
- `load()` re-reads the file. `save()` rewrites the file from the features held
  in memory in `features`.
- `delete_all()` empties the file.

A table file that does not exist is created empty the first time it is read.

`add`, `update` and `delete` raise `TypeError` for a feature of the wrong kind
for the table.

### `Recordset`

`Recordset` is a cursor over the IDs the feature set held when the recordset
was created:

```python
records = Recordset(wells)
for feature in records:
    print(feature)

records.move_first()
while not records.at_end():
    print(records.current_id(), records.current())
    records.move_next()
```

- `current_id()` raises `IndexError` when the cursor is out of range.
- `current()` reads the feature under the cursor from the table.
- `move_last()` moves the cursor to the last ID.
- `close()` clears the IDs and rewinds the cursor.

### GeoJSON export

`FeatureSet.save_geojson()` exports the features held in memory. It writes a
file next to the table, named after the table without its extension plus a
suffix for the kind: `wells.COP` becomes `wells_point.geojson`. The other
suffixes are `_line`, `_polygon` and `_tag`. The method returns the written
path. Exporting an empty collection raises
`cofeature.geojson.EmptyCollectionError`.

Each feature's coordinates are written as a list of `[x, y]` pairs, even for
points. Tags use the geometry type `"Tag"`.

`cofeature.geojson` also provides these functions:

- `feature_to_geojson`
- `collection_to_geojson`
- `export_path`
- `write_geojson`

### Lower-level helpers

- `cofeature.archive` reads and writes the binary records directly:
  `read_features`, `write_features`, `append_feature`, `encode_feature` and
  `decode_features`.
  - Records are little-endian and have no file header.
  - Tag strings are UTF-8 with a length prefix.
  - A record cut off before its coordinate list ends the table quietly.
  - A coordinate list that is cut off raises `ArchiveError`.
- `cofeature.styles` gives the display names of style codes:
  `point_style_name`, `line_style_name`, `polygon_style_name` and
  `fill_style_name`. Each returns an empty string for an unknown code.
  `tag_angle_from_input(angle)` returns `360 - angle`.
- `cofeature.featureset.current_time_string()` formats the local time as
  `Y-M-D h:m:s` without zero padding.

## What this package does not do

- **No area calculation.** It does not compute polygon areas. The area is
  stored as supplied (or set to zero, as described above).
- **No bounding-box queries.** It does not compute bounding boxes and has no
  spatial selection by rectangle or by point.
- **No drawing or editing.** It provides no interactive forms or drawing.
- **No database or command-line tool.** It keeps features only in local files,
  and it has no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```