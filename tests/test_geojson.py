import json

import pytest

from cofeature.geojson import (
    EmptyCollectionError,
    collection_to_geojson,
    export_path,
    feature_to_geojson,
    write_geojson,
)
from cofeature.records import (
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


def test_point_exact_text():
    feature = PointFeature(Point(1.5, 2), PointStyle(3, 4, 1, 255, 2))
    assert feature_to_geojson(feature) == (
        '{"type":"Feature","properties":{"PntID":3,"PntRadio":4,"PntStyle":1,'
        '"PntColor":255,"PntLayer":2},"geometry":{"type":"Point",'
        '"coordinates":[[1.5,2]]}}'
    )


def test_line_properties_and_coordinates():
    feature = LineFeature([(0, 0), (1.25, 2.5), (3, 4)], LineStyle(7, 2, 3, 16, 1))
    data = json.loads(feature_to_geojson(feature))
    assert data["geometry"]["type"] == "LineString"
    assert data["geometry"]["coordinates"] == [[0, 0], [1.25, 2.5], [3, 4]]
    assert data["properties"]["LineID"] == 7
    assert data["properties"]["LineWidth"] == 3
    assert data["properties"]["size"] == 3


def test_polygon_properties():
    feature = PolygonFeature([(0, 0), (2, 0), (2, 2)], PolygonStyle(5, 2.5, 9, 6, 1, 4))
    data = json.loads(feature_to_geojson(feature))
    assert data["geometry"]["type"] == "Polygon"
    assert data["properties"]["PolyArea"] == 2.5
    assert data["properties"]["PolyFillStyle"] == 6
    assert data["properties"]["size"] == 3


def test_tag_strings_are_quoted():
    feature = TagFeature(Point(10, 20), TagStyle(id=2, font="Arial", text="river"))
    data = json.loads(feature_to_geojson(feature))
    assert data["geometry"]["type"] == "Tag"
    assert data["properties"]["TagFont"] == "Arial"
    assert data["properties"]["TagStr"] == "river"
    assert data["geometry"]["coordinates"] == [[10, 20]]


def test_tag_text_with_quote_stays_valid_json():
    feature = TagFeature(Point(0, 0), TagStyle(text='say "hi"'))
    data = json.loads(feature_to_geojson(feature))
    assert data["properties"]["TagStr"] == 'say "hi"'


def test_feature_to_geojson_rejects_other_objects():
    with pytest.raises(TypeError):
        feature_to_geojson(Point(1, 2))


def test_collection_wraps_features_in_order():
    features = [
        PointFeature(Point(1, 1), PointStyle(id=1)),
        PointFeature(Point(2, 2), PointStyle(id=2)),
    ]
    text = collection_to_geojson(features)
    assert text.startswith('{"type":"FeatureCollection","features":[')
    data = json.loads(text)
    assert [f["properties"]["PntID"] for f in data["features"]] == [1, 2]


def test_export_path_suffixes(tmp_path):
    assert export_path(tmp_path / "roads.COL", FeatureKind.LINE) == tmp_path / "roads_line.geojson"
    assert export_path(tmp_path / "a.COP", FeatureKind.POINT) == tmp_path / "a_point.geojson"
    assert export_path(tmp_path / "a.COA", FeatureKind.POLYGON) == tmp_path / "a_polygon.geojson"
    assert export_path(tmp_path / "a.CON", FeatureKind.TAG) == tmp_path / "a_tag.geojson"


def test_write_geojson_writes_file(tmp_path):
    features = [PointFeature(Point(3, 4), PointStyle(id=1))]
    written = write_geojson(tmp_path / "p.COP", FeatureKind.POINT, features)
    assert written == tmp_path / "p_point.geojson"
    assert written.read_text(encoding="utf-8") == collection_to_geojson(features)


def test_write_geojson_refuses_empty(tmp_path):
    with pytest.raises(EmptyCollectionError):
        write_geojson(tmp_path / "p.COP", FeatureKind.POINT, [])
    assert not (tmp_path / "p_point.geojson").exists()


def test_write_geojson_rejects_wrong_kind(tmp_path):
    with pytest.raises(TypeError):
        write_geojson(tmp_path / "p.COL", FeatureKind.LINE, [PointFeature(Point(0, 0))])