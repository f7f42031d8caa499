import struct

import pytest

from cofeature.archive import (
    ArchiveError,
    append_feature,
    decode_features,
    encode_feature,
    read_features,
    write_features,
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

POINT = PointFeature(Point(1.5, -2.25), PointStyle(id=3, radius=4, style=1, color=255, layer=2))
LINE = LineFeature([(0, 0), (1, 1), (2, 0.5)], LineStyle(id=1, style=2, width=3, color=7, layer=1))
POLYGON = PolygonFeature(
    [(0, 0), (4, 0), (4, 3)], PolygonStyle(id=5, area=6.0, color=9, fill_style=3, style=1, layer=2)
)
TAG = TagFeature(
    Point(10, 20),
    TagStyle(id=2, angle=45.0, color=1, font="宋体", height=12, layer=3,
             offset=2, text="河流", width=6, text_angle=90.5),
)

SAMPLES = [
    (FeatureKind.POINT, POINT),
    (FeatureKind.LINE, LINE),
    (FeatureKind.POLYGON, POLYGON),
    (FeatureKind.TAG, TAG),
]


@pytest.mark.parametrize("kind, feature", SAMPLES)
def test_encode_decode_round_trip(kind, feature):
    data = encode_feature(kind, feature)
    assert decode_features(data, kind) == [feature]


@pytest.mark.parametrize("kind, feature", SAMPLES)
def test_several_records_round_trip(kind, feature):
    data = encode_feature(kind, feature) * 3
    assert decode_features(data, kind) == [feature] * 3


def test_point_record_layout():
    data = encode_feature(FeatureKind.POINT, POINT)
    assert data == struct.pack("<iiiiidd", 3, 4, 1, 255, 2, 1.5, -2.25)


def test_line_record_carries_point_count():
    data = encode_feature(FeatureKind.LINE, LINE)
    assert struct.unpack_from("<iiiiii", data)[5] == len(LINE.points)


def test_long_tag_text_uses_word_length_prefix():
    text = "a" * 300
    feature = TagFeature(Point(0, 0), TagStyle(text=text))
    data = encode_feature(FeatureKind.TAG, feature)
    assert b"\xff" + struct.pack("<H", 300) + text.encode() in data
    assert decode_features(data, FeatureKind.TAG) == [feature]


def test_empty_data_gives_no_features():
    assert decode_features(b"", FeatureKind.LINE) == []


def test_truncated_point_record_is_dropped():
    data = encode_feature(FeatureKind.POINT, POINT)
    assert decode_features(data + data[:-1], FeatureKind.POINT) == [POINT]


def test_truncated_coordinates_raise():
    data = encode_feature(FeatureKind.LINE, LINE)
    with pytest.raises(ArchiveError):
        decode_features(data[:-4], FeatureKind.LINE)


def test_wrong_feature_type_rejected():
    with pytest.raises(TypeError):
        encode_feature(FeatureKind.LINE, POINT)


def test_out_of_range_value_raises_archive_error():
    feature = PointFeature(Point(0, 0), PointStyle(id=2**40))
    with pytest.raises(ArchiveError):
        encode_feature(FeatureKind.POINT, feature)


def test_read_missing_file_creates_it(tmp_path):
    path = tmp_path / "new.COP"
    assert read_features(path, FeatureKind.POINT) == []
    assert path.exists()


def test_write_then_read(tmp_path):
    path = tmp_path / "t.COA"
    other = PolygonFeature([(1, 1)], PolygonStyle(id=6))
    write_features(path, FeatureKind.POLYGON, [POLYGON, other])
    assert read_features(path, FeatureKind.POLYGON) == [POLYGON, other]


def test_write_replaces_content(tmp_path):
    path = tmp_path / "t.COL"
    write_features(path, FeatureKind.LINE, [LINE, LINE])
    write_features(path, FeatureKind.LINE, [LINE])
    assert read_features(path, FeatureKind.LINE) == [LINE]


def test_append_adds_to_end(tmp_path):
    path = tmp_path / "t.CON"
    append_feature(path, FeatureKind.TAG, TAG)
    second = TagFeature(Point(1, 1), TagStyle(id=9, text="x"))
    append_feature(path, FeatureKind.TAG, second)
    assert read_features(path, FeatureKind.TAG) == [TAG, second]