"""Display names for style codes and conversion of entered tag angles."""

from __future__ import annotations

from typing import Mapping

_POINT_STYLES: Mapping[int, str] = {
    0: "圆点",
    1: "三角点",
    2: "放点",
}

_LINE_STYLES: Mapping[int, str] = {
    0: "实线",
    1: "虚线",
    2: "点线",
    3: "点划线",
    4: "双点划线",
    5: "空画笔",
}

_POLYGON_STYLES: Mapping[int, str] = {
    0: "矩形区",
    1: "多边形区",
    2: "椭圆区",
    3: "三角形内接圆",
    4: "三角形",
}

_FILL_STYLES: Mapping[int, str] = {
    0: "水平线",
    1: "竖直线",
    2: "下斜线",
    3: "上斜线",
    4: "十字形",
    5: "交叉线",
    6: "无图案",
}


def point_style_name(style: int) -> str:
    """Name of a point symbol code, or an empty string if unknown."""
    return _POINT_STYLES.get(style, "")


def line_style_name(style: int) -> str:
    """Name of a line pen code, or an empty string if unknown."""
    return _LINE_STYLES.get(style, "")


def polygon_style_name(style: int) -> str:
    """Name of a polygon shape code, or an empty string if unknown."""
    return _POLYGON_STYLES.get(style, "")


def fill_style_name(style: int) -> str:
    """Name of a polygon fill pattern code, or an empty string if unknown."""
    return _FILL_STYLES.get(style, "")


def tag_angle_from_input(angle: float) -> float:
    """Stored tag angle for an angle as the user enters it (360 minus it)."""
    return 360 - angle