"""
Tests for geometry normalization.

Run with: python -m pytest tests/test_geometry.py
"""

import pytest

from logic.geometry import (
    InvalidPointError,
    client_to_canvas,
    is_percent_space,
    normalize_point,
    parse_coordinate,
)


def test_parse_coordinate_text_and_numbers():
    assert parse_coordinate("36.79") == 36.79
    assert parse_coordinate(" 12 ") == 12.0
    assert parse_coordinate(250) == 250.0
    assert parse_coordinate(-4.5) == -4.5


@pytest.mark.parametrize(
    "value", [None, "", "abc", "1,5", "nan", "inf", float("inf"), 10 ** 400, -(10 ** 400), True, [], {}]
)
def test_parse_coordinate_rejects_non_finite(value):
    with pytest.raises(InvalidPointError):
        parse_coordinate(value)


def test_invalid_point_error_is_value_error():
    assert issubclass(InvalidPointError, ValueError)


def test_percent_classification_boundary():
    assert is_percent_space(100, 100) is True
    assert is_percent_space(-100, 0) is True
    assert is_percent_space(100.01, 50) is False
    assert is_percent_space(50, 101) is False


def test_percent_point_scaled_to_canvas():
    x, y = normalize_point({"x": "36.79", "y": "20.21"})
    assert x == pytest.approx(220.74)
    assert y == pytest.approx(101.05)


def test_percent_point_scales_with_canvas_size():
    """Doubling the canvas width doubles the output x."""
    point = {"x": "36.79", "y": "20.21"}
    x1, y1 = normalize_point(point, 600, 500)
    x2, y2 = normalize_point(point, 1200, 500)
    assert x2 == pytest.approx(2 * x1)
    assert y2 == pytest.approx(y1)


@pytest.mark.parametrize(
    "point",
    [
        {"x": "220.76", "y": "101.03"},
        {"x": 150, "y": 20},
        {"x": 20, "y": 480},
        {"x": -120, "y": 5},
    ],
)
def test_pixel_point_passes_through(point):
    x, y = normalize_point(point, 600, 500)
    assert x == float(point["x"])
    assert y == float(point["y"])


def test_small_pixel_point_is_read_as_percent():
    """Known limitation: pixel coordinates at or below 100 are scaled."""
    x, y = normalize_point({"x": "74.76", "y": "96.20"}, 600, 500)
    assert x == pytest.approx(448.56)
    assert y == pytest.approx(481.0)


def test_normalize_point_rejects_bad_input():
    with pytest.raises(InvalidPointError):
        normalize_point({"x": "12", "y": "oops"})
    with pytest.raises(InvalidPointError):
        normalize_point({"x": "12"})
    with pytest.raises(InvalidPointError):
        normalize_point("12,12")


def test_client_to_canvas_rescales_displayed_canvas():
    rect = {"left": 10, "top": 20, "width": 300, "height": 250}
    x, y = client_to_canvas(160, 145, rect, 600, 500)
    assert x == pytest.approx(300)
    assert y == pytest.approx(250)


def test_client_to_canvas_unscaled():
    rect = {"left": 0, "top": 0, "width": 600, "height": 500}
    assert client_to_canvas(42, 17, rect) == (42, 17)


def test_client_to_canvas_zero_size():
    with pytest.raises(ValueError):
        client_to_canvas(1, 1, {"left": 0, "top": 0, "width": 0, "height": 500})
