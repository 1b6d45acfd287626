"""Tests for the tone grid."""

import pytest

from tone_picker.models import ToneCoordinate
from tone_picker.prompts import TONE_MATRIX, describe


class TestToneTable:
    @pytest.mark.parametrize("x", [0, 1, 2])
    @pytest.mark.parametrize("y", [0, 1, 2])
    def test_every_grid_point_has_a_description(self, x, y):
        tone = describe(ToneCoordinate(x=x, y=y))
        assert tone.description

    def test_table_covers_exactly_the_grid(self):
        assert set(TONE_MATRIX) == {(x, y) for x in range(3) for y in range(3)}

    def test_corners(self):
        assert describe(ToneCoordinate(0, 0)).description == "Very formal and professional"
        assert describe(ToneCoordinate(2, 2)).description == "Very casual and friendly"

    def test_labels_follow_axes(self):
        tone = describe(ToneCoordinate(x=0, y=2))
        assert tone.x_label == "formal"
        assert tone.y_label == "casual"
        assert tone.to_dict() == {"x": "formal", "y": "casual", "description": "Formal but approachable"}

    def test_outside_grid_raises(self):
        with pytest.raises(KeyError):
            describe(ToneCoordinate(x=3, y=0))


class TestCoordinateRange:
    @pytest.mark.parametrize("value", [0, 1, 2])
    def test_valid(self, value):
        assert ToneCoordinate.in_range(value)

    @pytest.mark.parametrize("value", [-1, 3, 1.0, "1", None, True, False])
    def test_invalid(self, value):
        assert not ToneCoordinate.in_range(value)
