"""Tests for linear color ramps."""

import pytest
from textual.color import ColorParseError

from themesyntax.ramps import LinearColorRamp


class TestLinearColorRamp:
    """Tests for LinearColorRamp."""

    def test_endpoints(self) -> None:
        ramp = LinearColorRamp.from_colors("#000000", "#FFFFFF")
        assert ramp(0.0) == "#000000"
        assert ramp(1.0) == "#ffffff"

    def test_interpolates(self) -> None:
        ramp = LinearColorRamp.from_colors("#000000", "#c8c8c8")
        assert ramp(0.5) == "#646464"

    def test_multiple_stops(self) -> None:
        ramp = LinearColorRamp.from_colors("#000000", "#ff0000", "#ffffff")
        assert ramp(0.5) == "#ff0000"
        assert ramp(1.0) == "#ffffff"

    def test_clamps_positions(self) -> None:
        ramp = LinearColorRamp.from_colors("#101010", "#202020")
        assert ramp(-1.0) == "#101010"
        assert ramp(2.0) == "#202020"

    def test_unsorted_stops(self) -> None:
        ramp = LinearColorRamp([(1.0, "#ffffff"), (0.0, "#000000")])
        assert ramp(0.0) == "#000000"

    def test_single_stop(self) -> None:
        ramp = LinearColorRamp.from_colors("#123456")
        assert ramp(0.3) == "#123456"

    def test_requires_stops(self) -> None:
        with pytest.raises(ValueError):
            LinearColorRamp([])

    def test_invalid_color(self) -> None:
        with pytest.raises(ColorParseError):
            LinearColorRamp.from_colors("not-a-color", "#ffffff")
