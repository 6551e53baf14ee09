"""Tests for built-in palettes."""

from dataclasses import fields

import pytest

from themesyntax.palettes import (
    BASE_PALETTES,
    DEFAULT_THEME_NAME,
    NORD_THEME_NAME,
    PALETTE_LABELS,
    color_scheme_from_palette,
    get_palette,
)
from themesyntax.styles import SYNTAX_CATEGORIES
from themesyntax.syntax import build_syntax


class TestPalettes:
    """Tests for palette lookup."""

    def test_default_palette_registered(self) -> None:
        assert DEFAULT_THEME_NAME in PALETTE_LABELS

    def test_unique_ids(self) -> None:
        ids = [palette.theme_id for palette in BASE_PALETTES]
        assert len(ids) == len(set(ids))

    def test_get_palette(self) -> None:
        assert get_palette(NORD_THEME_NAME).name == "Nord"

    def test_get_unknown_palette(self) -> None:
        with pytest.raises(KeyError, match="missing"):
            get_palette("missing")


class TestColorSchemeFromPalette:
    """Tests for building schemes from palettes."""

    @pytest.mark.parametrize("palette", BASE_PALETTES, ids=lambda palette: palette.theme_id)
    def test_builds_complete_syntax(self, palette) -> None:
        syntax = build_syntax(color_scheme_from_palette(palette))
        assert set(syntax) == set(SYNTAX_CATEGORIES)
        assert syntax["primary"].color == palette.neutral[-1].lower()

    def test_attaches_overrides(self) -> None:
        scheme = color_scheme_from_palette(get_palette(NORD_THEME_NAME), syntax={"keyword": {"color": "#81a1c1"}})
        assert build_syntax(scheme)["keyword"].color == "#81a1c1"

    @pytest.mark.parametrize("palette", BASE_PALETTES, ids=lambda palette: palette.theme_id)
    def test_every_ramp_defined(self, palette) -> None:
        ramps = color_scheme_from_palette(palette).ramps
        for field in fields(ramps):
            assert getattr(ramps, field.name) is not None, field.name
        assert ramps.orange is not None
        assert ramps.orange(0.5) == palette.orange
        assert ramps.magenta is not None
        assert ramps.magenta(0.5) == palette.magenta

    def test_accent_ramps(self) -> None:
        palette = get_palette(NORD_THEME_NAME)
        scheme = color_scheme_from_palette(palette)
        assert scheme.ramps.red is not None
        assert scheme.ramps.red(0.5) == palette.red
        assert scheme.ramps.red(0.0) == palette.neutral[0]
        assert scheme.is_light is palette.is_light
