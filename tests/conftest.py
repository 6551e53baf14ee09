"""Shared test fixtures for themesyntax."""

from collections.abc import Callable

import pytest

from themesyntax.color_scheme import ColorRamps, ColorScheme
from themesyntax.settings import UNKNOWN_KEYS_ENV_VAR

NEUTRAL_SAMPLES = {
    1.0: "#ffffff",
    0.71: "#b5b5b5",
    0.57: "#919191",
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep resolver settings independent of the calling shell."""
    monkeypatch.delenv(UNKNOWN_KEYS_ENV_VAR, raising=False)


@pytest.fixture
def neutral_ramp() -> Callable[[float], str]:
    """Neutral ramp returning fixed colors at the default sample points."""

    def ramp(position: float) -> str:
        return NEUTRAL_SAMPLES.get(position, "#000000")

    return ramp


@pytest.fixture
def color_scheme(neutral_ramp: Callable[[float], str]) -> ColorScheme:
    """Color scheme without syntax overrides."""
    return ColorScheme(name="Test", ramps=ColorRamps(neutral=neutral_ramp))


@pytest.fixture
def make_scheme(neutral_ramp: Callable[[float], str]) -> Callable[..., ColorScheme]:
    """Factory for color schemes carrying syntax overrides."""

    def factory(syntax: object = None) -> ColorScheme:
        return ColorScheme(name="Test", ramps=ColorRamps(neutral=neutral_ramp), syntax=syntax)

    return factory
