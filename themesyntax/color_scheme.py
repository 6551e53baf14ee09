"""Color scheme input consumed by the syntax resolver."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from themesyntax.styles import ThemeSyntax


class ColorRamp(Protocol):
    """Maps a position in [0, 1] to a hex color string."""

    def __call__(self, position: float) -> str:
        """Sample the ramp."""
        ...


@dataclass(frozen=True)
class ColorRamps:
    """Named color ramps of a scheme. Only the neutral ramp is required."""

    neutral: ColorRamp
    red: ColorRamp | None = None
    orange: ColorRamp | None = None
    yellow: ColorRamp | None = None
    green: ColorRamp | None = None
    cyan: ColorRamp | None = None
    blue: ColorRamp | None = None
    violet: ColorRamp | None = None
    magenta: ColorRamp | None = None


@dataclass(frozen=True)
class ColorScheme:
    """Theme descriptor: color ramps plus optional syntax overrides."""

    name: str
    ramps: ColorRamps
    is_light: bool = False
    syntax: ThemeSyntax | None = None
