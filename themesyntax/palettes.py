"""Built-in base palettes and their color schemes."""

from __future__ import annotations

from dataclasses import dataclass

from themesyntax.color_scheme import ColorRamps, ColorScheme
from themesyntax.ramps import LinearColorRamp
from themesyntax.styles import ThemeSyntax

OC1_THEME_NAME = "oc-1"
TOKYONIGHT_THEME_NAME = "tokyonight"
DRACULA_THEME_NAME = "dracula"
NORD_THEME_NAME = "nord"
SOLARIZED_THEME_NAME = "solarized"
SOLARIZED_LIGHT_THEME_NAME = "solarized-light"

DEFAULT_THEME_NAME = OC1_THEME_NAME


@dataclass(frozen=True)
class BasePalette:
    """Base colors of a theme.

    ``neutral`` runs from the editor background to the strongest text color;
    the accents are the mid-point of their ramps.
    """

    name: str
    theme_id: str
    neutral: tuple[str, ...]
    red: str
    orange: str
    yellow: str
    green: str
    cyan: str
    blue: str
    violet: str
    magenta: str
    is_light: bool = False


BASE_PALETTES = (
    BasePalette(
        name="OC-1",
        theme_id=OC1_THEME_NAME,
        neutral=("#151313", "#3a3333", "#b8b0b0", "#f5f5f5", "#ffffff"),
        red="#fc533a",
        orange="#f5a742",
        yellow="#fcd53a",
        green="#12c905",
        cyan="#56b6c2",
        blue="#034cff",
        violet="#fab283",
        magenta="#d670d6",
    ),
    BasePalette(
        name="Tokyo Night",
        theme_id=TOKYONIGHT_THEME_NAME,
        neutral=("#101324", "#3a3e57", "#7a88cf", "#c0caf5", "#eaeaff"),
        red="#f7768e",
        orange="#ff9e64",
        yellow="#e0af68",
        green="#9ece6a",
        cyan="#7dcfff",
        blue="#7aa2f7",
        violet="#bb9af7",
        magenta="#ff007c",
    ),
    BasePalette(
        name="Dracula",
        theme_id=DRACULA_THEME_NAME,
        neutral=("#161722", "#3f415a", "#b6b9e4", "#f8f8f2", "#ffffff"),
        red="#ff5555",
        orange="#ffb86c",
        yellow="#f1fa8c",
        green="#50fa7b",
        cyan="#8be9fd",
        blue="#6272a4",
        violet="#bd93f9",
        magenta="#ff79c6",
    ),
    BasePalette(
        name="Nord",
        theme_id=NORD_THEME_NAME,
        neutral=("#2e3440", "#4c566a", "#d8dee9", "#e5e9f0", "#eceff4"),  # nord0, nord3, nord4-6
        red="#bf616a",  # nord11
        orange="#d08770",  # nord12
        yellow="#ebcb8b",  # nord13
        green="#a3be8c",  # nord14
        cyan="#88c0d0",  # nord8
        blue="#5e81ac",  # nord10
        violet="#b48ead",  # nord15
        magenta="#b48ead",  # nord15
    ),
    BasePalette(
        name="Solarized",
        theme_id=SOLARIZED_THEME_NAME,
        neutral=("#002b36", "#073642", "#586e75", "#93a1a1", "#fdf6e3"),
        red="#dc322f",
        orange="#cb4b16",
        yellow="#b58900",
        green="#859900",
        cyan="#2aa198",
        blue="#268bd2",
        violet="#6c71c4",
        magenta="#d33682",
    ),
    BasePalette(
        name="Solarized Light",
        theme_id=SOLARIZED_LIGHT_THEME_NAME,
        neutral=("#fdf6e3", "#eee8d5", "#93a1a1", "#586e75", "#002b36"),
        red="#dc322f",
        orange="#cb4b16",
        yellow="#b58900",
        green="#859900",
        cyan="#2aa198",
        blue="#268bd2",
        violet="#6c71c4",
        magenta="#d33682",
        is_light=True,
    ),
)

PALETTE_LABELS: dict[str, str] = {palette.theme_id: palette.name for palette in BASE_PALETTES}


def get_palette(theme_id: str) -> BasePalette:
    """Look up a built-in palette.

    Args:
        theme_id: Palette identifier, e.g. ``"nord"``.

    Returns:
        The matching palette.

    Raises:
        KeyError: If no palette has this identifier.
    """
    for palette in BASE_PALETTES:
        if palette.theme_id == theme_id:
            return palette
    raise KeyError(f"Unknown palette {theme_id!r}; available: {', '.join(PALETTE_LABELS)}")


def _accent_ramp(color: str, background: str, foreground: str) -> LinearColorRamp:
    """Ramp from the background through an accent to the foreground.

    Args:
        color: Accent color placed at the middle of the ramp.
        background: Color at position 0.
        foreground: Color at position 1.

    Returns:
        A three-stop ramp.
    """
    return LinearColorRamp.from_colors(background, color, foreground)


def color_scheme_from_palette(palette: BasePalette, syntax: ThemeSyntax | None = None) -> ColorScheme:
    """Build a ColorScheme from a base palette.

    Args:
        palette: Base palette.
        syntax: Optional syntax overrides to attach to the scheme.

    Returns:
        A ColorScheme with linear ramps.
    """
    background = palette.neutral[0]
    foreground = palette.neutral[-1]
    ramps = ColorRamps(
        neutral=LinearColorRamp.from_colors(*palette.neutral),
        red=_accent_ramp(palette.red, background, foreground),
        orange=_accent_ramp(palette.orange, background, foreground),
        yellow=_accent_ramp(palette.yellow, background, foreground),
        green=_accent_ramp(palette.green, background, foreground),
        cyan=_accent_ramp(palette.cyan, background, foreground),
        blue=_accent_ramp(palette.blue, background, foreground),
        violet=_accent_ramp(palette.violet, background, foreground),
        magenta=_accent_ramp(palette.magenta, background, foreground),
    )
    return ColorScheme(name=palette.name, ramps=ramps, is_light=palette.is_light, syntax=syntax)
