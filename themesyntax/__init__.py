"""Syntax highlighting style tables for editor themes."""

from themesyntax.color_scheme import ColorRamp, ColorRamps, ColorScheme
from themesyntax.errors import InvalidSyntaxOverrideError, ThemeSyntaxError, UnknownSyntaxKeyError
from themesyntax.palettes import BASE_PALETTES, BasePalette, color_scheme_from_palette, get_palette
from themesyntax.ramps import LinearColorRamp
from themesyntax.settings import ResolverSettings, UnknownKeyPolicy, load_resolver_settings
from themesyntax.styles import (
    DEFAULT_SYNTAX_HIGHLIGHT_STYLE,
    SYNTAX_CATEGORIES,
    FontWeight,
    Syntax,
    SyntaxHighlightStyle,
    ThemeSyntax,
    is_style_override,
    theme_syntax_from_mapping,
)
from themesyntax.syntax import build_default_syntax, build_syntax, merge_style, merge_syntax, unassigned_categories

__all__ = [
    "BASE_PALETTES",
    "DEFAULT_SYNTAX_HIGHLIGHT_STYLE",
    "SYNTAX_CATEGORIES",
    "BasePalette",
    "ColorRamp",
    "ColorRamps",
    "ColorScheme",
    "FontWeight",
    "InvalidSyntaxOverrideError",
    "LinearColorRamp",
    "ResolverSettings",
    "Syntax",
    "SyntaxHighlightStyle",
    "ThemeSyntax",
    "ThemeSyntaxError",
    "UnknownKeyPolicy",
    "UnknownSyntaxKeyError",
    "build_default_syntax",
    "build_syntax",
    "color_scheme_from_palette",
    "get_palette",
    "is_style_override",
    "load_resolver_settings",
    "merge_style",
    "merge_syntax",
    "theme_syntax_from_mapping",
    "unassigned_categories",
]
