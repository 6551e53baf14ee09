"""Syntax categories and highlight style types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from themesyntax.logger import get_logger

logger = get_logger(__name__)


class FontWeight(str, Enum):
    """Named font weights understood by the renderer."""

    THIN = "thin"
    EXTRA_LIGHT = "extra_light"
    LIGHT = "light"
    NORMAL = "normal"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    EXTRA_BOLD = "extra_bold"
    BLACK = "black"


SYNTAX_CATEGORIES: tuple[str, ...] = (
    # Text
    "comment",
    "comment.doc",
    "primary",
    "predictive",
    # Formatted text
    "emphasis",
    "emphasis.strong",
    "title",
    "link_uri",
    "link_text",
    "text.literal",
    # Punctuation
    "punctuation",
    "punctuation.bracket",
    "punctuation.delimiter",
    "punctuation.special",
    "punctuation.list_marker",
    # Strings
    "string",
    "string.special",
    "string.special.symbol",
    "string.escape",
    "string.regex",
    # Code
    "constructor",
    "variant",
    "type",
    "variable",
    "variable.special",
    "label",
    "attribute",
    "property",
    "constant",
    "function",
    "enum",
    "operator",
    "number",
    "boolean",
    "keyword",
    "preproc",
    "embedded",
    "hint",
)

STYLE_FIELDS: tuple[str, ...] = ("color", "weight", "underline", "italic")


@dataclass(frozen=True)
class SyntaxHighlightStyle:
    """Rendering of one syntax category.

    A ``color`` of None marks a category the default table does not color yet.
    """

    color: str | None = None
    weight: FontWeight = FontWeight.NORMAL
    underline: bool = False
    italic: bool = False

    @property
    def is_assigned(self) -> bool:
        """Whether the style carries a color."""
        return self.color is not None

    def to_dict(self) -> dict[str, object]:
        """Serialize the style to a dictionary.

        Returns:
            Dictionary with the weight as its string value.
        """
        return {
            "color": self.color,
            "weight": self.weight.value,
            "underline": self.underline,
            "italic": self.italic,
        }


# Baseline shared by every category before colors are sampled
DEFAULT_SYNTAX_HIGHLIGHT_STYLE = SyntaxHighlightStyle()

Syntax = Mapping[str, SyntaxHighlightStyle]
ThemeSyntax = Mapping[str, Mapping[str, object]]


def is_style_override(category: object, style: object) -> bool:
    """Check if an override entry has a category name and a mapping of style fields.

    Args:
        category: Entry key.
        style: Entry value.

    Returns:
        True if the entry can be merged onto a style.
    """
    return isinstance(category, str) and isinstance(style, Mapping)


def theme_syntax_from_mapping(data: Mapping[str, object]) -> dict[str, dict[str, object]]:
    """Coerce raw override data into a ThemeSyntax.

    Use this on raw theme data before attaching it to a ColorScheme. Entries
    that are not mappings are skipped. The result is a deep copy of the
    accepted entries, so later changes to ``data`` do not affect it.

    Args:
        data: Raw mapping, typically decoded from a theme file.

    Returns:
        Partial styles keyed by category.
    """
    parsed: dict[str, dict[str, object]] = {}
    for category, style in data.items():
        if not is_style_override(category, style):
            logger.warning(f"Ignoring invalid syntax override entry {category!r}")
            continue
        parsed[category] = {
            field: list(value) if isinstance(value, list | tuple) else value for field, value in style.items()
        }
    return parsed
