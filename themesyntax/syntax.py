"""Syntax table resolution.

The table is built in two stages: ``build_default_syntax`` gives every known
category a baseline style and samples a few colors from the neutral ramp, then
``merge_syntax`` lays the scheme's partial overrides on top field by field.
``build_syntax`` runs both and is the entry point callers should use.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, replace
from types import MappingProxyType

from themesyntax.color_scheme import ColorScheme
from themesyntax.errors import InvalidSyntaxOverrideError, UnknownSyntaxKeyError
from themesyntax.logger import get_logger
from themesyntax.settings import ResolverSettings, UnknownKeyPolicy, load_resolver_settings
from themesyntax.styles import (
    DEFAULT_SYNTAX_HIGHLIGHT_STYLE,
    STYLE_FIELDS,
    SYNTAX_CATEGORIES,
    FontWeight,
    Syntax,
    SyntaxHighlightStyle,
    is_style_override,
)

logger = get_logger(__name__)


def build_default_syntax(color_scheme: ColorScheme, settings: ResolverSettings | None = None) -> Syntax:
    """Build the default style table for a color scheme.

    Only ``comment``, ``comment.doc``, ``primary`` and ``predictive`` get a
    color. Every other category keeps the baseline style with an unassigned
    color until an override provides one.

    Args:
        color_scheme: Scheme whose neutral ramp is sampled.
        settings: Resolver settings; loaded from the environment when omitted.

    Returns:
        Read-only mapping with exactly one style per known category.
    """
    if settings is None:
        settings = load_resolver_settings()

    syntax = {category: replace(DEFAULT_SYNTAX_HIGHLIGHT_STYLE) for category in SYNTAX_CATEGORIES}

    neutral = color_scheme.ramps.neutral
    comment = neutral(settings.comment_position)
    colors = {
        "comment": comment,
        "comment.doc": comment,
        "primary": neutral(settings.primary_position),
        "predictive": neutral(settings.predictive_position),
    }
    for category, color in colors.items():
        syntax[category] = replace(syntax[category], color=color)

    unassigned = unassigned_categories(syntax)
    if unassigned:
        logger.debug(f"{len(unassigned)} syntax categories have no default color in scheme {color_scheme.name!r}")
    return MappingProxyType(syntax)


def merge_style(base: Mapping[str, object], override: Mapping[str, object]) -> dict[str, object]:
    """Merge one partial style onto another, field by field.

    Fields set in ``override`` replace those in ``base``; fields that are
    missing or None keep the base value. When both values are sequences the
    override is appended to the base instead of replacing it.

    Args:
        base: Complete or partial style fields.
        override: Partial style fields that take precedence.

    Returns:
        A new dictionary; neither input is modified.
    """
    merged = dict(base)
    for field, value in override.items():
        if value is None:
            continue
        current = merged.get(field)
        if isinstance(current, list | tuple) and isinstance(value, list | tuple):
            merged[field] = current + type(current)(value)
        elif isinstance(value, list):
            merged[field] = list(value)
        else:
            merged[field] = value
    return merged


def merge_syntax(
    default_syntax: Syntax, color_scheme: ColorScheme, settings: ResolverSettings | None = None
) -> Syntax:
    """Apply the scheme's syntax overrides to a default table.

    Args:
        default_syntax: Table produced by build_default_syntax.
        color_scheme: Scheme carrying the optional overrides.
        settings: Resolver settings; loaded from the environment when omitted.

    Returns:
        ``default_syntax`` itself when the scheme has no overrides, otherwise a
        new read-only table with the same categories.

    Raises:
        UnknownSyntaxKeyError: If an override names an unknown category or
            field and the policy is ``reject``.
        InvalidSyntaxOverrideError: If a category override is not a mapping and
            the policy is ``reject``.
        ValueError: If an override sets an unknown font weight.
    """
    if color_scheme.syntax is None:
        return default_syntax

    if settings is None:
        settings = load_resolver_settings()

    merged = dict(default_syntax)
    for category, override in color_scheme.syntax.items():
        if category not in default_syntax:
            _handle_unknown_key(settings, category)
            continue
        if override is None:
            continue
        if not is_style_override(category, override):
            _handle_invalid_override(settings, category, override)
            continue

        fields: dict[str, object] = {}
        for field, value in override.items():
            if field not in STYLE_FIELDS:
                _handle_unknown_key(settings, category, field)
                continue
            fields[field] = value

        merged[category] = _merge_category(default_syntax[category], fields)

    return MappingProxyType(merged)


def build_syntax(color_scheme: ColorScheme, settings: ResolverSettings | None = None) -> Syntax:
    """Build the final syntax table for a color scheme.

    Args:
        color_scheme: Scheme to resolve.
        settings: Resolver settings; loaded from the environment when omitted.

    Returns:
        Default styles with the scheme's overrides applied.
    """
    if settings is None:
        settings = load_resolver_settings()
    logger.debug(f"Building syntax table for scheme {color_scheme.name!r}")
    return merge_syntax(build_default_syntax(color_scheme, settings), color_scheme, settings)


def unassigned_categories(syntax: Syntax) -> tuple[str, ...]:
    """List categories whose style has no color.

    Args:
        syntax: Syntax table to inspect.

    Returns:
        Category names in table order.
    """
    return tuple(category for category, style in syntax.items() if not style.is_assigned)


def _merge_category(style: SyntaxHighlightStyle, fields: Mapping[str, object]) -> SyntaxHighlightStyle:
    """Merge override fields into a single category style.

    Args:
        style: Default style of the category.
        fields: Known style fields from the override.

    Returns:
        The merged style, or ``style`` itself when nothing changes.
    """
    if not fields:
        return style
    values = merge_style(asdict(style), fields)
    values["weight"] = FontWeight(values["weight"])
    return SyntaxHighlightStyle(**values)


def _handle_unknown_key(settings: ResolverSettings, category: str, field: str | None = None) -> None:
    """Reject or skip an unknown override key according to the policy.

    Args:
        settings: Resolver settings holding the policy.
        category: Category named by the override.
        field: Style field named by the override, if the category is known.

    Raises:
        UnknownSyntaxKeyError: If the policy is ``reject``.
    """
    if settings.unknown_keys is UnknownKeyPolicy.REJECT:
        raise UnknownSyntaxKeyError(category, field)
    if field is None:
        logger.warning(f"Ignoring override for unknown syntax category {category!r}")
    else:
        logger.warning(f"Ignoring unknown style field {field!r} in syntax category {category!r}")


def _handle_invalid_override(settings: ResolverSettings, category: str, override: object) -> None:
    """Reject or skip a category override that is not a mapping.

    Args:
        settings: Resolver settings holding the policy.
        category: Category named by the override.
        override: The offending override value.

    Raises:
        InvalidSyntaxOverrideError: If the policy is ``reject``.
    """
    if settings.unknown_keys is UnknownKeyPolicy.REJECT:
        raise InvalidSyntaxOverrideError(category, override)
    logger.warning(f"Ignoring invalid override for syntax category {category!r}: {override!r}")
