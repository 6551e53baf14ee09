"""Configuration for syntax table resolution."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from themesyntax.logger import get_logger

logger = get_logger(__name__)

UNKNOWN_KEYS_ENV_VAR = "THEMESYNTAX_UNKNOWN_KEYS"

# Neutral ramp sample points for the default table
DEFAULT_COMMENT_POSITION = 0.71
DEFAULT_PRIMARY_POSITION = 1.0
DEFAULT_PREDICTIVE_POSITION = 0.57


class UnknownKeyPolicy(str, Enum):
    """How overrides naming unknown categories or fields are handled."""

    IGNORE = "ignore"
    REJECT = "reject"


@dataclass(frozen=True)
class ResolverSettings:
    """Settings used by the default resolver and the override merger."""

    comment_position: float = DEFAULT_COMMENT_POSITION
    primary_position: float = DEFAULT_PRIMARY_POSITION
    predictive_position: float = DEFAULT_PREDICTIVE_POSITION
    unknown_keys: UnknownKeyPolicy = UnknownKeyPolicy.IGNORE

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> ResolverSettings:
        """Create settings from a mapping, applying defaults for invalid values.

        Args:
            data: Mapping containing raw settings values.

        Returns:
            A ResolverSettings instance with validated values.
        """
        return cls(
            comment_position=_coerce_position(data.get("comment_position"), DEFAULT_COMMENT_POSITION),
            primary_position=_coerce_position(data.get("primary_position"), DEFAULT_PRIMARY_POSITION),
            predictive_position=_coerce_position(data.get("predictive_position"), DEFAULT_PREDICTIVE_POSITION),
            unknown_keys=_coerce_policy(data.get("unknown_keys")) or UnknownKeyPolicy.IGNORE,
        )

    def to_dict(self) -> dict[str, object]:
        """Serialize settings to a dictionary.

        Returns:
            Dictionary representation of settings.
        """
        return {
            "comment_position": self.comment_position,
            "primary_position": self.primary_position,
            "predictive_position": self.predictive_position,
            "unknown_keys": self.unknown_keys.value,
        }


def load_resolver_settings() -> ResolverSettings:
    """Load settings, applying environment overrides on top of the defaults.

    Returns:
        Resolver settings.
    """
    raw = os.environ.get(UNKNOWN_KEYS_ENV_VAR)
    if raw is None:
        return ResolverSettings()

    policy = _coerce_policy(raw)
    if policy is None:
        logger.warning(f"Ignoring invalid {UNKNOWN_KEYS_ENV_VAR} value: {raw!r}")
        return ResolverSettings()
    return ResolverSettings(unknown_keys=policy)


def _coerce_position(value: object, fallback: float) -> float:
    """Coerce a value into a ramp position in [0, 1].

    Args:
        value: Raw value to coerce.
        fallback: Value used when ``value`` is missing or invalid.

    Returns:
        Ramp position.
    """
    if isinstance(value, bool):
        return fallback
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return fallback
    if isinstance(value, int | float) and 0.0 <= value <= 1.0:
        return float(value)
    return fallback


def _coerce_policy(value: object) -> UnknownKeyPolicy | None:
    """Coerce a value into an UnknownKeyPolicy if possible.

    Args:
        value: Raw value to coerce.

    Returns:
        Policy or None.
    """
    if isinstance(value, UnknownKeyPolicy):
        return value
    if isinstance(value, str):
        try:
            return UnknownKeyPolicy(value.strip().lower())
        except ValueError:
            return None
    return None
