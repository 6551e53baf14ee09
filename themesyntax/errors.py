"""Exceptions raised while resolving syntax styles."""


class ThemeSyntaxError(Exception):
    """Base class for syntax table errors."""


class UnknownSyntaxKeyError(ThemeSyntaxError, KeyError):
    """Raised when an override names a category or style field that does not exist."""

    def __init__(self, category: str, field: str | None = None) -> None:
        self.category = category
        self.field = field
        if field is None:
            message = f"Unknown syntax category: {category!r}"
        else:
            message = f"Unknown style field {field!r} in syntax category {category!r}"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class InvalidSyntaxOverrideError(ThemeSyntaxError, TypeError):
    """Raised when an override entry for a category is not a mapping of style fields."""

    def __init__(self, category: str, value: object) -> None:
        self.category = category
        self.value = value
        super().__init__(f"Syntax override for {category!r} must be a mapping, got {type(value).__name__}")
