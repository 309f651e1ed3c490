"""
Exception hierarchy for slide themes.

Errors raised while loading or applying a theme. All of them are fatal
to the theme being loaded; the document is left as far as it got.
"""

from typing import Optional, Dict, Any


class ThemeError(Exception):
    """Base exception for all theme errors"""

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.cause = cause
        self.context = context or {}

    def __str__(self):
        parts = [super().__str__()]
        if self.cause:
            parts.append(f" (caused by: {type(self.cause).__name__}: {str(self.cause)})")
        if self.context:
            parts.append(f" Context: {self.context}")
        return "".join(parts)


class UnknownElementTypeError(ThemeError, ValueError):
    """A match rule named an element type that is not in the registry"""
    pass


class ThemeNotFoundError(ThemeError, LookupError):
    """include_theme() or apply_theme() named a theme nobody registered"""
    pass


class ThemeCycleError(ThemeError):
    """A theme includes itself, directly or through other themes"""
    pass


class ThemeConfigError(ThemeError, ValueError):
    """A theme or document file could not be turned into models"""
    pass
