"""
Slide Theme

Declarative styling rules for slide documents: match elements by type,
set their properties or delete them, and layer themes on top of each other.
"""

__version__ = "0.1.0"

from .elements import (
    Document,
    Element,
    ElementType,
)

from .matcher import (
    ElementContainer,
    match,
)

from .theme import (
    Rule,
    Theme,
    ThemeContext,
    apply_theme,
)

from .registry import (
    ThemeRegistry,
    default_registry,
)

from .config import (
    ThemeConfig,
    load_theme,
    load_document,
    save_document,
)

from .exceptions import (
    ThemeError,
    UnknownElementTypeError,
    ThemeNotFoundError,
    ThemeCycleError,
    ThemeConfigError,
)

__all__ = [
    # Elements
    'Document',
    'Element',
    'ElementType',
    # Matching
    'ElementContainer',
    'match',
    # Themes
    'Rule',
    'Theme',
    'ThemeContext',
    'apply_theme',
    'ThemeRegistry',
    'default_registry',
    # Files
    'ThemeConfig',
    'load_theme',
    'load_document',
    'save_document',
    # Errors
    'ThemeError',
    'UnknownElementTypeError',
    'ThemeNotFoundError',
    'ThemeCycleError',
    'ThemeConfigError',
]
