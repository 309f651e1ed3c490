"""Theme and document file handling for Slide Theme."""

from .schema import (
    RuleConfig,
    ThemeConfig,
)
from .loader import (
    load_theme_config,
    parse_theme_config,
    save_theme_config,
    theme_from_config,
    config_from_theme,
    load_theme,
    load_document,
    save_document,
)

__all__ = [
    'RuleConfig',
    'ThemeConfig',
    'load_theme_config',
    'parse_theme_config',
    'save_theme_config',
    'theme_from_config',
    'config_from_theme',
    'load_theme',
    'load_document',
    'save_document',
]
