"""
Theme Registry

Maps theme names to themes so include_theme("default") can find them.
Built-in themes ship as YAML files in the package's themes/ directory.
"""

import logging
from pathlib import Path
from typing import Dict, List, Union

from .config.loader import SUPPORTED_SUFFIXES, load_theme
from .exceptions import ThemeNotFoundError
from .theme import Theme

logger = logging.getLogger(__name__)

BUILTIN_THEMES_DIR = Path(__file__).parent / "themes"


class ThemeRegistry:
    """Named themes available to include_theme()."""

    def __init__(self):
        self._themes: Dict[str, Theme] = {}

    def register(self, theme: Theme) -> Theme:
        """Add a theme. A later registration under the same name replaces it."""
        if theme.name in self._themes:
            logger.debug("Replacing registered theme %r", theme.name)
        self._themes[theme.name] = theme
        return theme

    def get(self, name: str) -> Theme:
        try:
            return self._themes[name]
        except KeyError:
            raise ThemeNotFoundError(
                f"Theme not found: {name!r}",
                context={'available': self.names()}
            ) from None

    def names(self) -> List[str]:
        return sorted(self._themes)

    def __contains__(self, name: str) -> bool:
        return name in self._themes

    def load_path(self, path: Union[str, Path]) -> Theme:
        """Load a theme file and register it under its name."""
        theme = load_theme(path)
        logger.debug("Loaded theme %r from %s", theme.name, path)
        return self.register(theme)

    def load_directory(self, directory: Union[str, Path]) -> List[Theme]:
        """Register every theme file in a directory, in name order."""
        directory = Path(directory)
        if not directory.is_dir():
            raise FileNotFoundError(f"Theme directory not found: {directory}")
        return [
            self.load_path(path)
            for path in sorted(directory.iterdir())
            if path.suffix.lower() in SUPPORTED_SUFFIXES
        ]


def default_registry() -> ThemeRegistry:
    """A fresh registry holding the built-in themes."""
    registry = ThemeRegistry()
    registry.load_directory(BUILTIN_THEMES_DIR)
    return registry
