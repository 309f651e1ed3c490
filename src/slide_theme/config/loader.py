"""
Theme and Document Loader for Slide Theme

Loads theme definitions and slide documents from YAML or JSON files.
"""

import json
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from ..elements import Document
from ..exceptions import ThemeConfigError
from ..theme import Rule, Theme
from .schema import RuleConfig, ThemeConfig


YAML_SUFFIXES = ['.yaml', '.yml']
SUPPORTED_SUFFIXES = YAML_SUFFIXES + ['.json']


def _read_data(path: Union[str, Path]) -> Any:
    """Read a YAML or JSON file into plain data.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the suffix is not .yaml, .yml, or .json
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    suffix = path.suffix.lower()

    with open(path, 'r', encoding='utf-8') as f:
        if suffix in YAML_SUFFIXES:
            return yaml.safe_load(f)
        elif suffix == '.json':
            return json.load(f)
        else:
            raise ValueError(f"Unsupported file format: {suffix}. Use .yaml, .yml, or .json")


def _write_data(data: Any, path: Union[str, Path]) -> None:
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported file format: {suffix}")

    with open(path, 'w', encoding='utf-8') as f:
        if suffix in YAML_SUFFIXES:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
        else:
            json.dump(data, f, indent=2)


def load_theme_config(config_path: Union[str, Path]) -> ThemeConfig:
    """Load a theme definition from YAML or JSON file.

    Args:
        config_path: Path to theme file (.yaml, .yml, or .json)

    Returns:
        ThemeConfig instance

    Raises:
        FileNotFoundError: If theme file doesn't exist
        ValueError: If format is unsupported or contents invalid
    """
    data = _read_data(config_path)
    if data is None:
        data = {}
    if isinstance(data, dict) and 'name' not in data:
        # A file without a name is known by its stem
        data['name'] = Path(config_path).stem
    return parse_theme_config(data)


def parse_theme_config(data: dict) -> ThemeConfig:
    """Parse raw theme data into a ThemeConfig model.

    Args:
        data: Raw theme dictionary

    Returns:
        ThemeConfig instance

    Raises:
        ThemeConfigError: If the data does not describe a valid theme
    """
    if not isinstance(data, dict):
        raise ThemeConfigError(f"Theme must be a mapping, got {type(data).__name__}")
    try:
        return ThemeConfig(**data)
    except ValidationError as e:
        raise ThemeConfigError(f"Invalid theme {data.get('name')!r}", cause=e)


def theme_from_config(config: ThemeConfig) -> Theme:
    """Turn a parsed theme file into an applicable Theme.

    Element type names are checked here, so a typo fails the load rather
    than the first application.
    """
    rules = []
    for index, entry in enumerate(config.rules):
        try:
            rules.append(_rule_from_config(entry))
        except ValidationError as e:
            raise ThemeConfigError(
                f"Invalid rule in theme {config.name!r}",
                cause=e,
                context={'rule': index, 'match': entry.match}
            )
    return Theme(
        name=config.name,
        description=config.description,
        includes=list(config.include),
        rules=rules,
    )


def _rule_from_config(entry: RuleConfig) -> Rule:
    if entry.delete:
        return Rule(tags=entry.match, action="delete")
    return Rule(tags=entry.match, action="set", properties=entry.set_properties)


def config_from_theme(theme: Theme) -> ThemeConfig:
    """Inverse of theme_from_config, for saving. Procedural rules are lost."""
    entries = []
    for rule in theme.rules:
        tags = [t.value for t in rule.tags]
        if rule.action == "delete":
            entries.append(RuleConfig(match=tags, delete=True))
        else:
            entries.append(RuleConfig(match=tags, set_properties=dict(rule.properties)))
    return ThemeConfig(
        name=theme.name,
        description=theme.description,
        include=list(theme.includes),
        rules=entries,
    )


def load_theme(config_path: Union[str, Path]) -> Theme:
    """Load a theme file straight into a Theme."""
    return theme_from_config(load_theme_config(config_path))


def save_theme_config(config: ThemeConfig, output_path: Union[str, Path]) -> None:
    """Save a theme definition to YAML or JSON file.

    Args:
        config: ThemeConfig instance to save
        output_path: Path for output file
    """
    data = config.model_dump(by_alias=True, exclude_none=True)
    for rule in data['rules']:
        # Keep each entry to the one action it carries
        if rule['delete']:
            rule.pop('set')
        else:
            rule.pop('delete')
    _write_data(data, output_path)


def load_document(document_path: Union[str, Path]) -> Document:
    """Load a slide document tree from YAML or JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If format is unsupported or the tree is invalid
    """
    data = _read_data(document_path)
    if not isinstance(data, dict):
        raise ThemeConfigError(f"Document must be a mapping: {document_path}")
    try:
        return Document.from_dict(data)
    except ValidationError as e:
        raise ThemeConfigError(f"Invalid document: {document_path}", cause=e)


def save_document(document: Document, output_path: Union[str, Path], rendered: bool = True) -> None:
    """Save a document to YAML or JSON file.

    Args:
        document: Document to save
        output_path: Path for output file
        rendered: Write the render tree (deleted elements pruned) rather
            than the full tree
    """
    data = document.render_tree() if rendered else document.to_dict()
    _write_data(data, output_path)
