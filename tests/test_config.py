"""Tests for theme file loading and schema."""

import pytest
from pathlib import Path
import tempfile
import json
import yaml

from slide_theme import Document, Element, apply_theme, match
from slide_theme.config import (
    RuleConfig,
    ThemeConfig,
    config_from_theme,
    load_document,
    load_theme,
    load_theme_config,
    parse_theme_config,
    save_document,
    save_theme_config,
    theme_from_config,
)
from slide_theme.exceptions import ThemeConfigError
from slide_theme.registry import BUILTIN_THEMES_DIR, ThemeRegistry, default_registry


def test_rule_config_single_match_string():
    """Test that a bare string match becomes a one-element list."""
    rule = RuleConfig(match="TitleSlide", set={"align": "center"})
    assert rule.match == ["TitleSlide"]
    assert rule.set_properties == {"align": "center"}


def test_rule_config_stringifies_values():
    """Test that numeric property values become strings."""
    rule = RuleConfig(match=["Slide", "HeadLine"], set={"font-size": 24})
    assert rule.set_properties == {"font-size": "24"}


def test_rule_config_needs_one_action():
    """Test that a rule must either set or delete, not both or neither."""
    with pytest.raises(ValueError):
        RuleConfig(match=["Slide"])
    with pytest.raises(ValueError):
        RuleConfig(match=["Slide"], set={"align": "left"}, delete=True)


def test_theme_config_include_string():
    """Test that a single include name becomes a list."""
    config = ThemeConfig(name="t", include="default")
    assert config.include == ["default"]


def test_parse_theme_config_invalid():
    """Test that bad theme data raises ThemeConfigError."""
    with pytest.raises(ThemeConfigError):
        parse_theme_config({"name": "bad", "rules": [{"match": "Slide"}]})
    with pytest.raises(ThemeConfigError):
        parse_theme_config(["not", "a", "mapping"])


def test_theme_from_config_unknown_type():
    """Test that a typo in an element type fails at load time."""
    config = parse_theme_config({
        "name": "typo",
        "rules": [{"match": ["Slide", "HeadLines"], "set": {"align": "center"}}],
    })
    with pytest.raises(ThemeConfigError):
        theme_from_config(config)


def test_load_theme_yaml():
    """Test loading a theme from YAML file."""
    theme_data = {
        "name": "Test Theme",
        "include": ["default"],
        "rules": [
            {"match": ["Slide", "HeadLine"], "set": {"color": "navy"}},
            {"match": ["Slide", "Image"], "delete": True},
        ],
    }

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(theme_data, f)
        temp_path = f.name

    try:
        theme = load_theme(temp_path)
        assert theme.name == "Test Theme"
        assert theme.includes == ["default"]
        assert theme.rules[0].properties == {"color": "navy"}
        assert theme.rules[1].action == "delete"
    finally:
        Path(temp_path).unlink()


def test_load_theme_name_defaults_to_stem(tmp_path):
    """Test that a theme file without a name is named after the file."""
    path = tmp_path / "quiet.json"
    path.write_text(json.dumps({"rules": [{"match": "Slide", "set": {"color": "gray"}}]}))
    assert load_theme_config(path).name == "quiet"


def test_load_theme_missing_file():
    """Test that a missing theme file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_theme_config("/nonexistent/theme.yaml")


def test_load_theme_unsupported_suffix(tmp_path):
    """Test that only YAML and JSON theme files are accepted."""
    path = tmp_path / "theme.toml"
    path.write_text("name = 'x'")
    with pytest.raises(ValueError):
        load_theme_config(path)


def test_save_and_load_theme_config():
    """Test round-trip save and load of the built-in slide-center theme."""
    config = config_from_theme(default_registry().get("slide-center"))

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        temp_path = f.name

    try:
        save_theme_config(config, temp_path)
        with open(temp_path, encoding='utf-8') as f:
            raw = yaml.safe_load(f)
        assert raw["rules"][2] == {"match": ["Slide", "HorizontalRule"], "delete": True}
        loaded = load_theme_config(temp_path)
        assert loaded.name == config.name
        assert loaded.rules == config.rules
    finally:
        Path(temp_path).unlink()


def test_builtin_theme_files_parse():
    """Test that every built-in theme file loads under its file name."""
    for path in BUILTIN_THEMES_DIR.glob("*.yaml"):
        theme = load_theme(path)
        assert theme.name == path.stem


def test_registry_load_directory(tmp_path):
    """Test that a user theme can build on a built-in one."""
    (tmp_path / "loud.yaml").write_text(yaml.dump({
        "name": "loud",
        "include": "slide-center",
        "rules": [{"match": ["Slide", "HeadLine"], "set": {"font-size": "xx-large"}}],
    }))
    (tmp_path / "notes.txt").write_text("ignored")
    registry = default_registry()
    loaded = registry.load_directory(tmp_path)
    assert [t.name for t in loaded] == ["loud"]

    deck = Document(slides=[Element.of("Slide", Element.of("HeadLine"))])
    apply_theme(deck, "loud", registry)
    assert match(deck, "Slide", "HeadLine")[0].properties == {
        "vertical-align": "middle", "align": "center", "font-size": "xx-large"
    }


def test_registry_missing_directory():
    """Test that loading a missing theme directory fails."""
    with pytest.raises(FileNotFoundError):
        ThemeRegistry().load_directory("/nonexistent/themes")


def test_save_and_load_document(tmp_path):
    """Test round-trip save and load of full and rendered documents."""
    deck = Document(slides=[
        Element.of("Slide", Element.of("HeadLine", text="Hi"), Element.of("HorizontalRule")),
    ])
    apply_theme(deck, "slide-center")

    full = tmp_path / "full.json"
    save_document(deck, full, rendered=False)
    assert load_document(full).to_dict() == deck.to_dict()

    rendered = tmp_path / "rendered.yaml"
    save_document(deck, rendered)
    assert len(load_document(rendered).slides[0].children) == 1


def test_load_document_invalid(tmp_path):
    """Test that a document with an unknown element type fails to load."""
    path = tmp_path / "deck.yaml"
    path.write_text(yaml.dump({"slides": [{"type": "Footer"}]}))
    with pytest.raises(ThemeConfigError):
        load_document(path)


def test_load_document_numeric_text(tmp_path):
    """Test that a headline like `text: 2024` loads from YAML."""
    path = tmp_path / "deck.yaml"
    path.write_text("slides:\n  - type: Slide\n    children:\n      - type: HeadLine\n        text: 2024\n")
    assert load_document(path).slides[0].children[0].text == "2024"


def test_rule_config_null_value_rejected():
    """Test that `align: ~` in a theme file is an error, not the string 'None'."""
    with pytest.raises(ThemeConfigError):
        parse_theme_config({"name": "t", "rules": [{"match": "Slide", "set": {"align": None}}]})
