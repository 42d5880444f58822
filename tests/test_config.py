from pathlib import Path

import pytest

from writing_editor.config import (
    EditorConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)


def test_load_config_defaults():
    """Without a path the defaults are returned."""
    config = load_config()
    assert config == EditorConfig()
    assert config.output_dir == "./edits"
    assert config.save_reports is True
    assert config.long_sentence_words == 25


def test_config_from_dict_ignores_unknown_keys():
    """Unrecognized keys are dropped rather than rejected."""
    config = config_from_dict({"save_reports": False, "window_size": 10})
    assert config.save_reports is False
    assert config_from_dict(None) == EditorConfig()


def test_config_from_yaml(tmp_path: Path):
    """YAML mappings populate the matching fields."""
    path = tmp_path / "editor.yaml"
    path.write_text("output_dir: reports\nlong_sentence_words: 30\n", encoding="utf-8")
    config = config_from_yaml(path)
    assert config.output_dir == "reports"
    assert config.long_sentence_words == 30
    assert config.to_dict()["save_reports"] is True


def test_config_from_yaml_requires_mapping(tmp_path: Path):
    """A YAML list is not a valid configuration."""
    path = tmp_path / "editor.yaml"
    path.write_text("- one\n- two\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        config_from_yaml(path)
