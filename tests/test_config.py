"""Tests for YAML configuration loading."""

import pytest
from pydantic import ValidationError

from core.config import CONFIG_PATH, AppConfig, load_config


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "nope.yaml")
    assert config == AppConfig()
    assert config.data.n_rows == 150
    assert config.data.train_fraction == 0.7
    assert config.data.seed == 123
    assert config.model.decision_threshold == 0.5


def test_partial_override(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("data:\n  seed: 7\nui:\n  title: Demo\n", encoding="utf-8")
    config = load_config(path)
    assert config.data.seed == 7
    assert config.data.n_rows == 150
    assert config.ui.title == "Demo"


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == AppConfig()


def test_invalid_fraction_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("data:\n  train_fraction: 1.2\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_config(path)


def test_shipped_config_matches_defaults():
    assert CONFIG_PATH.exists()
    assert load_config() == AppConfig()
