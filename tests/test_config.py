import pytest

from langkeys.config import DEFAULT_CONFIG, load_config
from langkeys.errors import ConfigError


def test_missing_config_uses_defaults(tmp_path):
    assert load_config(str(tmp_path)) == DEFAULT_CONFIG


def test_partial_config_is_merged(tmp_path):
    (tmp_path / "config.yml").write_text("logging:\n  level: DEBUG\nvalidation:\n  strict: true\n", "utf-8")
    config = load_config(str(tmp_path))
    assert config["logging"]["level"] == "DEBUG"
    assert config["logging"]["datefmt"] == DEFAULT_CONFIG["logging"]["datefmt"]
    assert config["validation"] == {"workers": 4, "strict": True}
    assert DEFAULT_CONFIG["validation"]["strict"] is False


def test_invalid_yaml(tmp_path):
    (tmp_path / "config.yml").write_text("logging: [unclosed", "utf-8")
    with pytest.raises(ConfigError):
        load_config(str(tmp_path))


def test_non_mapping_config(tmp_path):
    (tmp_path / "config.yml").write_text("- a\n- b\n", "utf-8")
    with pytest.raises(ConfigError):
        load_config(str(tmp_path))
