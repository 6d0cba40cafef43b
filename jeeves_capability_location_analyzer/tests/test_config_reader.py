"""Tests for the read-only configuration view."""

import pytest

from jeeves_capability_location_analyzer.config.reader import (
    CONFIG_PATH_ENV,
    ConfigError,
    ConfigReader,
    load_config,
)

CONFIG_YAML = """
catalog:
  processors:
    locationAnalyzer:
      enabled: false
      allowedLocationTargets:
        - https://github.com/acme/**
      analysisTimeoutSeconds: 5
integrations:
  github:
    - host: github.com
      token: secret
"""


@pytest.fixture
def config():
    return ConfigReader(
        {
            "catalog": {
                "processors": {
                    "locationAnalyzer": {
                        "enabled": True,
                        "allowedLocationTargets": ["https://a/*", "https://b/*"],
                        "analysisTimeoutSeconds": 2,
                    }
                }
            },
            "integrations": {"github": [{"host": "github.com"}, {"host": "ghe.acme.io"}]},
        }
    )


def test_get_optional_missing_returns_none(config):
    assert config.get_optional("catalog.processors.nope") is None
    assert config.get_optional_bool("catalog.processors.nope.enabled") is None
    assert config.get_optional_string_array("does.not.exist") is None
    assert config.has("does.not.exist") is False


def test_get_optional_bool(config):
    assert config.get_optional_bool("catalog.processors.locationAnalyzer.enabled") is True


def test_get_optional_bool_accepts_strings():
    reader = ConfigReader({"a": "TRUE", "b": " false "})
    assert reader.get_optional_bool("a") is True
    assert reader.get_optional_bool("b") is False


def test_get_optional_bool_rejects_other_types():
    reader = ConfigReader({"flag": "yes"})
    with pytest.raises(ConfigError) as exc_info:
        reader.get_optional_bool("flag")
    assert exc_info.value.key == "flag"
    assert "boolean" in str(exc_info.value)


def test_get_optional_string_array(config):
    patterns = config.get_optional_string_array(
        "catalog.processors.locationAnalyzer.allowedLocationTargets"
    )
    assert patterns == ["https://a/*", "https://b/*"]


def test_get_optional_string_array_rejects_mixed():
    reader = ConfigReader({"list": ["a", 1]})
    with pytest.raises(ConfigError):
        reader.get_optional_string_array("list")


def test_get_optional_number(config):
    assert config.get_optional_number("catalog.processors.locationAnalyzer.analysisTimeoutSeconds") == 2.0
    with pytest.raises(ConfigError):
        ConfigReader({"n": True}).get_optional_number("n")


def test_sub_config_keeps_prefix_in_errors(config):
    sub = config.get_optional_config("catalog.processors")
    assert sub.get_optional_bool("locationAnalyzer.enabled") is True

    bad = ConfigReader({"outer": {"flag": 3}}).get_optional_config("outer")
    with pytest.raises(ConfigError) as exc_info:
        bad.get_optional_bool("flag")
    assert exc_info.value.key == "outer.flag"


def test_get_config_array(config):
    entries = config.get_config_array("integrations.github")
    assert [e.get_optional("host") for e in entries] == ["github.com", "ghe.acme.io"]
    assert config.get_config_array("integrations.gitlab") == []


def test_view_is_read_only():
    source = {"a": {"b": [1, 2]}}
    reader = ConfigReader(source)

    source["a"]["b"].append(3)

    assert reader.get_optional("a.b") == (1, 2)
    with pytest.raises(TypeError):
        reader.get_optional("a")["c"] = 1


def test_from_yaml(tmp_path):
    path = tmp_path / "app-config.yaml"
    path.write_text(CONFIG_YAML)

    reader = ConfigReader.from_yaml(path)

    assert reader.get_optional_bool("catalog.processors.locationAnalyzer.enabled") is False
    assert reader.get_config_array("integrations.github")[0].get_optional("token") == "secret"


def test_from_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError):
        ConfigReader.from_yaml(path)


def test_load_config_from_env(tmp_path, monkeypatch):
    path = tmp_path / "app-config.yaml"
    path.write_text(CONFIG_YAML)
    monkeypatch.setenv(CONFIG_PATH_ENV, str(path))

    reader = load_config()

    assert reader.get_optional_number(
        "catalog.processors.locationAnalyzer.analysisTimeoutSeconds"
    ) == 5.0


def test_load_config_defaults_to_empty(monkeypatch):
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    reader = load_config()
    assert reader.get_optional("catalog") is None
