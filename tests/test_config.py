import pytest

from src.config import DEFAULT_CONFIG, config


@pytest.fixture
def restore_config():
    yield config
    config.reload()


def test_default_server_settings():
    """config.yaml 이 없으면 기본 포트 8080"""
    assert DEFAULT_CONFIG["server"]["port"] == 8080
    assert config.get("server", "host") is not None
    assert config.get("missing_section", default="fallback") == "fallback"
    assert config.get("server", "missing_key", default=1) == 1


def test_reload_merges_yaml_over_defaults(tmp_path, restore_config):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("server:\n  port: 9090\nlogging:\n  level: DEBUG\n", encoding="utf-8")

    restore_config.reload(str(config_file))

    assert restore_config.get("server", "port") == 9090
    # 지정하지 않은 값은 기본값 유지
    assert restore_config.get("server", "host") == DEFAULT_CONFIG["server"]["host"]
    assert restore_config.get("logging", "level") == "DEBUG"
    assert restore_config.get("logging", "format") == DEFAULT_CONFIG["logging"]["format"]


def test_reload_invalid_yaml_falls_back_to_defaults(tmp_path, restore_config):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("server: [unclosed\n", encoding="utf-8")

    restore_config.reload(str(config_file))

    assert restore_config.get("server") == DEFAULT_CONFIG["server"]


def test_defaults_not_mutated_by_merge(tmp_path, restore_config):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("api:\n  title: Other\n", encoding="utf-8")

    restore_config.reload(str(config_file))

    assert DEFAULT_CONFIG["api"]["title"] == "Project Tracking API"
