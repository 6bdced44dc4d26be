import pytest
from pydantic import ValidationError
from dexa_convert.common.config import Settings, load_config, load_settings


def test_defaults():
    settings = Settings()
    assert settings.output_format == "json"
    assert settings.float_format == "%f"
    assert settings.json_indent == 2


def test_load_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("output_format: csv\nfloat_format: '%.3f'\n")
    assert load_config(path) == {"output_format": "csv", "float_format": "%.3f"}


def test_empty_config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path) == {}


def test_yaml_overrides_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("DEXA_OUTPUT_FORMAT", "csv")
    monkeypatch.setenv("DEXA_LOG_LEVEL", "DEBUG")
    path = tmp_path / "config.yaml"
    path.write_text("output_format: json\n")
    settings = load_settings(path)
    assert settings.output_format == "json"
    assert settings.log_level == "DEBUG"
    assert load_settings().output_format == "csv"


def test_invalid_format_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("output_format: xml\n")
    with pytest.raises(ValidationError):
        load_settings(path)


def test_log_level_case_insensitive(monkeypatch):
    monkeypatch.setenv("DEXA_LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


def test_invalid_log_level_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("log_level: loud\n")
    with pytest.raises(ValidationError):
        load_settings(path)
