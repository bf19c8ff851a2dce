import json

from settings import AppConfig


def test_defaults_apply_without_overrides():
    assert AppConfig.get_value("log_level") == "INFO"
    assert AppConfig.get_bool("demo_mode") is False
    assert AppConfig.get_value("missing_key", "fallback") == "fallback"


def test_environment_overrides_config_file(monkeypatch, tmp_path):
    config_path = tmp_path / "app_config.json"
    config_path.write_text(json.dumps({"aws_region": "us-east-1", "demo_mode": True}))
    monkeypatch.setenv("BOOKSHELF_CONFIG_PATH", str(config_path))
    AppConfig.reset()

    assert AppConfig.get_value("aws_region") == "us-east-1"
    assert AppConfig.get_bool("demo_mode") is True

    monkeypatch.setenv("BOOKSHELF_AWS_REGION", "eu-west-1")
    assert AppConfig.get_value("aws_region") == "eu-west-1"


def test_get_bool_parses_strings(monkeypatch):
    for raw, expected in (("true", True), ("YES", True), ("1", True), ("false", False), ("", False)):
        monkeypatch.setenv("BOOKSHELF_AI_SUMMARY_ENABLED", raw)
        assert AppConfig.get_bool("ai_summary_enabled") is expected


def test_broken_config_file_falls_back_to_defaults(monkeypatch, tmp_path):
    config_path = tmp_path / "app_config.json"
    config_path.write_text("{not json")
    monkeypatch.setenv("BOOKSHELF_CONFIG_PATH", str(config_path))
    AppConfig.reset()

    assert AppConfig.get_value("bedrock_model_id").startswith("anthropic.")
