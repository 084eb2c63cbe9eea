# ==============================================
# Tests for Configuration
# ==============================================

from matclass.config import AppConfig, get_config, load_config


def test_defaults(monkeypatch):
    monkeypatch.delenv("MATCLASS_METADATA_DIR", raising=False)
    monkeypatch.delenv("MATCLASS_LOG_LEVEL", raising=False)
    config = load_config()
    assert config == AppConfig(metadata_dir="metadata/", log_level="WARNING")


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MATCLASS_METADATA_DIR", str(tmp_path))
    monkeypatch.setenv("MATCLASS_LOG_LEVEL", "debug")
    config = load_config()
    assert config.metadata_dir == str(tmp_path)
    assert config.log_level == "DEBUG"


def test_get_config_is_a_singleton(fresh_config):
    assert get_config() is get_config()


def test_unknown_log_level_falls_back_to_warning(monkeypatch):
    monkeypatch.setenv("MATCLASS_LOG_LEVEL", "VERBOSE")
    assert load_config().log_level == "WARNING"
