"""
Tests for utils/config.py — Config base class and AppConfig env loading.
"""
from catalog.constants import DEFAULT_CATALOG_URL
from utils.config import AppConfig, Config

_ENV_VARS = ("APP_HOST", "APP_PORT", "APP_LOG_FORMAT", "APP_CORS_ORIGINS",
             "CATALOG_URL", "CATALOG_TIMEOUT")


def _clear_env(monkeypatch):
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)


class TestAppConfig:
    def test_defaults(self, monkeypatch):
        _clear_env(monkeypatch)
        cfg = AppConfig.from_env()
        assert cfg.api_host == "127.0.0.1"
        assert cfg.api_port == 8000
        assert cfg.log_format == "text"
        assert cfg.cors_origins == ["*"]
        assert cfg.catalog_url == DEFAULT_CATALOG_URL
        assert cfg.catalog_timeout == 30.0

    def test_env_overrides(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("APP_PORT", "9001")
        monkeypatch.setenv("APP_LOG_FORMAT", "json")
        monkeypatch.setenv("CATALOG_URL", "http://localhost:9000/bodies")
        monkeypatch.setenv("CATALOG_TIMEOUT", "2.5")
        cfg = AppConfig.from_env()
        assert cfg.api_port == 9001
        assert cfg.log_format == "json"
        assert cfg.catalog_url == "http://localhost:9000/bodies"
        assert cfg.catalog_timeout == 2.5

    def test_cors_origins_split(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("APP_CORS_ORIGINS", "https://a.example, https://b.example,")
        cfg = AppConfig.from_env()
        assert cfg.cors_origins == ["https://a.example", "https://b.example"]


class TestConfigToDict:
    def test_skips_private(self):
        cfg = Config()
        cfg.visible = 1
        cfg._hidden = 2
        assert cfg.to_dict() == {"visible": 1}

    def test_app_config_snapshot(self, monkeypatch):
        _clear_env(monkeypatch)
        monkeypatch.setenv("CATALOG_TIMEOUT", "5")
        data = AppConfig.from_env().to_dict()
        assert data == {
            "api_host": "127.0.0.1",
            "api_port": 8000,
            "log_format": "text",
            "cors_origins": ["*"],
            "catalog_url": DEFAULT_CATALOG_URL,
            "catalog_timeout": 5.0,
        }

