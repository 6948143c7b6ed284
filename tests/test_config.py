from __future__ import annotations

from decimal import Decimal

from fabric_erp.config import Settings, build_logging_config


def test_settings_defaults():
    settings = Settings()
    assert settings.ROUND_OFF_UNIT == Decimal("1")
    assert settings.DUE_SOON_WINDOW_DAYS == 14
    assert settings.CLAMP_FIXED_DISCOUNT is True


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DUE_SOON_WINDOW_DAYS", "7")
    monkeypatch.setenv("ROUND_OFF_UNIT", "0.5")
    settings = Settings()
    assert settings.DUE_SOON_WINDOW_DAYS == 7
    assert settings.ROUND_OFF_UNIT == Decimal("0.5")


def test_logging_config_adds_file_handler_only_when_configured(tmp_path):
    console_only = build_logging_config("debug", None)
    assert console_only["root"]["handlers"] == ["console"]
    assert console_only["root"]["level"] == "DEBUG"

    log_file = tmp_path / "logs" / "erp.log"
    with_file = build_logging_config("info", str(log_file))
    assert with_file["handlers"]["file"]["filename"] == str(log_file)
    assert "file" in with_file["root"]["handlers"]
    assert (tmp_path / "logs").is_dir()


def test_refresh_rereads_environment(monkeypatch):
    settings = Settings()
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    assert settings.refresh().LOG_LEVEL == "WARNING"
