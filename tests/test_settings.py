from birthday_api.settings import get_settings


def test_defaults(monkeypatch) -> None:
    for name in ["CORS_ALLOW_ORIGINS", "DISPLAY_LOCALE", "LEAP_DAY_RULE", "LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.cors_allow_origins == ["*"]
    assert settings.display_locale == "ru"
    assert settings.leap_day_rule == "feb28"
    assert settings.log_level == "INFO"


def test_values_from_env(monkeypatch) -> None:
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test ,")
    monkeypatch.setenv("DISPLAY_LOCALE", "EN")
    monkeypatch.setenv("LEAP_DAY_RULE", "mar1")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.cors_allow_origins == ["http://a.test", "http://b.test"]
    assert settings.display_locale == "en"
    assert settings.leap_day_rule == "mar1"
    assert settings.log_level == "DEBUG"


def test_unsupported_values_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("DISPLAY_LOCALE", "de")
    monkeypatch.setenv("LEAP_DAY_RULE", "never")
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    settings = get_settings()

    assert settings.display_locale == "ru"
    assert settings.leap_day_rule == "feb28"
    assert settings.log_level == "INFO"
