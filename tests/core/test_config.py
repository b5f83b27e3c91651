from taskrelay.core.config import Settings, get_settings


def test_page_size_defaults():
    """Connections default to 20 rows per page and never return more than 100"""
    settings = Settings()

    assert settings.DEFAULT_PAGE_SIZE == 20
    assert settings.MAX_PAGE_SIZE == 100


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MAX_PAGE_SIZE", "50")
    monkeypatch.setenv("SQL_ECHO", "true")

    settings = Settings()

    assert settings.MAX_PAGE_SIZE == 50
    assert settings.SQL_ECHO is True


def test_settings_are_cached():
    assert get_settings() is get_settings()
