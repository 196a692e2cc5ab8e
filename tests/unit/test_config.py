from stockplan.core.config import Settings


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("STOCKPLAN_API_BASE_URL", "http://factory.local/api/")
    monkeypatch.setenv("STOCKPLAN_TIMEOUT", "2.5")
    settings = Settings()
    assert settings.API_BASE_URL == "http://factory.local/api/"
    assert settings.TIMEOUT == 2.5


def test_explicit_values_win(monkeypatch):
    monkeypatch.setenv("STOCKPLAN_API_BASE_URL", "http://factory.local/api")
    monkeypatch.delenv("STOCKPLAN_TIMEOUT", raising=False)
    settings = Settings(api_base_url="http://other/api")
    assert settings.API_BASE_URL == "http://other/api"
    assert settings.TIMEOUT is None
