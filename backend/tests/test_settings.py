import pytest
from pydantic import ValidationError

from tickerfeed.config.settings import ProviderSettings, Settings

_KEY_VARS = (
    "FINNHUB_API_KEY",
    "TICKERFEED_FINNHUB_API_KEY",
    "ALPHA_VANTAGE_API_KEY",
    "TICKERFEED_ALPHA_VANTAGE_API_KEY",
)


def test_provider_settings_require_api_keys(monkeypatch) -> None:
    for name in _KEY_VARS:
        monkeypatch.delenv(name, raising=False)

    with pytest.raises(ValidationError):
        ProviderSettings(_env_file=None)


def test_provider_settings_read_environment(monkeypatch) -> None:
    for name in _KEY_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("FINNHUB_API_KEY", "fh")
    monkeypatch.setenv("TICKERFEED_ALPHA_VANTAGE_API_KEY", "av")
    monkeypatch.setenv("TICKERFEED_FINNHUB_BASE_URL", "http://localhost:9000/api/v1")
    monkeypatch.setenv("TICKERFEED_REQUEST_TIMEOUT_SECONDS", "2.5")

    provider_settings = ProviderSettings(_env_file=None)

    assert provider_settings.finnhub_api_key == "fh"
    assert provider_settings.alpha_vantage_api_key == "av"
    assert provider_settings.finnhub_base_url == "http://localhost:9000/api/v1"
    assert provider_settings.request_timeout_seconds == 2.5


def test_default_limits() -> None:
    limits = Settings(_env_file=None).limits

    assert limits.news_symbol_limit == 5
    assert limits.news_items_per_symbol == 3
    assert limits.news_result_limit == 10
    assert limits.candle_window == 30
