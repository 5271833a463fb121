import pytest

from banking.config import get_settings


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch):
    """Keep cached settings and BANKING_* env vars from leaking between tests."""
    for name in (
        "BANKING_DEFAULT_USER_ID",
        "BANKING_DEFAULT_PASSWORD",
        "BANKING_DEFAULT_TRANSFER_AMOUNT",
        "BANKING_SIMULATE_NETWORK_DOWN",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
