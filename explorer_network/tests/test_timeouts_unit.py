from __future__ import annotations

from explorer_network.base.timeouts import TimeoutConfig, get_timeout_config


def test_defaults(monkeypatch):
    monkeypatch.delenv("EXPLORER_TIMEOUT_HTTP_SECONDS", raising=False)
    monkeypatch.delenv("EXPLORER_TIMEOUT_CONNECT_SECONDS", raising=False)
    assert get_timeout_config() == TimeoutConfig()  # nosec B101


def test_env_changes_refresh_cache(monkeypatch):
    monkeypatch.setenv("EXPLORER_TIMEOUT_HTTP_SECONDS", "12.5")
    first = get_timeout_config()
    assert first.http_timeout_seconds == 12.5  # nosec B101
    assert get_timeout_config() is first  # nosec B101

    monkeypatch.setenv("EXPLORER_TIMEOUT_HTTP_SECONDS", "3")
    assert get_timeout_config().http_timeout_seconds == 3.0  # nosec B101


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("EXPLORER_TIMEOUT_HTTP_SECONDS", "-1")
    monkeypatch.setenv("EXPLORER_TIMEOUT_CONNECT_SECONDS", "soon")
    cfg = get_timeout_config()
    assert (cfg.http_timeout_seconds, cfg.connect_timeout_seconds) == (30.0, 10.0)  # nosec B101
    assert cfg.to_httpx().connect == 10.0  # nosec B101
