from ddlbridge.utils.performance import SLOW_QUERY_ENV_VAR, resolve_slow_query_ms


def test_override_wins(monkeypatch):
    monkeypatch.setenv(SLOW_QUERY_ENV_VAR, "50")
    assert resolve_slow_query_ms(default=100, override=5) == 5


def test_environment_value_is_used(monkeypatch):
    monkeypatch.setenv(SLOW_QUERY_ENV_VAR, "50")
    assert resolve_slow_query_ms(default=100) == 50


def test_invalid_environment_value_falls_back(monkeypatch):
    monkeypatch.setenv(SLOW_QUERY_ENV_VAR, "fast")
    assert resolve_slow_query_ms(default=100) == 100
    monkeypatch.setenv(SLOW_QUERY_ENV_VAR, "-1")
    assert resolve_slow_query_ms(default=100) == 100
    monkeypatch.delenv(SLOW_QUERY_ENV_VAR)
    assert resolve_slow_query_ms(default=100) == 100
