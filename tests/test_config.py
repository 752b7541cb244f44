import pytest

from stock_api.main import DEFAULT_PORT, get_port


def test_port_defaults_to_3000(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert DEFAULT_PORT == 3000
    assert get_port() == 3000


def test_empty_port_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PORT", "")
    assert get_port() == 3000


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8081")
    assert get_port() == 8081


def test_invalid_port_is_rejected(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    with pytest.raises(ValueError):
        get_port()
