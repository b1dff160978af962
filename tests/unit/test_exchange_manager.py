"""
Unit Tests for the Exchange Manager

These tests verify that ExchangeManager:
- Registers every shipped exchange
- Resolves identifiers case-insensitively
- Raises UnknownExchangeError for unregistered exchanges
- Replaces its table on register/unregister without touching old snapshots

Run with:
    pytest tests/unit/test_exchange_manager.py -v
"""

import pytest

from cryptick.core.errors import UnknownExchangeError
from cryptick.core.exchange_interface import ExchangeDescriptor
from cryptick.core.exchange_manager import ExchangeManager, get_manager
from cryptick.exchanges import BtceExchange


class DummyExchange(ExchangeDescriptor):
    """Minimal descriptor for registry tests."""

    name = "dummy"
    base_url = "https://dummy.example/ticker"

    def build_url(self, pair=None):
        return self.base_url

    def parse_ticker(self, body, pair=None):
        return body


@pytest.fixture
def manager():
    """Fresh manager with the shipped exchanges"""
    return ExchangeManager()


class TestLookup:
    """Tests for exchange retrieval"""

    def test_lists_all_shipped_exchanges(self, manager):
        assert manager.list_exchanges() == [
            "btce",
            "bter",
            "havelock",
            "bitstamp",
            "okcoin",
            "bitcoincharts-weighted-prices",
            "bitcoincharts-markets",
        ]
        assert len(manager) == 7

    def test_get_exchange_is_case_insensitive(self, manager):
        assert isinstance(manager.get_exchange("BTCE"), BtceExchange)

    def test_get_unknown_exchange_raises(self, manager):
        with pytest.raises(UnknownExchangeError) as exc_info:
            manager.get_exchange("nonexistent")
        assert exc_info.value.exchange == "nonexistent"
        assert "btce" in str(exc_info.value)

    def test_unknown_exchange_error_is_value_error(self, manager):
        with pytest.raises(ValueError):
            manager.get_exchange("nonexistent")

    def test_lookup_returns_none_for_unknown(self, manager):
        assert manager.lookup("nonexistent") is None
        assert manager.has_exchange("nonexistent") is False
        assert manager.has_exchange("Bitstamp") is True


class TestRegistration:
    """Tests for register/unregister"""

    def test_register_adds_descriptor(self, manager):
        manager.register(DummyExchange())
        assert manager.has_exchange("dummy")
        assert manager.get_exchange("dummy").build_url() == "https://dummy.example/ticker"

    def test_register_does_not_mutate_previous_snapshot(self, manager):
        snapshot = manager.exchanges
        manager.register(DummyExchange())
        assert "dummy" not in snapshot
        assert "dummy" in manager.exchanges

    def test_unregister_removes_descriptor(self, manager):
        manager.unregister("btce")
        assert not manager.has_exchange("btce")
        with pytest.raises(UnknownExchangeError):
            manager.unregister("btce")

    def test_custom_descriptor_list(self):
        manager = ExchangeManager([DummyExchange()])
        assert manager.list_exchanges() == ["dummy"]


class TestGlobalManager:
    """Tests for the process-wide manager"""

    def test_get_manager_returns_singleton(self):
        assert get_manager() is get_manager()
        assert get_manager().has_exchange("okcoin")
