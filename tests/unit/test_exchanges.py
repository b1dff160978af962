"""
Unit Tests for Exchange Descriptors

These tests verify each exchange descriptor:
- Builds the exact URL its API expects
- Declares the right method and pair requirements
- Parses its payload into the expected ticker

Run with:
    pytest tests/unit/test_exchanges.py -v
"""

import pytest

from cryptick.core.exchange_interface import ExchangeDescriptor
from cryptick.exchanges import (
    BitcoinchartsMarketsExchange,
    BitcoinchartsWeightedPricesExchange,
    BitstampExchange,
    BterExchange,
    BtceExchange,
    HavelockExchange,
    OkcoinExchange,
    default_descriptors,
)


# ============================================
# Descriptor Contract
# ============================================

class TestDescriptorContract:
    """Tests shared by all descriptors"""

    def test_seven_descriptors_shipped(self):
        """Verify every exchange is shipped with a unique name"""
        descriptors = default_descriptors()
        assert len(descriptors) == 7
        assert len({d.name for d in descriptors}) == 7

    def test_descriptors_implement_interface(self):
        """Verify all descriptors are ExchangeDescriptor instances"""
        for descriptor in default_descriptors():
            assert isinstance(descriptor, ExchangeDescriptor)
            assert descriptor.http_method in ("GET", "POST")

    def test_pair_required_descriptors_have_example(self):
        """Verify exchanges requiring a pair document an example"""
        for descriptor in default_descriptors():
            if descriptor.pair_required:
                assert descriptor.pair_example

    def test_interface_cannot_be_instantiated(self):
        """Verify ExchangeDescriptor is abstract"""
        with pytest.raises(TypeError):
            ExchangeDescriptor()

    def test_describe_returns_metadata(self):
        """Verify describe() exposes static metadata"""
        info = BitcoinchartsMarketsExchange().describe()
        assert info["name"] == "bitcoincharts-markets"
        assert info["limits"] == "Max queries, once every 15 minutes"
        assert info["pair_required"] is False


# ============================================
# BTC-e
# ============================================

class TestBtce:
    """Tests for BtceExchange"""

    def test_build_url_lowercases_pair(self):
        assert BtceExchange().build_url("BTC_USD") == "https://btc-e.com/api/2/btc_usd/ticker"

    def test_parse_extracts_ticker_without_normalizing(self):
        """Verify the ticker sub-object is returned as received"""
        body = {"ticker": {"last": 29200.0, "updated": 1609459200, "note": "1.5"}}
        assert BtceExchange().parse_ticker(body, "btc_usd") == body["ticker"]


# ============================================
# Bter
# ============================================

class TestBter:
    """Tests for BterExchange"""

    def test_build_url_keeps_pair_as_given(self):
        assert BterExchange().build_url("DOGE_btc") == "http://data.bter.com/api/1/ticker/DOGE_btc"

    def test_parse_drops_result_and_normalizes(self):
        body = {"result": "true", "last": "0.00000052", "vol_doge": 123456789.5}
        assert BterExchange().parse_ticker(body, "doge_btc") == {
            "last": 0.00000052,
            "vol_doge": 123456789.5,
        }


# ============================================
# Havelock
# ============================================

class TestHavelock:
    """Tests for HavelockExchange"""

    BODY = {
        "AMHASH1": {"symbol": "AMHASH1", "last": "0.00098000", "1d": {"vol": "152"}},
        "BTCGLD": {"symbol": "BTCGLD", "last": "0.5"},
    }

    def test_default_method_is_post(self):
        assert HavelockExchange.http_method == "POST"

    def test_url_is_fixed(self):
        assert HavelockExchange().build_url("amhash1") == HavelockExchange.base_url

    def test_options_without_pair_use_get(self):
        assert HavelockExchange().build_options(None) == {"method": "GET"}

    def test_options_with_pair_post_symbol_form(self):
        assert HavelockExchange().build_options("amhash1") == {
            "form_params": {"symbol": "amhash1"},
            "method": "POST",
        }

    def test_parse_without_pair_normalizes_everything(self):
        result = HavelockExchange().parse_ticker(self.BODY)
        assert result["AMHASH1"]["last"] == 0.00098
        assert result["AMHASH1"]["1d"]["vol"] == 152.0
        assert result["BTCGLD"]["last"] == 0.5

    def test_parse_with_pair_selects_uppercased_symbol(self):
        result = HavelockExchange().parse_ticker(self.BODY, "amhash1")
        assert result == {"symbol": "AMHASH1", "last": 0.00098, "1d": {"vol": 152.0}}

    def test_parse_with_unknown_pair_returns_none(self):
        assert HavelockExchange().parse_ticker(self.BODY, "nope") is None


# ============================================
# Bitstamp
# ============================================

class TestBitstamp:
    """Tests for BitstampExchange"""

    def test_options_force_btc_usd_pair(self):
        """Verify the caller's pair is always replaced by btc_usd"""
        descriptor = BitstampExchange()
        assert descriptor.build_options("ltc_usd") == {"pair": "btc_usd", "method": "GET"}
        assert descriptor.build_options(None) == {"pair": "btc_usd", "method": "GET"}

    def test_parse_normalizes_body(self):
        body = {"high": "29500.00", "last": "29200.00", "timestamp": "1609459200"}
        assert BitstampExchange().parse_ticker(body) == {
            "high": 29500.0,
            "last": 29200.0,
            "timestamp": 1609459200.0,
        }


# ============================================
# OKCoin
# ============================================

class TestOkcoin:
    """Tests for OkcoinExchange"""

    def test_build_url_appends_lowercased_pair(self):
        assert OkcoinExchange().build_url("LTC_CNY") == "https://www.okcoin.com/api/ticker.do?symbol=ltc_cny"

    def test_parse_normalizes_ticker(self):
        body = {"ticker": {"buy": "33.15", "vol": "10532696.39199642"}}
        assert OkcoinExchange().parse_ticker(body, "ltc_cny") == {
            "buy": 33.15,
            "vol": 10532696.39199642,
        }


# ============================================
# Bitcoincharts
# ============================================

class TestBitcoinchartsWeightedPrices:
    """Tests for BitcoinchartsWeightedPricesExchange"""

    BODY = {
        "USD": {"7d": "29012.11", "24h": "29150.03"},
        "EUR": {"7d": "23800.90"},
        "timestamp": 1609459200,
    }

    def test_parse_with_pair_selects_timestamp_and_currency(self):
        result = BitcoinchartsWeightedPricesExchange().parse_ticker(self.BODY, "usd")
        assert result == {"USD": {"7d": 29012.11, "24h": 29150.03}, "timestamp": 1609459200}

    def test_parse_without_pair_normalizes_all(self):
        result = BitcoinchartsWeightedPricesExchange().parse_ticker(self.BODY)
        assert result["EUR"] == {"7d": 23800.90}
        assert set(result) == {"USD", "EUR", "timestamp"}

    def test_parse_with_missing_currency_keeps_timestamp(self):
        result = BitcoinchartsWeightedPricesExchange().parse_ticker(self.BODY, "jpy")
        assert result == {"timestamp": 1609459200}


class TestBitcoinchartsMarkets:
    """Tests for BitcoinchartsMarketsExchange"""

    BODY = [
        {"symbol": "DOGE_BTC", "close": "0.00000052", "volume": "1000"},
        {"symbol": "BTC_USD", "close": "29200.0"},
        {"symbol": "DOGE_BTC", "close": "0.00000099"},
    ]

    def test_parse_with_pair_returns_first_match_unmodified(self):
        result = BitcoinchartsMarketsExchange().parse_ticker(self.BODY, "DOGE_BTC")
        assert result is self.BODY[0]
        assert result["close"] == "0.00000052"

    def test_parse_match_is_case_sensitive(self):
        assert BitcoinchartsMarketsExchange().parse_ticker(self.BODY, "doge_btc") is None

    def test_parse_without_pair_returns_list_unmodified(self):
        assert BitcoinchartsMarketsExchange().parse_ticker(self.BODY) is self.BODY
