"""
Exchange Descriptors Package

One module per exchange. Each module defines an ExchangeDescriptor subclass
describing the exchange's ticker endpoint and payload.

Adding an exchange:
    1. Create a module with an ExchangeDescriptor subclass
    2. Add it to DESCRIPTORS below
"""

from typing import List

from cryptick.core.exchange_interface import ExchangeDescriptor
from cryptick.exchanges.bitcoincharts import (
    BitcoinchartsMarketsExchange,
    BitcoinchartsWeightedPricesExchange,
)
from cryptick.exchanges.bitstamp import BitstampExchange
from cryptick.exchanges.bter import BterExchange
from cryptick.exchanges.btce import BtceExchange
from cryptick.exchanges.havelock import HavelockExchange
from cryptick.exchanges.okcoin import OkcoinExchange

DESCRIPTORS = [
    BtceExchange,
    BterExchange,
    HavelockExchange,
    BitstampExchange,
    OkcoinExchange,
    BitcoinchartsWeightedPricesExchange,
    BitcoinchartsMarketsExchange,
]


def default_descriptors() -> List[ExchangeDescriptor]:
    """Fresh instances of every shipped descriptor."""
    return [cls() for cls in DESCRIPTORS]


__all__ = [
    "BtceExchange",
    "BterExchange",
    "HavelockExchange",
    "BitstampExchange",
    "OkcoinExchange",
    "BitcoinchartsWeightedPricesExchange",
    "BitcoinchartsMarketsExchange",
    "DESCRIPTORS",
    "default_descriptors",
]
