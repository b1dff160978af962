"""
Exchange Descriptor: Abstract Contract for All Exchanges

Every supported exchange is described by a subclass of ExchangeDescriptor.
A descriptor knows three things about its exchange:
    - where to send the request (build_url)
    - how to send it, when that depends on the pair (build_options)
    - how to turn the JSON body into a ticker (parse_ticker)

Descriptors are pure: they never perform I/O. The request builder, response
dispatcher and ticker client do the work and ask the descriptor for the
exchange-specific parts.

Example:
    class BtceExchange(ExchangeDescriptor):
        name = "btce"
        base_url = "https://btc-e.com/api/2"
        pair_required = True
        pair_example = "btc_usd"

        def build_url(self, pair=None):
            return f"{self.base_url}/{pair.lower()}/ticker"

        def parse_ticker(self, body, pair=None):
            return body.get("ticker")
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class ExchangeDescriptor(ABC):
    """
    Abstract Base Class for Exchange Descriptors

    Class Attributes:
        name: Registry identifier (lowercase, e.g. "btce", "bitstamp")
        base_url: Endpoint the exchange's ticker is served from
        http_method: Default HTTP method ("GET" or "POST")
        pair_required: Whether a request without a pair is rejected
        pair_example: Sample pair shown in MissingPairError messages
        limits: Documented query-rate ceiling (informational, not enforced)
    """

    # ============================================
    # Class Attributes (set by subclasses)
    # ============================================

    name: str
    base_url: str
    http_method: str = "GET"
    pair_required: bool = False
    pair_example: Optional[str] = None
    limits: Optional[str] = None

    # ============================================
    # Request Side
    # ============================================

    @abstractmethod
    def build_url(self, pair: Optional[str] = None) -> str:
        """
        Build the request URL.

        Args:
            pair: Trading pair, or None for exchanges where it is optional

        Returns:
            Absolute URL
        """
        ...

    def build_options(self, pair: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """
        Exchange-specific request options.

        Override only when the method or body depends on the pair. Returned
        keys take precedence over the defaults and the {pair, exchange,
        method} entries.

        Args:
            pair: Trading pair, or None

        Returns:
            Partial RequestOptions fields, or None for no overrides
        """
        return None

    # ============================================
    # Response Side
    # ============================================

    @abstractmethod
    def parse_ticker(self, body: Any, pair: Optional[str] = None) -> Any:
        """
        Extract the ticker from a parsed JSON body.

        Args:
            body: Decoded JSON (dict or list depending on the exchange)
            pair: Trading pair the request was made for, or None

        Returns:
            The ticker value handed back to the caller
        """
        ...

    # ============================================
    # Helper Methods
    # ============================================

    def describe(self) -> Dict[str, Any]:
        """
        Static metadata about this exchange.

        Example:
            >>> BitstampExchange().describe()["method"]
            'GET'
        """
        return {
            "name": self.name,
            "url": self.base_url,
            "method": self.http_method,
            "pair_required": self.pair_required,
            "pair_example": self.pair_example,
            "limits": self.limits,
        }

    def __repr__(self) -> str:
        """String representation of the descriptor."""
        return f"<{self.__class__.__name__}(name='{self.name}')>"
