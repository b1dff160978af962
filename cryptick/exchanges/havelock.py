"""
Havelock Investments Descriptor

API:
    https://www.havelockinvestments.com/r/tickerfull

    - No pair: GET, returns every symbol
    - With pair: POST with form field symbol=<pair>

Response Format:
    {
      "AMHASH1": {
        "symbol": "AMHASH1",
        "name": "AMHASH1",
        "last": "0.00098000",
        "units": "1000000",
        "1d": {"min": "0.00096", "max": "0.00099", "vol": "152", ...},
        ...
      },
      ...
    }

The whole body is normalized; when a pair was requested only the entry keyed
by the uppercased pair is returned.
"""

from typing import Any, Dict, Optional

from cryptick.core.exchange_interface import ExchangeDescriptor
from cryptick.core.normalizer import normalize


class HavelockExchange(ExchangeDescriptor):
    """Havelock full ticker (pair optional, POST when given)."""

    name = "havelock"
    base_url = "https://www.havelockinvestments.com/r/tickerfull"
    http_method = "POST"

    def build_url(self, pair: Optional[str] = None) -> str:
        return self.base_url

    def build_options(self, pair: Optional[str] = None) -> Optional[Dict[str, Any]]:
        if pair is None:
            return {"method": "GET"}
        return {"form_params": {"symbol": pair}, "method": "POST"}

    def parse_ticker(self, body: Any, pair: Optional[str] = None) -> Any:
        ticker = normalize(body)
        if pair is None:
            return ticker
        return ticker.get(pair.upper())
