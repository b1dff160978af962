"""
Response Dispatcher

Turns a completed HTTP request into a ticker or a TickerError.

Order of checks:
    1. Transport error -> TransportError (status is not looked at)
    2. Status 200      -> decode JSON, hand it to the exchange's parse_ticker()
    3. Anything else   -> HttpStatusError (body is not decoded)

A 200 response with an empty body or a JSON null raises EmptyResponseError
rather than returning None.
"""

import json
from typing import Any, Optional

from cryptick.core.errors import (
    EmptyResponseError,
    HttpStatusError,
    MalformedResponseError,
    TransportError,
)
from cryptick.core.exchange_manager import ExchangeManager, get_manager
from cryptick.core.logging import get_logger
from cryptick.core.schemas import HttpResponse, RequestOptions

logger = get_logger(__name__)


class ResponseDispatcher:
    """
    Routes responses to the right exchange parser.

    Example:
        >>> dispatcher = ResponseDispatcher()
        >>> context = RequestOptions(exchange="bitstamp", pair="btc_usd")
        >>> dispatcher.handle(HttpResponse(status=200, body='{"last": "29200.00"}'), context)
        {'last': 29200.0}
    """

    def __init__(self, manager: Optional[ExchangeManager] = None):
        self.manager = manager if manager is not None else get_manager()

    def handle(self, response: HttpResponse, context: RequestOptions) -> Any:
        """
        Produce the ticker for a response.

        Args:
            response: The completed request
            context: Options the request was made with (exchange and pair)

        Returns:
            Whatever the exchange's parse_ticker() returns for the body

        Raises:
            TransportError: If the request never got a response
            HttpStatusError: If the status is not 200
            EmptyResponseError: If a 200 body holds no JSON value
            MalformedResponseError: If a 200 body is not valid JSON or has
                a shape the exchange parser cannot read
        """
        exchange = context.exchange

        if response.error:
            logger.warning(f"{exchange}: transport error: {response.error}")
            raise TransportError(response.error, exchange)

        if response.status != 200:
            logger.warning(f"{exchange}: HTTP {response.status}")
            raise HttpStatusError(response.status, exchange)

        body = self.decode(response.body, exchange, response.content_type)
        descriptor = self.manager.get_exchange(exchange)

        try:
            return descriptor.parse_ticker(body, context.pair)
        except (AttributeError, TypeError) as e:
            # Body decoded but has the wrong shape (e.g. a list where a dict was expected)
            logger.error(f"{exchange}: unexpected payload shape: {e}")
            raise MalformedResponseError(f"unexpected payload shape: {e}", exchange) from e

    @staticmethod
    def decode(body: Optional[str], exchange: str, content_type: Optional[str] = None) -> Any:
        """
        Decode a JSON body.

        Raises:
            EmptyResponseError: If the body is blank or decodes to null
            MalformedResponseError: If the body is not valid JSON
        """
        if body is None or not body.strip():
            raise EmptyResponseError(exchange)

        try:
            decoded = json.loads(body)
        except json.JSONDecodeError as e:
            logger.error(f"{exchange}: invalid JSON in response: {e}")
            reason = f"{e} (Content-Type: {content_type})" if content_type else str(e)
            raise MalformedResponseError(reason, exchange) from e

        if decoded is None:
            raise EmptyResponseError(exchange)
        return decoded
