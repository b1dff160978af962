"""
Ticker Errors

All failures raised by the library derive from TickerError.

Validation errors (UnknownExchangeError, MissingPairError) are raised before
any network access and also derive from ValueError. The others are raised
when the awaitable returned by fetch_ticker() is awaited.
"""

from typing import Optional


class TickerError(Exception):
    """Base class for ticker failures."""

    def __init__(self, message: str, exchange: Optional[str] = None):
        super().__init__(message)
        self.exchange = exchange


class UnknownExchangeError(TickerError, ValueError):
    """The exchange identifier is not registered."""

    def __init__(self, exchange: str, available: Optional[list] = None):
        message = f"Invalid exchange specified: {exchange}"
        if available:
            message += f". Available exchanges: {', '.join(available)}"
        super().__init__(message, exchange)


class MissingPairError(TickerError, ValueError):
    """The exchange needs a currency pair and none was given."""

    def __init__(self, exchange: str, pair_example: Optional[str] = None):
        message = f"Currency pair must be specified for {exchange}."
        if pair_example:
            message += f' Example: "{pair_example}"'
        super().__init__(message, exchange)
        self.pair_example = pair_example


class TransportError(TickerError):
    """The request failed before an HTTP response was received."""

    def __init__(self, message: str, exchange: Optional[str] = None):
        super().__init__(f"Request failed, error: {message}", exchange)
        self.message = message


class HttpStatusError(TickerError):
    """The exchange answered with a status other than 200."""

    def __init__(self, status: int, exchange: Optional[str] = None):
        super().__init__(f"Request failed, response code: {status}", exchange)
        self.status = status


class EmptyResponseError(TickerError):
    """A 200 response whose body holds no JSON value (empty or null)."""

    def __init__(self, exchange: Optional[str] = None):
        super().__init__(f"Empty response from {exchange}", exchange)


class MalformedResponseError(TickerError):
    """A 200 response whose body is not valid JSON."""

    def __init__(self, reason: str, exchange: Optional[str] = None):
        super().__init__(f"Malformed response from {exchange}: {reason}", exchange)
        self.reason = reason
