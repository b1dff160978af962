"""
Ticker Client

Async entry point for fetching tickers. Composes the request builder, one
aiohttp request and the response dispatcher.

Flow of fetch_ticker(exchange, pair):
    1. validate()         - raises right away for unknown exchange / missing pair
    2. build_url/options  - URL, method, headers, TLS flag, form body
    3. one HTTP request   - the only suspension point
    4. dispatcher.handle  - ticker, or a TickerError raised to the awaiting caller

There is no retry, no caching and no rate limiting. Each call is independent.

Usage:
    async with TickerClient() as client:
        ticker = await client.fetch_ticker("btce", "btc_usd")
        print(ticker["last"])

    # One-off request with a short-lived session
    ticker = await fetch_ticker("bitstamp")
"""

import asyncio
import time
from typing import Any, Awaitable, Optional

import aiohttp

from cryptick.core.config import DefaultOptionsStore, default_options
from cryptick.core.dispatcher import ResponseDispatcher
from cryptick.core.exchange_manager import ExchangeManager, get_manager
from cryptick.core.logging import get_logger, log_api_request, log_api_response
from cryptick.core.request_builder import RequestBuilder
from cryptick.core.schemas import DefaultOptions, HttpResponse, RequestOptions


class TickerClient:
    """
    Async HTTP client for exchange tickers.

    Attributes:
        manager: Exchange registry
        defaults: Default request options store
        builder: RequestBuilder bound to manager and defaults
        dispatcher: ResponseDispatcher bound to manager
        session: aiohttp ClientSession (created in __aenter__)

    Example:
        >>> async with TickerClient() as client:
        ...     markets = await client.fetch_ticker("bitcoincharts-markets", "bitstampUSD")
        ...     print(markets["close"])

    Notes:
        - Use as an async context manager so the session is closed
        - The keep-alive default is applied when the session is created
    """

    def __init__(
        self,
        manager: Optional[ExchangeManager] = None,
        defaults: Optional[DefaultOptionsStore] = None
    ):
        self.manager = manager if manager is not None else get_manager()
        self.defaults = defaults if defaults is not None else default_options
        self.builder = RequestBuilder(self.manager, self.defaults)
        self.dispatcher = ResponseDispatcher(self.manager)
        self.logger = get_logger(__name__)
        self.session: Optional[aiohttp.ClientSession] = None

    # ============================================
    # Context Manager for Session Management
    # ============================================

    async def __aenter__(self):
        """Enter async context - creates HTTP session."""
        if self.session is not None:
            raise RuntimeError("TickerClient session already open")

        keepalive = self.defaults.get().keepalive
        connector = aiohttp.TCPConnector(keepalive_timeout=keepalive / 1000)
        self.session = aiohttp.ClientSession(connector=connector)
        self.logger.debug(f"TickerClient session created (keepalive={keepalive}ms)")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context - closes HTTP session."""
        if self.session:
            await self.session.close()
            self.session = None
            self.logger.debug("TickerClient session closed")

    # ============================================
    # Public Operations
    # ============================================

    def fetch_ticker(self, exchange: str, pair: Optional[str] = None) -> Awaitable[Any]:
        """
        Fetch the current ticker from an exchange.

        Validation happens when this method is called, before any request is
        made. The returned awaitable performs the request.

        Args:
            exchange: Exchange identifier (e.g. "btce", "bitstamp")
            pair: Trading pair (e.g. "btc_usd"); required by some exchanges

        Returns:
            Awaitable resolving to the exchange's ticker

        Raises:
            UnknownExchangeError: Immediately, if the exchange is not registered
            MissingPairError: Immediately, if a required pair is missing

        Raised when awaited:
            TransportError, HttpStatusError, EmptyResponseError,
            MalformedResponseError

        Example:
            >>> ticker = await client.fetch_ticker("okcoin", "ltc_cny")
            >>> ticker["last"]
            33.15
        """
        self.builder.validate(exchange, pair)
        url = self.builder.build_url(exchange, pair)
        options = self.builder.build_options(exchange, pair)
        return self._fetch(url, options)

    def build_url(self, exchange: str, pair: Optional[str] = None) -> str:
        """Request URL for an exchange and pair."""
        return self.builder.build_url(exchange, pair)

    def build_options(self, exchange: str, pair: Optional[str] = None) -> RequestOptions:
        """Request options for an exchange and pair."""
        return self.builder.build_options(exchange, pair)

    def update_default_options(self, **changes: Any) -> DefaultOptions:
        """
        Change default options used by subsequent requests.

        Example:
            >>> client.update_default_options(user_agent="my-bot 1.0", insecure=True)
        """
        return self.defaults.update(**changes)

    # ============================================
    # HTTP Request Handler
    # ============================================

    async def _fetch(self, url: str, options: RequestOptions) -> Any:
        response = await self._send(url, options)
        return self.dispatcher.handle(response, options)

    async def _send(self, url: str, options: RequestOptions) -> HttpResponse:
        """
        Make one HTTP request.

        Transport failures (connection errors, timeouts) are returned as an
        HttpResponse with error set, so the dispatcher sees every outcome.

        Raises:
            RuntimeError: If the session is not initialized
        """
        if not self.session:
            raise RuntimeError("Client session not initialized. Use 'async with' statement.")

        kwargs = {"headers": options.headers()}
        if options.insecure:
            kwargs["ssl"] = False
        if options.method == "POST" and options.form_params is not None:
            kwargs["data"] = options.form_params

        log_api_request(options.exchange, options.method, url, options.pair)
        started = time.monotonic()

        try:
            async with self.session.request(options.method, url, **kwargs) as resp:
                body = await resp.text()
                log_api_response(options.exchange, url, resp.status, time.monotonic() - started)
                return HttpResponse(status=resp.status, body=body, headers=dict(resp.headers))

        except asyncio.TimeoutError:
            self.logger.error(f"Timeout on {url}")
            return HttpResponse(error=f"Timeout on {url}")

        except aiohttp.ClientError as e:
            self.logger.error(f"Request failed on {url}: {e}")
            return HttpResponse(error=str(e) or e.__class__.__name__)


# ============================================
# One-off Requests
# ============================================

def fetch_ticker(
    exchange: str,
    pair: Optional[str] = None,
    manager: Optional[ExchangeManager] = None,
    defaults: Optional[DefaultOptionsStore] = None
) -> Awaitable[Any]:
    """
    Fetch a ticker using a short-lived TickerClient.

    Validation errors are raised immediately, as with
    TickerClient.fetch_ticker().

    Example:
        >>> ticker = await fetch_ticker("bter", "doge_btc")
    """
    client = TickerClient(manager, defaults)
    client.builder.validate(exchange, pair)
    return _fetch_once(client, exchange, pair)


async def _fetch_once(client: TickerClient, exchange: str, pair: Optional[str]) -> Any:
    async with client:
        return await client.fetch_ticker(exchange, pair)
