"""
Request and Response Schemas

This module defines Pydantic models for the data that flows through a
ticker request. Exchange payloads themselves stay plain dicts/lists (each
exchange returns a different shape); these models cover the parts the
library controls.

Models:
    - DefaultOptions: Process-wide request defaults (headers, TLS, keep-alive)
    - RequestOptions: Options for one request (defaults + exchange + pair + method)
    - HttpResponse: A completed HTTP exchange, or the transport error that ended it
"""

from typing import Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


HttpMethod = Literal["GET", "POST"]


# ============================================
# Default Options Schema
# ============================================

class DefaultOptions(BaseModel):
    """
    Default Request Options

    Read by every request. Instances are immutable; DefaultOptionsStore
    swaps in a new instance on update.

    Example:
        >>> opts = DefaultOptions(user_agent="my-bot 1.0")
        >>> opts.content_type
        'application/json'
    """

    content_type: str = Field(
        default="application/json",
        description="Content-Type request header"
    )

    user_agent: str = Field(
        default="cryptick 0.1.3",
        description="User-Agent request header"
    )

    insecure: bool = Field(
        default=False,
        description="Skip TLS certificate verification"
    )

    keepalive: int = Field(
        default=1000,
        ge=0,
        description="Keep-alive hint for idle pooled connections (milliseconds)"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


# ============================================
# Request Options Schema
# ============================================

class RequestOptions(DefaultOptions):
    """
    Options for a single ticker request.

    Built by RequestBuilder.build_options() by merging, in order:
        1. DefaultOptions
        2. {pair, exchange, method} from the call and the descriptor
        3. The descriptor's own build_options() result

    Additional Attributes:
        exchange: Registry identifier of the exchange
        pair: Trading pair the response is parsed for (may be None)
        method: HTTP method to use
        form_params: Form fields sent as the body of a POST request
    """

    exchange: str = Field(
        ...,
        description="Exchange identifier",
        examples=["btce", "bitstamp"]
    )

    pair: Optional[str] = Field(
        default=None,
        description="Trading pair symbol",
        examples=["btc_usd", "doge_btc"]
    )

    method: HttpMethod = Field(
        default="GET",
        description="HTTP method"
    )

    form_params: Optional[Dict[str, str]] = Field(
        default=None,
        description="Form-encoded request body (POST only)"
    )

    @field_validator("method", mode="before")
    @classmethod
    def validate_method(cls, v: str) -> str:
        """Ensure method is uppercase"""
        return v.upper() if isinstance(v, str) else v

    def headers(self) -> Dict[str, str]:
        """
        HTTP headers derived from these options.

        Returns:
            Dictionary with User-Agent, plus Content-Type unless a form body
            is sent (aiohttp sets the form encoding itself)
        """
        headers = {"User-Agent": self.user_agent}
        if self.form_params is None:
            headers["Content-Type"] = self.content_type
        return headers


# ============================================
# HTTP Response Schema
# ============================================

class HttpResponse(BaseModel):
    """
    A completed HTTP request as seen by the response dispatcher.

    When the transport failed, error holds its message and status/body may
    be missing.

    Example:
        >>> HttpResponse(status=200, body='{"ticker": {"last": 1}}')
        >>> HttpResponse(error="Cannot connect to host btc-e.com:443")
    """

    status: Optional[int] = Field(
        default=None,
        description="HTTP status code"
    )

    body: Optional[str] = Field(
        default=None,
        description="Raw response body"
    )

    error: Optional[str] = Field(
        default=None,
        description="Transport-level error message"
    )

    headers: Dict[str, str] = Field(
        default_factory=dict,
        description="Response headers"
    )

    @property
    def content_type(self) -> Optional[str]:
        """Content-Type response header, matched case-insensitively."""
        for name, value in self.headers.items():
            if name.lower() == "content-type":
                return value
        return None

    model_config = ConfigDict(frozen=True)
