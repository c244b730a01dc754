"""
Jupiter client - calls the price, swap and token REST APIs.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

import httpx

from jupiter_client.config import AppConfig, get_config
from jupiter_client.errors import (
    RequestBuildError,
    ResponseReadError,
    TransportError,
)
from jupiter_client.logging import get_logger
from jupiter_client.proto import price, swap, tokens
from jupiter_client.services.decoder import decode_message

logger = get_logger(__name__)

QueryParams = List[Tuple[str, str]]


def build_price_params(request: price.RootGetRequest) -> QueryParams:
    """Query parameters for the price API; empty fields are left out."""
    params: QueryParams = []
    if request.ids:
        params.append(("ids", request.ids))
    if request.vs_token:
        params.append(("vsToken", request.vs_token))
    if request.show_extra_info:
        params.append(("showExtraInfo", request.show_extra_info))
    return params


def build_quote_params(request: swap.QuoteGetRequest) -> QueryParams:
    """Query parameters for the quote API. `dexes` repeats its key per entry."""
    params: QueryParams = [
        ("inputMint", request.input_mint),
        ("outputMint", request.output_mint),
        ("amount", str(request.amount)),
    ]
    if request.slippage_bps > 0:
        params.append(("slippageBps", str(request.slippage_bps)))
    if request.swap_mode:
        params.append(("swapMode", request.swap_mode))
    for dex in request.dexes:
        params.append(("dexes", dex))
    if request.only_direct_routes:
        params.append(("onlyDirectRoutes", "true"))
    if request.platform_fee_bps > 0:
        params.append(("platformFeeBps", str(request.platform_fee_bps)))
    return params


class JupiterClient:
    """
    Thin async wrapper around the Jupiter REST APIs.

    Requests are issued one at a time over a single shared httpx client.
    Every decode goes through the response normalizer first.

    Usage:
        async with JupiterClient() as client:
            response = await client.get_price(price.RootGetRequest(ids="SOL"))
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or get_config()
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=self.config.jupiter_http_timeout)

    async def __aenter__(self) -> "JupiterClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self.http_client.aclose()
            logger.debug("HTTP client closed")

    async def _get(self, url: str, params: Optional[QueryParams] = None) -> Tuple[int, bytes]:
        """
        Issue a GET request and read the whole body.

        Returns:
            The HTTP status code and the raw body bytes

        Raises:
            RequestBuildError, TransportError, ResponseReadError
        """
        try:
            request = self.http_client.build_request("GET", url, params=params)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise RequestBuildError(str(e)) from e

        logger.debug(f"GET {request.url}")
        try:
            response = await self.http_client.send(request, stream=True)
        except httpx.RequestError as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e

        try:
            body = await response.aread()
        except (httpx.StreamError, httpx.RequestError) as e:
            raise ResponseReadError(str(e)) from e
        finally:
            await response.aclose()

        logger.debug(f"{response.status_code} from {request.url.host} ({len(body)} bytes)")
        return response.status_code, body

    async def get_price(self, request: price.RootGetRequest) -> price.RootGetResponse:
        """
        Fetch token prices from the Price API.

        A 200 response fills `price_response_200`; any other status yields the
        `empty_400` variant rather than an error.
        """
        status, body = await self._get(self.config.jupiter_price_api_base, build_price_params(request))

        response = price.RootGetResponse()
        if status == 200:
            price_response = decode_message(
                body,
                price.PriceResponse,
                ignore_unknown_fields=self.config.jupiter_ignore_unknown_fields,
                what="price response",
            )
            # Presence must hold even when the decoded body is empty
            response.price_response_200.SetInParent()
            response.price_response_200.MergeFrom(price_response)
        else:
            logger.warning(f"Price API returned {status} for ids={request.ids!r}")
            response.empty_400.SetInParent()
        return response

    async def get_quote(self, request: swap.QuoteGetRequest) -> swap.QuoteGetResponse:
        """
        Fetch a swap quote from the Swap API.

        Non-200 responses leave the `response` oneof unset.
        """
        url = f"{self.config.jupiter_swap_api_base}/quote"
        status, body = await self._get(url, build_quote_params(request))

        response = swap.QuoteGetResponse()
        if status == 200:
            quote = decode_message(
                body,
                swap.QuoteResponse,
                ignore_unknown_fields=self.config.jupiter_ignore_unknown_fields,
                what="quote response",
            )
            response.quote_response_200.SetInParent()
            response.quote_response_200.MergeFrom(quote)
        else:
            logger.warning(f"Swap API returned {status}")
        return response

    async def get_token_info(self, address: str) -> tokens.TokenAddressGetResponse:
        """
        Fetch token metadata from the Token API.

        Non-200 responses leave the `response` oneof unset.
        """
        url = f"{self.config.jupiter_token_api_base}/token/{address}"
        status, body = await self._get(url)

        response = tokens.TokenAddressGetResponse()
        if status == 200:
            token_info = decode_message(
                body,
                tokens.TokenInfo,
                ignore_unknown_fields=self.config.jupiter_ignore_unknown_fields,
                what="token info",
            )
            response.token_info_200.SetInParent()
            response.token_info_200.MergeFrom(token_info)
        else:
            logger.warning(f"Token API returned {status} for {address}")
        return response
