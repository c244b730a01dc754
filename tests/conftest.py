"""
Shared test fixtures and helpers.
"""
from __future__ import annotations

import json
from typing import Any, AsyncGenerator, Dict

import httpx
import pytest

from jupiter_client.config import AppConfig
from jupiter_client.services.client import JupiterClient


PRICE_API = "http://jupiter.test/price/v2"
SWAP_API = "http://jupiter.test/v6"
TOKEN_API = "http://jupiter.test"

SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


def compact(payload: Dict[str, Any]) -> bytes:
    """Encode a payload the way the Jupiter APIs do (no whitespace)."""
    return json.dumps(payload, separators=(",", ":")).encode()


def price_payload(extra_info: bool = False) -> Dict[str, Any]:
    """A price response for SOL, optionally with extra info."""
    entry: Dict[str, Any] = {"id": SOL_MINT, "type": "derivedPrice", "price": "150.00"}
    if extra_info:
        entry["extraInfo"] = {
            "lastSwappedPrice": {
                "lastJupiterSellAt": 1726231876,
                "lastJupiterSellPrice": "149.87",
                "lastJupiterBuyAt": 1726231877,
                "lastJupiterBuyPrice": "150.02",
            },
            "quotedPrice": {
                "buyPrice": "150.05",
                "buyAt": 1726231879,
                "sellPrice": "149.95",
                "sellAt": 1726231879,
            },
            "confidenceLevel": "high",
            "depth": {
                "buyPriceImpactRatio": {"depth": {"10": 0.0011, "100": 0.0093}, "timestamp": 1726231876},
                "sellPriceImpactRatio": {"depth": {"10": 0.0012, "100": 0.0101}, "timestamp": 1726231876},
            },
        }
    return {"data": {SOL_MINT: entry}, "timeTaken": 0.0031}


def quote_payload(swap_mode: str = "ExactIn") -> Dict[str, Any]:
    """A SOL -> USDC quote with a single Raydium step."""
    return {
        "inputMint": SOL_MINT,
        "inAmount": "1000000000",
        "outputMint": USDC_MINT,
        "outAmount": "150123456",
        "otherAmountThreshold": "149372839",
        "swapMode": swap_mode,
        "slippageBps": 50,
        "platformFee": None,
        "priceImpactPct": "0.0002",
        "routePlan": [
            {
                "swapInfo": {
                    "ammKey": "58oQChx4yWmvKdwLLZzBi4ChoCc2fqCUWBkwMihLYQo2",
                    "label": "Raydium",
                    "inputMint": SOL_MINT,
                    "outputMint": USDC_MINT,
                    "inAmount": "1000000000",
                    "outAmount": "150123456",
                    "feeAmount": "2500000",
                    "feeMint": SOL_MINT,
                },
                "percent": 100,
            }
        ],
        "contextSlot": 299283763,
        "timeTaken": 0.0152,
    }


def token_payload() -> Dict[str, Any]:
    """USDC token metadata, with the null fields the API really returns."""
    return {
        "address": USDC_MINT,
        "name": "USD Coin",
        "symbol": "USDC",
        "decimals": 6,
        "logoURI": "https://example.com/usdc.png",
        "tags": ["verified", "strict"],
        "daily_volume": 589245891.62,
        "created_at": "2024-04-26T10:56:58.893768Z",
        "freeze_authority": "7dGbd2QZcCKcTndnHcTL8q7SMVXAkp688NTQYwrRCrar",
        "mint_authority": None,
        "permanent_delegate": None,
        "minted_at": None,
        "extensions": {"coingeckoId": "usd-coin"},
    }


@pytest.fixture
def test_config() -> AppConfig:
    """Config pointing every API at a fake host."""
    return AppConfig(
        jupiter_price_api_base=PRICE_API,
        jupiter_swap_api_base=SWAP_API,
        jupiter_token_api_base=TOKEN_API,
        jupiter_http_timeout=5.0,
    )


@pytest.fixture
async def jupiter_client(test_config) -> AsyncGenerator[JupiterClient, None]:
    """A JupiterClient whose HTTP traffic is served by httpx_mock."""
    client = JupiterClient(config=test_config, http_client=httpx.AsyncClient())
    yield client
    await client.http_client.aclose()


@pytest.fixture
def mock_env(monkeypatch):
    """Clear the cached config around env-driven tests."""
    from jupiter_client.config import get_config
    get_config.cache_clear()
    yield monkeypatch
    get_config.cache_clear()
