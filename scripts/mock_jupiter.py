#!/usr/bin/env python3
"""
Mock Jupiter server for running the demo offline.

This server serves canned payloads shaped like the real Jupiter APIs:
- GET /price/v2          - token prices (400 for ids that are not mint-like)
- GET /v6/quote          - swap quote with a two-step route plan
- GET /token/{address}   - token metadata (404 for unknown mints)

Run with: python scripts/mock_jupiter.py
Then point the demo at it:
    JUPITER_PRICE_API_BASE=http://localhost:9002/price/v2 \
    JUPITER_SWAP_API_BASE=http://localhost:9002/v6 \
    JUPITER_TOKEN_API_BASE=http://localhost:9002 \
    python -m jupiter_client.main
"""
from __future__ import annotations

import re
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import uvicorn

app = FastAPI(title="Mock Jupiter Server", description="Test server for the Jupiter proto client")

SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"

# Base58 without 0, O, I, l
_MINT_PATTERN = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")

PRICES = {
    SOL_MINT: "150.00",
    USDC_MINT: "1.0001",
}

EXTRA_INFO = {
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
        "buyPriceImpactRatio": {"depth": {"10": 0.0011, "100": 0.0093, "1000": 0.087}, "timestamp": 1726231876},
        "sellPriceImpactRatio": {"depth": {"10": 0.0012, "100": 0.0101, "1000": 0.091}, "timestamp": 1726231876},
    },
}

TOKENS = {
    USDC_MINT: {
        "address": USDC_MINT,
        "name": "USD Coin",
        "symbol": "USDC",
        "decimals": 6,
        "logoURI": "https://raw.githubusercontent.com/solana-labs/token-list/main/assets/mainnet/EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v/logo.png",
        "tags": ["verified", "strict", "community"],
        "daily_volume": 589245891.62,
        "created_at": "2024-04-26T10:56:58.893768Z",
        "freeze_authority": "7dGbd2QZcCKcTndnHcTL8q7SMVXAkp688NTQYwrRCrar",
        "mint_authority": "BJE5MMbqXjVwjAF7oxwPYXnTXDyspzZyt4vwenNw5ruG",
        "permanent_delegate": None,
        "minted_at": None,
        "extensions": {"coingeckoId": "usd-coin"},
    },
}


def log_request(endpoint: str, detail: str):
    """Log an incoming request."""
    timestamp = datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {endpoint.upper()} | {detail}")


@app.get("/price/v2")
async def price(ids: str = "", showExtraInfo: str = ""):
    """Price endpoint. Unknown mint-like ids map to null, as upstream does."""
    log_request("price", f"ids={ids} showExtraInfo={showExtraInfo}")
    requested = [token_id for token_id in ids.split(",") if token_id]
    if not requested or not all(_MINT_PATTERN.match(token_id) for token_id in requested):
        return JSONResponse({"error": "Invalid token address"}, status_code=400)

    data = {}
    for token_id in requested:
        if token_id not in PRICES:
            data[token_id] = None
            continue
        entry = {"id": token_id, "type": "derivedPrice", "price": PRICES[token_id]}
        if showExtraInfo == "true":
            entry["extraInfo"] = EXTRA_INFO
        data[token_id] = entry

    return JSONResponse({"data": data, "timeTaken": 0.0031})


@app.get("/v6/quote")
async def quote(request: Request):
    """Quote endpoint. Always routes through two AMMs at a fixed rate."""
    params = request.query_params
    log_request("quote", str(params))
    for required in ("inputMint", "outputMint", "amount"):
        if required not in params:
            return JSONResponse({"error": f"Missing {required}"}, status_code=400)

    in_amount = int(params["amount"])
    out_amount = in_amount * 150 // 1000
    return JSONResponse({
        "inputMint": params["inputMint"],
        "inAmount": str(in_amount),
        "outputMint": params["outputMint"],
        "outAmount": str(out_amount),
        "otherAmountThreshold": str(out_amount * 995 // 1000),
        "swapMode": params.get("swapMode", "ExactIn"),
        "slippageBps": int(params.get("slippageBps", 50)),
        "platformFee": None,
        "priceImpactPct": "0.0001",
        "routePlan": [
            {
                "swapInfo": {
                    "ammKey": "5BKxfWMbmYBAEWvyPZS9esPducUba9GqyMjtLCfbaqyF",
                    "label": "Meteora DLMM",
                    "inputMint": params["inputMint"],
                    "outputMint": params["outputMint"],
                    "inAmount": str(in_amount * 6 // 10),
                    "outAmount": str(out_amount * 6 // 10),
                    "feeAmount": "24825",
                    "feeMint": params["inputMint"],
                },
                "percent": 60,
            },
            {
                "swapInfo": {
                    "ammKey": "Czfq3xZZDmsdGdUyrNLtRhGc47cXcZtLG4crryfu44zE",
                    "label": "Orca V2",
                    "inputMint": params["inputMint"],
                    "outputMint": params["outputMint"],
                    "inAmount": str(in_amount * 4 // 10),
                    "outAmount": str(out_amount * 4 // 10),
                    "feeAmount": "1200000",
                    "feeMint": params["inputMint"],
                },
                "percent": 40,
            },
        ],
        "contextSlot": 299283763,
        "timeTaken": 0.0152,
    })


@app.get("/token/{address}")
async def token(address: str):
    """Token metadata endpoint."""
    log_request("token", address)
    if address not in TOKENS:
        return JSONResponse({"error": "Token not found"}, status_code=404)
    return JSONResponse(TOKENS[address])


@app.get("/health")
async def health():
    """Health check."""
    return {"status": "healthy", "server": "mock-jupiter"}


if __name__ == "__main__":
    print("\n🪐 Mock Jupiter Server")
    print("=" * 50)
    print("Listening on http://localhost:9002")
    print("Endpoints:")
    print("  GET /price/v2         - Token prices")
    print("  GET /v6/quote         - Swap quotes")
    print("  GET /token/{address}  - Token metadata")
    print("=" * 50 + "\n")

    uvicorn.run(app, host="127.0.0.1", port=9002, log_level="warning")
