"""
Summary printing - human-readable console output for decoded messages.
"""
from __future__ import annotations

from jupiter_client.proto import price, swap, tokens


def print_price_summary(data: price.PriceResponse) -> None:
    """Price summary: token id, price, type and time taken."""
    print(f"✅ Price data received (time taken: {data.time_taken:.3f}s)")
    for token_id, info in data.data.items():
        print(f"   Token: {token_id}")
        print(f"   Price: ${info.price}")
        print(f"   Type: {info.type}")


def print_price_extra_summary(data: price.PriceResponse) -> None:
    """Price summary including confidence level and quoted buy/sell prices."""
    print("✅ Price data with extra info received")
    for token_id, info in data.data.items():
        print(f"   Token: {token_id}")
        print(f"   Price: ${info.price}")
        if info.HasField("extra_info"):
            extra_info = info.extra_info
            print(f"   Confidence: {price.ConfidenceLevel.Name(extra_info.confidence_level)}")
            quoted = extra_info.quoted_price
            if extra_info.HasField("quoted_price") and quoted.buy_price:
                print(f"   Buy Price: ${quoted.buy_price}")
                print(f"   Sell Price: ${quoted.sell_price}")


def print_quote_summary(quote: swap.QuoteResponse) -> None:
    """Quote summary: amounts, price impact and the route plan."""
    print("✅ Quote received")
    print(f"   Input Amount: {quote.in_amount}")
    print(f"   Output Amount: {quote.out_amount}")
    print(f"   Price Impact: {quote.price_impact_pct}%")
    print(f"   Route Plan Steps: {len(quote.route_plan)}")

    if quote.route_plan and quote.route_plan[0].HasField("swap_info"):
        print(f"   First DEX: {quote.route_plan[0].swap_info.label}")


def print_token_summary(token: tokens.TokenInfo) -> None:
    """Token summary: name, symbol, decimals and daily volume."""
    print("✅ Token info received:")
    if token.name:
        print(f"   Name: {token.name}")
    if token.symbol:
        print(f"   Symbol: {token.symbol}")
    print(f"   Decimals: {token.decimals}")
    if token.daily_volume:
        print(f"   Daily Volume: ${token.daily_volume:.2f}")
