"""
Jupiter Proto Client - demo of the Jupiter REST APIs decoded into protobuf.

Entry point for the demo command.

Usage:
    python -m jupiter_client.main
    jupiter-demo --amount 500000000 --slippage-bps 100
"""
from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Awaitable, Callable, List, Optional, Tuple

from dotenv import load_dotenv

from jupiter_client.config import get_config
from jupiter_client.errors import JupiterClientError, ResponseDecodeError
from jupiter_client.logging import configure_logging, get_logger
from jupiter_client.proto import price, swap
from jupiter_client.services.client import JupiterClient
from jupiter_client.services.summary import (
    print_price_extra_summary,
    print_price_summary,
    print_quote_summary,
    print_token_summary,
)

logger = get_logger(__name__)

SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
INVALID_TOKEN = "invalid-token-address"

# 1 SOL in lamports, 0.5% slippage
DEFAULT_AMOUNT = 1_000_000_000
DEFAULT_SLIPPAGE_BPS = 50


def _log_failure(what: str, error: JupiterClientError) -> None:
    logger.error(f"Error getting {what}: {error}")
    if isinstance(error, ResponseDecodeError) and error.raw is not None:
        logger.debug(f"Raw JSON response: {error.raw}")


async def show_price(client: JupiterClient, mint: str) -> None:
    print("\n📊 Getting token price...")
    response = await client.get_price(price.RootGetRequest(ids=mint))
    if response.WhichOneof("response") == "price_response_200":
        print_price_summary(response.price_response_200)


async def show_price_extra(client: JupiterClient, mint: str) -> None:
    print("\n📈 Getting token price with extra info...")
    response = await client.get_price(price.RootGetRequest(ids=mint, show_extra_info="true"))
    if response.WhichOneof("response") == "price_response_200":
        print_price_extra_summary(response.price_response_200)


async def show_quote(
    client: JupiterClient,
    input_mint: str,
    output_mint: str,
    amount: int,
    slippage_bps: int,
) -> None:
    print("\n🔄 Getting swap quote...")
    request = swap.QuoteGetRequest(
        input_mint=input_mint,
        output_mint=output_mint,
        amount=amount,
        slippage_bps=slippage_bps,
        swap_mode="ExactIn",
    )
    response = await client.get_quote(request)
    if response.WhichOneof("response") == "quote_response_200":
        print_quote_summary(response.quote_response_200)


async def show_token_info(client: JupiterClient, address: str) -> None:
    print("\n🪙 Getting token information...")
    response = await client.get_token_info(address)
    if response.WhichOneof("response") == "token_info_200":
        print_token_summary(response.token_info_200)


async def show_invalid_price(client: JupiterClient) -> None:
    print("\n❌ Testing error handling with invalid token...")
    try:
        response = await client.get_price(price.RootGetRequest(ids=INVALID_TOKEN))
    except JupiterClientError as e:
        print(f"✅ Properly handled error: {e}")
        return
    if response.WhichOneof("response") == "empty_400":
        print("✅ Properly handled 400 error response")


async def run_demo(
    client: JupiterClient,
    input_mint: str = SOL_MINT,
    output_mint: str = USDC_MINT,
    amount: int = DEFAULT_AMOUNT,
    slippage_bps: int = DEFAULT_SLIPPAGE_BPS,
) -> List[str]:
    """
    Run the example calls in order. A failing call is logged and skipped.

    Returns:
        Names of the examples that failed
    """
    print("🚀 Jupiter Proto Client Demo")
    print("================================")

    examples: List[Tuple[str, Callable[[], Awaitable[None]]]] = [
        ("price", lambda: show_price(client, input_mint)),
        ("price with extra info", lambda: show_price_extra(client, input_mint)),
        ("quote", lambda: show_quote(client, input_mint, output_mint, amount, slippage_bps)),
        ("token info", lambda: show_token_info(client, output_mint)),
        ("invalid token price", lambda: show_invalid_price(client)),
    ]

    failed = []
    for what, example in examples:
        try:
            await example()
        except JupiterClientError as e:
            _log_failure(what, e)
            failed.append(what)

    print("\n🎉 Demo completed!")
    print("\nThis demonstrates how to:")
    print("• Use protobuf message types for type-safe API calls")
    print("• Make HTTP requests to Jupiter's REST APIs")
    print("• Handle different response types and error cases")
    print("• Parse JSON responses into protobuf structures")
    print("• Normalize enum values for proper protobuf parsing")
    return failed


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Jupiter REST API demo decoded into protobuf messages")
    parser.add_argument("--input-mint", default=SOL_MINT, help="Mint to price and swap from")
    parser.add_argument("--output-mint", default=USDC_MINT, help="Mint to swap to and look up")
    parser.add_argument("--amount", type=int, default=DEFAULT_AMOUNT, help="Swap amount in base units")
    parser.add_argument("--slippage-bps", type=int, default=DEFAULT_SLIPPAGE_BPS, help="Slippage in basis points")
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> List[str]:
    async with JupiterClient() as client:
        return await run_demo(
            client,
            input_mint=args.input_mint,
            output_mint=args.output_mint,
            amount=args.amount,
            slippage_bps=args.slippage_bps,
        )


def main(argv: Optional[List[str]] = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    configure_logging(get_config().jupiter_log_level)
    failed = asyncio.run(_run(args))
    if failed:
        logger.error(f"{len(failed)} example(s) failed: {', '.join(failed)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
