"""
Swap API messages (package jupiter.swap).
"""
from jupiter_client.proto._schema import Enum, Field, Message, build_file

_schema = build_file(
    "jupiter/swap.proto",
    "jupiter.swap",
    enums=[
        Enum("SwapMode", [
            "SWAP_MODE_UNSPECIFIED",
            "SWAP_MODE_EXACTIN",
            "SWAP_MODE_EXACTOUT",
        ]),
    ],
    messages=[
        Message("SwapInfo", [
            Field("amm_key", 1, "string"),
            Field("label", 2, "string"),
            Field("input_mint", 3, "string"),
            Field("output_mint", 4, "string"),
            Field("in_amount", 5, "string"),
            Field("out_amount", 6, "string"),
            Field("fee_amount", 7, "string"),
            Field("fee_mint", 8, "string"),
        ]),
        Message("RoutePlanStep", [
            Field("swap_info", 1, "SwapInfo"),
            Field("percent", 2, "int32"),
        ]),
        Message("QuoteResponse", [
            Field("input_mint", 1, "string"),
            Field("in_amount", 2, "string"),
            Field("output_mint", 3, "string"),
            Field("out_amount", 4, "string"),
            Field("other_amount_threshold", 5, "string"),
            Field("swap_mode", 6, "SwapMode"),
            Field("slippage_bps", 7, "int32"),
            Field("price_impact_pct", 8, "string"),
            Field("route_plan", 9, "RoutePlanStep", repeated=True),
            Field("context_slot", 10, "uint64"),
            Field("time_taken", 11, "double"),
        ]),
        Message("QuoteGetRequest", [
            Field("input_mint", 1, "string"),
            Field("output_mint", 2, "string"),
            Field("amount", 3, "uint64"),
            Field("slippage_bps", 4, "int32"),
            # Sent as the API spells it ("ExactIn"/"ExactOut"), not the enum name
            Field("swap_mode", 5, "string"),
            Field("dexes", 6, "string", repeated=True),
            Field("only_direct_routes", 7, "bool"),
            Field("platform_fee_bps", 8, "int32"),
        ]),
        Message("QuoteGetResponse", [
            Field("quote_response_200", 1, "QuoteResponse", oneof="response"),
        ]),
    ],
)

SwapMode = _schema.enum("SwapMode")

SwapInfo = _schema.message("SwapInfo")
RoutePlanStep = _schema.message("RoutePlanStep")
QuoteResponse = _schema.message("QuoteResponse")
QuoteGetRequest = _schema.message("QuoteGetRequest")
QuoteGetResponse = _schema.message("QuoteGetResponse")
