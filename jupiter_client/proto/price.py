"""
Price API messages (package jupiter.price).
"""
from jupiter_client.proto._schema import Enum, Field, Message, build_file

_schema = build_file(
    "jupiter/price.proto",
    "jupiter.price",
    enums=[
        Enum("ConfidenceLevel", [
            "CONFIDENCE_LEVEL_UNSPECIFIED",
            "CONFIDENCE_LEVEL_HIGH",
            "CONFIDENCE_LEVEL_MEDIUM",
            "CONFIDENCE_LEVEL_LOW",
        ]),
    ],
    messages=[
        Message("Empty"),
        Message("QuotedPrice", [
            Field("buy_price", 1, "string"),
            Field("buy_at", 2, "int64"),
            Field("sell_price", 3, "string"),
            Field("sell_at", 4, "int64"),
        ]),
        Message("LastSwappedPrice", [
            Field("last_jupiter_sell_at", 1, "int64"),
            Field("last_jupiter_sell_price", 2, "string"),
            Field("last_jupiter_buy_at", 3, "int64"),
            Field("last_jupiter_buy_price", 4, "string"),
        ]),
        Message("DepthRatio", [
            Field("depth", 1, "map<string, double>"),
            Field("timestamp", 2, "int64"),
        ]),
        Message("Depth", [
            Field("buy_price_impact_ratio", 1, "DepthRatio"),
            Field("sell_price_impact_ratio", 2, "DepthRatio"),
        ]),
        Message("ExtraInfo", [
            Field("last_swapped_price", 1, "LastSwappedPrice"),
            Field("quoted_price", 2, "QuotedPrice"),
            Field("confidence_level", 3, "ConfidenceLevel"),
            Field("depth", 4, "Depth"),
        ]),
        Message("PriceData", [
            Field("id", 1, "string"),
            Field("type", 2, "string"),
            Field("price", 3, "string"),
            Field("extra_info", 4, "ExtraInfo"),
        ]),
        Message("PriceResponse", [
            Field("data", 1, "map<string, PriceData>"),
            Field("time_taken", 2, "double"),
        ]),
        Message("RootGetRequest", [
            Field("ids", 1, "string"),
            Field("vs_token", 2, "string"),
            Field("show_extra_info", 3, "string"),
        ]),
        Message("RootGetResponse", [
            Field("price_response_200", 1, "PriceResponse", oneof="response"),
            Field("empty_400", 2, "Empty", oneof="response"),
        ]),
    ],
)

ConfidenceLevel = _schema.enum("ConfidenceLevel")

Empty = _schema.message("Empty")
QuotedPrice = _schema.message("QuotedPrice")
LastSwappedPrice = _schema.message("LastSwappedPrice")
DepthRatio = _schema.message("DepthRatio")
Depth = _schema.message("Depth")
ExtraInfo = _schema.message("ExtraInfo")
PriceData = _schema.message("PriceData")
PriceResponse = _schema.message("PriceResponse")
RootGetRequest = _schema.message("RootGetRequest")
RootGetResponse = _schema.message("RootGetResponse")
