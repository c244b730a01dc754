"""
Token API messages (package jupiter.token).
"""
from jupiter_client.proto._schema import Field, Message, build_file

_schema = build_file(
    "jupiter/token.proto",
    "jupiter.token",
    messages=[
        Message("TokenInfo", [
            Field("address", 1, "string"),
            Field("name", 2, "string"),
            Field("symbol", 3, "string"),
            Field("decimals", 4, "int32"),
            Field("logo_uri", 5, "string", json_name="logoURI"),
            Field("tags", 6, "string", repeated=True),
            Field("daily_volume", 7, "double"),
            Field("created_at", 8, "string"),
            Field("freeze_authority", 9, "string"),
            Field("mint_authority", 10, "string"),
            Field("permanent_delegate", 11, "string"),
            Field("minted_at", 12, "string"),
            Field("extensions", 13, "map<string, string>"),
        ]),
        Message("TokenAddressGetRequest", [
            Field("address", 1, "string"),
        ]),
        Message("TokenAddressGetResponse", [
            Field("token_info_200", 1, "TokenInfo", oneof="response"),
        ]),
    ],
)

TokenInfo = _schema.message("TokenInfo")
TokenAddressGetRequest = _schema.message("TokenAddressGetRequest")
TokenAddressGetResponse = _schema.message("TokenAddressGetResponse")
