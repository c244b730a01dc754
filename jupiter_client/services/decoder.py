"""
Decoder service - turns Jupiter response bodies into protobuf messages.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional, Type, TypeVar

from google.protobuf.json_format import MessageToDict, Parse, ParseError
from google.protobuf.message import Message

from jupiter_client.errors import ResponseDecodeError
from jupiter_client.services.normalizer import normalize_enum_values

M = TypeVar("M", bound=Message)


def message_to_dict(message: Message) -> Dict[str, Any]:
    """
    Convert a protobuf message to a JSON-serializable dict.
    Preserves snake_case field names as per protobuf schema.
    """
    return MessageToDict(
        message,
        preserving_proto_field_name=True,
        always_print_fields_with_no_presence=True
    )


def permissive_dump(body: bytes) -> Optional[Any]:
    """Parse `body` as plain JSON, or return None if it isn't JSON."""
    try:
        return json.loads(body)
    except (ValueError, RecursionError):
        return None


def decode_message(
    body: bytes,
    message_cls: Type[M],
    ignore_unknown_fields: bool = True,
    what: str = "response",
) -> M:
    """
    Normalize a raw response body and decode it into `message_cls`.

    Args:
        body: Raw response bytes, as received
        message_cls: Protobuf message class to decode into
        ignore_unknown_fields: Skip JSON keys the schema does not declare
        what: Short name of the payload, used in the error message

    Returns:
        A new `message_cls` instance

    Raises:
        ResponseDecodeError: If the normalized body does not fit the schema.
            Its `raw` attribute carries the un-normalized body parsed as plain
            JSON, for diagnostics.
    """
    message = message_cls()
    try:
        Parse(normalize_enum_values(body), message, ignore_unknown_fields=ignore_unknown_fields)
    except (ParseError, UnicodeDecodeError, RecursionError) as e:
        raise ResponseDecodeError(
            str(e),
            stage=f"unmarshaling {what}",
            raw=permissive_dump(body),
        ) from e
    return message
