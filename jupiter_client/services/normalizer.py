"""
Normalizer service - rewrites raw Jupiter JSON into protobuf JSON spellings.
"""
from __future__ import annotations

from typing import Tuple

# Exact substrings and their replacements, applied in order.
# Enum labels come back lowercase/bare from the API; the protobuf JSON mapping
# wants the fully-qualified enum constant names.
REPLACEMENTS: Tuple[Tuple[bytes, bytes], ...] = (
    (b'"confidenceLevel":"high"', b'"confidenceLevel":"CONFIDENCE_LEVEL_HIGH"'),
    (b'"confidenceLevel":"medium"', b'"confidenceLevel":"CONFIDENCE_LEVEL_MEDIUM"'),
    (b'"confidenceLevel":"low"', b'"confidenceLevel":"CONFIDENCE_LEVEL_LOW"'),
    (b'"swapMode":"ExactIn"', b'"swapMode":"SWAP_MODE_EXACTIN"'),
    (b'"swapMode":"ExactOut"', b'"swapMode":"SWAP_MODE_EXACTOUT"'),
    # null is rejected for plain string fields
    (b':null', b':""'),
)


def normalize_enum_values(body: bytes) -> bytes:
    """
    Return a copy of `body` with enum labels and null literals rewritten.

    Substitution is textual, not a JSON walk: a string value that happens to
    contain one of the target substrings is rewritten too. The result is
    idempotent and unchanged for bodies containing none of the targets.
    """
    normalized = bytes(body)
    for old, new in REPLACEMENTS:
        normalized = normalized.replace(old, new)
    return normalized
