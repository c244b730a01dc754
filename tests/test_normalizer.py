"""
Tests for the normalizer service - enum and null rewriting.
"""
import pytest

from jupiter_client.services.normalizer import normalize_enum_values
from tests.conftest import compact, price_payload, quote_payload


class TestConfidenceLevel:
    """Tests for confidenceLevel rewriting."""

    @pytest.mark.parametrize("label, constant", [
        ("high", "CONFIDENCE_LEVEL_HIGH"),
        ("medium", "CONFIDENCE_LEVEL_MEDIUM"),
        ("low", "CONFIDENCE_LEVEL_LOW"),
    ])
    def test_rewrites_label(self, label, constant):
        """Each lowercase label should become its enum constant."""
        body = f'{{"confidenceLevel":"{label}"}}'.encode()

        assert normalize_enum_values(body) == f'{{"confidenceLevel":"{constant}"}}'.encode()

    def test_no_original_substring_left(self):
        """All occurrences should be rewritten, not just the first."""
        body = b'[{"confidenceLevel":"high"},{"x":1,"confidenceLevel":"high"}]'

        result = normalize_enum_values(body)

        assert b'"confidenceLevel":"high"' not in result
        assert result.count(b'"confidenceLevel":"CONFIDENCE_LEVEL_HIGH"') == 2

    def test_unknown_label_untouched(self):
        """Labels outside high/medium/low are left for the decoder to reject."""
        body = b'{"confidenceLevel":"extreme"}'
        assert normalize_enum_values(body) == body


class TestSwapMode:
    """Tests for swapMode rewriting."""

    def test_exact_in(self):
        assert normalize_enum_values(b'{"swapMode":"ExactIn"}') == b'{"swapMode":"SWAP_MODE_EXACTIN"}'

    def test_exact_out(self):
        assert normalize_enum_values(b'{"swapMode":"ExactOut"}') == b'{"swapMode":"SWAP_MODE_EXACTOUT"}'


class TestNull:
    """Tests for null literal rewriting."""

    def test_null_becomes_empty_string(self):
        assert normalize_enum_values(b'{"a":null,"b":1}') == b'{"a":"","b":1}'

    def test_null_in_nested_object(self):
        """Nulls are rewritten regardless of the field they follow."""
        body = b'{"data":{"SOL":null},"platformFee":null}'
        assert normalize_enum_values(body) == b'{"data":{"SOL":""},"platformFee":""}'

    def test_spaced_null_untouched(self):
        """Only the exact `:null` spelling is targeted."""
        body = b'{"a": null}'
        assert normalize_enum_values(body) == body


class TestNormalizationProperties:
    """Purity, idempotence and pass-through behaviour."""

    @pytest.mark.parametrize("body", [
        compact(price_payload(extra_info=True)),
        compact(quote_payload()),
        compact(quote_payload("ExactOut")),
        b'{"a":null,"confidenceLevel":"low","swapMode":"ExactIn"}',
    ])
    def test_idempotent(self, body):
        """Normalizing twice should equal normalizing once."""
        once = normalize_enum_values(body)
        assert normalize_enum_values(once) == once

    @pytest.mark.parametrize("body", [
        b"",
        b"{}",
        b'{"data":{"SOL":{"price":"150.00","type":"derivedPrice"}}}',
        b'{"swapMode":"SWAP_MODE_EXACTIN","confidenceLevel":"CONFIDENCE_LEVEL_LOW"}',
        b"not json at all",
    ])
    def test_no_targets_unchanged(self, body):
        """Bodies without any target substring pass through unchanged."""
        assert normalize_enum_values(body) == body

    def test_deterministic(self):
        """Same input should always yield the same output."""
        body = compact(price_payload(extra_info=True))
        assert normalize_enum_values(body) == normalize_enum_values(body)

    def test_returns_new_bytes(self):
        """Input buffer should not be mutated."""
        body = bytearray(b'{"a":null}')
        result = normalize_enum_values(body)

        assert body == bytearray(b'{"a":null}')
        assert isinstance(result, bytes)

    def test_rewrites_inside_string_values(self):
        """Substitution is textual: matching text inside a string value is rewritten too."""
        body = b'{"memo":"ratio:null"}'

        result = normalize_enum_values(body)

        assert b'ratio:""' in result
