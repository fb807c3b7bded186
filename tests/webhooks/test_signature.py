"""Tests for webhook HMAC-SHA256 signature verification."""

import hashlib
import hmac
from unittest.mock import patch

import pytest

from tests.helpers import TEST_APP_SECRET
from wacloudapi.webhooks import signature as signature_module
from wacloudapi.webhooks.signature import (
    SIGNATURE_HEADER,
    SIGNATURE_PREFIX,
    compute_signature,
    verify_signature,
)

BODY = b'{"object":"whatsapp_business_account","entry":[]}'


def reference_header(body: bytes, secret: str = TEST_APP_SECRET) -> str:
    digest = hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()
    return f"sha256={digest}"


def flip_bit(data: bytes, index: int) -> bytes:
    mutated = bytearray(data)
    mutated[index] ^= 0x01
    return bytes(mutated)


class TestComputeSignature:
    def test_matches_independent_hmac(self):
        expected = hmac.new(b"test_app_secret", BODY, hashlib.sha256).hexdigest()
        assert compute_signature(BODY, TEST_APP_SECRET) == expected

    def test_bytes_and_str_secret_agree(self):
        assert compute_signature(BODY, TEST_APP_SECRET) == compute_signature(
            BODY, TEST_APP_SECRET.encode("utf-8")
        )

    def test_known_vector(self):
        # RFC 4231 test case 2
        digest = compute_signature(b"what do ya want for nothing?", "Jefe")
        assert digest == (
            "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"
        )

    def test_header_constants(self):
        assert SIGNATURE_HEADER == "X-Hub-Signature-256"
        assert SIGNATURE_PREFIX == "sha256="


class TestVerifySignature:
    def test_valid_signature(self):
        assert verify_signature(BODY, reference_header(BODY), TEST_APP_SECRET) is True

    def test_prefix_is_optional(self):
        bare = reference_header(BODY)[len("sha256=") :]
        assert verify_signature(BODY, bare, TEST_APP_SECRET) is True

    def test_surrounding_whitespace_is_ignored(self):
        assert verify_signature(BODY, f"  {reference_header(BODY)}\n", TEST_APP_SECRET)

    def test_empty_body_signed_correctly(self):
        assert verify_signature(b"", reference_header(b""), TEST_APP_SECRET) is True

    @pytest.mark.parametrize("index", [0, len(BODY) // 2, len(BODY) - 1])
    def test_body_bit_flip_rejected(self, index):
        header = reference_header(BODY)
        assert verify_signature(flip_bit(BODY, index), header, TEST_APP_SECRET) is False

    @pytest.mark.parametrize("position", [0, 31, 63])
    def test_header_digit_change_rejected(self, position):
        digest = reference_header(BODY)[len("sha256=") :]
        replacement = "0" if digest[position] != "0" else "1"
        tampered = digest[:position] + replacement + digest[position + 1 :]
        assert verify_signature(BODY, f"sha256={tampered}", TEST_APP_SECRET) is False

    def test_wrong_secret_rejected(self):
        header = reference_header(BODY, secret="another_secret")
        assert verify_signature(BODY, header, TEST_APP_SECRET) is False

    @pytest.mark.parametrize("header", [None, "", "sha256=", "sha256=abc"])
    def test_missing_or_short_header_rejected(self, header):
        assert verify_signature(BODY, header, TEST_APP_SECRET) is False

    def test_overlong_header_rejected(self):
        assert (
            verify_signature(BODY, reference_header(BODY) + "00", TEST_APP_SECRET)
            is False
        )

    def test_non_ascii_header_rejected_without_raising(self):
        header = "sha256=" + "é" * 64
        assert verify_signature(BODY, header, TEST_APP_SECRET) is False

    def test_uppercase_hex_rejected(self):
        header = "sha256=" + reference_header(BODY)[len("sha256=") :].upper()
        assert verify_signature(BODY, header, TEST_APP_SECRET) is False

    def test_empty_secret_rejected(self):
        assert verify_signature(BODY, reference_header(BODY, secret=""), "") is False

    def test_comparison_is_constant_time(self):
        with patch.object(
            signature_module.hmac, "compare_digest", wraps=hmac.compare_digest
        ) as compare:
            assert verify_signature(BODY, reference_header(BODY), TEST_APP_SECRET)
        compare.assert_called_once()
