"""Unit tests for appData == keccak256(fullAppData) verification."""
import pytest

from src.ov_common.enums import AppDataOutcome
from src.ov_common.errors import MalformedOrderError, MetadataMismatchError
from src.ov_order.domain.app_data import app_data_hash, verify_app_data

ZERO = bytes(32)
KECCAK_EMPTY = "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"


class TestZeroAppData:
    @pytest.mark.parametrize("preimage", [None, "", "{}", "anything at all"])
    def test_zero_digest_is_verified_empty(self, preimage: str | None) -> None:
        result = verify_app_data(ZERO, preimage)
        assert result.outcome == AppDataOutcome.VERIFIED_EMPTY
        assert result.computed is None
        assert result.ok


class TestPreimage:
    def test_missing_preimage(self) -> None:
        result = verify_app_data(app_data_hash("{}"), None)
        assert result.outcome == AppDataOutcome.MISSING_PREIMAGE
        assert not result.ok

    @pytest.mark.parametrize("preimage", [
        "{}",
        '{"appCode":"CoW Swap","metadata":{},"version":"1.1.0"}',
        "ünïcødé ✅",
        "x" * 10_000,
    ])
    def test_hash_of_string_verifies(self, preimage: str) -> None:
        result = verify_app_data(app_data_hash(preimage), preimage)
        assert result.outcome == AppDataOutcome.VERIFIED
        assert result.computed == result.expected

    @pytest.mark.parametrize("s1,s2", [
        ("{}", "{ }"),
        ('{"a":1}', '{"a":2}'),
        ("abc", "ABC"),
    ])
    def test_other_string_mismatches(self, s1: str, s2: str) -> None:
        result = verify_app_data(app_data_hash(s1), s2)
        assert result.outcome == AppDataOutcome.MISMATCH
        assert result.computed == app_data_hash(s2)
        assert not result.ok

    def test_hash_is_keccak_of_utf8(self) -> None:
        assert app_data_hash("").hex() == KECCAK_EMPTY

    def test_empty_string_against_nonzero_digest(self) -> None:
        assert verify_app_data(bytes.fromhex(KECCAK_EMPTY), "").outcome == AppDataOutcome.VERIFIED


class TestEscalation:
    def test_raise_for_mismatch(self) -> None:
        result = verify_app_data(app_data_hash("a"), "b")
        with pytest.raises(MetadataMismatchError) as exc_info:
            result.raise_for_mismatch()
        assert exc_info.value.code == 4102

    def test_no_raise_when_missing_preimage(self) -> None:
        verify_app_data(app_data_hash("a"), None).raise_for_mismatch()


def test_wrong_width_rejected() -> None:
    with pytest.raises(MalformedOrderError):
        verify_app_data(bytes(31), "{}")
