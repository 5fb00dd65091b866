"""Tests for ov_common.errors, ov_common.response, ov_common.networks and ov_common.hex_utils."""
import pytest

from src.ov_common.errors import (
    AppError,
    IdentifierMismatchError,
    InvalidOrderUidError,
    MalformedOrderError,
    OrderNotFoundError,
    UnsupportedNetworkError,
    UpstreamApiError,
)
from src.ov_common.hex_utils import parse_address, parse_digest, to_address, to_hex
from src.ov_common.networks import NETWORKS, get_network
from src.ov_common.response import error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_is_exception(self) -> None:
        err = AppError(code=4001, message="test")
        assert isinstance(err, Exception)


class TestSpecificErrors:
    @pytest.mark.parametrize("err,code,status", [
        (MalformedOrderError("bad"), 4001, 422),
        (InvalidOrderUidError("0x12"), 4002, 400),
        (OrderNotFoundError("0x12"), 4004, 404),
        (IdentifierMismatchError("0x01", "0x02"), 4101, 422),
        (UnsupportedNetworkError("goerli"), 9003, 400),
        (UpstreamApiError("timeout"), 9004, 502),
    ])
    def test_codes(self, err: AppError, code: int, status: int) -> None:
        assert err.code == code
        assert err.http_status == status

    def test_mismatch_message_has_both_uids(self) -> None:
        err = IdentifierMismatchError("0xaaaa", "0xbbbb")
        assert "0xaaaa" in err.message
        assert "0xbbbb" in err.message


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response({"ok": True})
        assert resp.code == 0
        assert resp.data == {"ok": True}

    def test_success_keeps_request_id(self) -> None:
        assert success_response(None, "req_abc").request_id == "req_abc"

    def test_error(self) -> None:
        resp = error_response(4004, "Order not found")
        assert resp.code == 4004
        assert resp.data is None
        assert resp.request_id.startswith("req_")

    def test_error_keeps_request_id(self) -> None:
        resp = error_response(4001, "bad", request_id="req_xyz")
        assert resp.request_id == "req_xyz"
        assert resp.message == "bad"


class TestNetworks:
    def test_mainnet(self) -> None:
        assert get_network("mainnet").chain_id == 1

    @pytest.mark.parametrize("name,chain_id", [
        ("xdai", 100), ("arbitrum_one", 42161), ("base", 8453), ("sepolia", 11155111),
    ])
    def test_table(self, name: str, chain_id: int) -> None:
        assert NETWORKS[name].chain_id == chain_id

    def test_unknown(self) -> None:
        with pytest.raises(UnsupportedNetworkError):
            get_network("goerli")


class TestHexUtils:
    def test_parse_address(self) -> None:
        assert parse_address("0x" + "ab" * 20) == b"\xab" * 20

    def test_parse_address_accepts_bytes(self) -> None:
        assert parse_address(b"\x01" * 20) == b"\x01" * 20

    @pytest.mark.parametrize("bad", ["ab" * 20, "0x" + "ab" * 19, "0x" + "gg" * 20, 123])
    def test_parse_address_rejects(self, bad: object) -> None:
        with pytest.raises(MalformedOrderError):
            parse_address(bad)  # type: ignore[arg-type]

    def test_parse_digest_width(self) -> None:
        with pytest.raises(MalformedOrderError):
            parse_digest("0x" + "00" * 20)

    def test_to_hex(self) -> None:
        assert to_hex(b"\x12\xab") == "0x12ab"

    def test_to_address_checksum(self) -> None:
        assert to_address(bytes.fromhex("9008d19f58aabd9ed0d60971565aa8510560ab41")) == (
            "0x9008D19f58AAbD9eD0D60971565AA8510560ab41"
        )
