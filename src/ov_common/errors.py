"""Unified error codes and custom exceptions.

Error code ranges:
  4xxx: Order input / verification
  9xxx: System / upstream

Verification outcomes (app-data mismatch, UID mismatch) are returned as
results by the domain layer. The *MismatchError classes below exist for
callers that decide to escalate such a result.
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 4xxx: Order ---

class MalformedOrderError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(4001, f"Malformed order: {detail}", 422)


class InvalidOrderUidError(AppError):
    def __init__(self, uid: str) -> None:
        super().__init__(4002, f"Invalid order UID (expected 56 bytes of hex): {uid}", 400)


class OrderNotFoundError(AppError):
    def __init__(self, uid: str) -> None:
        super().__init__(4004, f"Order not found: {uid}", 404)


class IdentifierMismatchError(AppError):
    def __init__(self, reference: str, computed: str) -> None:
        super().__init__(
            4101,
            f"Order UID recomputation failed: reference {reference}, recomputed {computed}",
            422,
        )


class MetadataMismatchError(AppError):
    def __init__(self, expected: str, computed: str) -> None:
        super().__init__(
            4102,
            f"App data hash mismatch: appData {expected}, keccak256(fullAppData) {computed}",
            422,
        )


# --- 9xxx: System ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)


class UnsupportedNetworkError(AppError):
    def __init__(self, network: str) -> None:
        super().__init__(9003, f"Unsupported network: {network}", 400)


class UpstreamApiError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(9004, f"Orderbook API request failed: {detail}", 502)
