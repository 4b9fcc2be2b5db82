from __future__ import annotations

from typing import Any


class MessageError(ValueError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class InvalidInputError(MessageError):
    """Structurally wrong, contradictory or malformed input."""

    def __init__(self, field: str, message: str, reason: str = "invalid", value: Any = None) -> None:
        super().__init__(field, message)
        self.reason = reason
        self.value = value


class OutOfRangeError(MessageError):
    """Numeric value outside of its allowed domain."""

    def __init__(self, field: str, message: str, value: Any = None) -> None:
        super().__init__(field, message)
        self.value = value


class PayloadTooLargeError(OutOfRangeError):
    def __init__(self, size: int, limit: int) -> None:
        super().__init__("payload", f"Rendered payload is {size} bytes, limit is {limit} bytes", value=size)
        self.limit = limit
