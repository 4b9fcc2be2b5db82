from __future__ import annotations

import string

from notificare.errors import InvalidInputError

DEVICE_TOKEN_LENGTH = 64

_HEX_DIGITS = frozenset(string.hexdigits)


def validate_device_token(token: str | None) -> str:
    if not token:
        raise InvalidInputError("device_token", "No device token given.", reason="missing", value=token)
    if not isinstance(token, str) or not set(token) <= _HEX_DIGITS:
        raise InvalidInputError(
            "device_token",
            f"Invalid device token given, no hexadecimal: {token}",
            reason="not_hexadecimal",
            value=token,
        )
    if len(token) != DEVICE_TOKEN_LENGTH:
        raise InvalidInputError(
            "device_token",
            f"Invalid device token given, incorrect length: {token} ({len(token)})",
            reason="wrong_length",
            value=token,
        )
    return token
