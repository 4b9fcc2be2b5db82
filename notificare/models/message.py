from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from notificare.errors import InvalidInputError, OutOfRangeError
from notificare.models.alert import Alert, LocalizedAlert, StructuredAlert, alert_to_wire
from notificare.models.certificate import Certificate
from notificare.utils.time import to_unix_timestamp
from notificare.utils.validation import validate_device_token

DEFAULT_SOUND = "default"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _encode(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), allow_nan=False)


def _ensure_serializable(field: str, value: Any) -> str:
    try:
        return _encode(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(
            field, f"Invalid {field} for message. Value is not JSON serializable: {exc}", reason="not_serializable", value=value
        ) from exc


class Message:
    """A single APNs notification for one device.

    Every setter validates its input and leaves the message untouched when it
    raises. Rendering with :meth:`get_json` never changes the message.
    """

    def __init__(self, device_token: str, certificate: Certificate | None = None) -> None:
        self._device_token = validate_device_token(device_token)
        self._certificate = certificate
        self._expires_at = 0

        self._alert: Alert | None = None
        self._badge: int | None = None
        self._sound: str | None = None
        self._payload: dict[str, Any] | None = None

    def __repr__(self) -> str:
        return f"Message(device_token={self._device_token!r}, expires_at={self._expires_at})"

    @property
    def device_token(self) -> str:
        return self._device_token

    @property
    def certificate(self) -> Certificate | None:
        return self._certificate

    @property
    def expires_at(self) -> int:
        """Unix timestamp until which APNs may store the message, 0 to not store it."""
        return self._expires_at

    def set_expires_at(self, expires_at: datetime | int | None = None) -> None:
        if expires_at is None:
            self._expires_at = 0
        elif isinstance(expires_at, datetime):
            self._expires_at = to_unix_timestamp(expires_at)
        else:
            self._expires_at = int(expires_at)

    @property
    def alert(self) -> str | dict[str, Any] | None:
        return alert_to_wire(self._alert)

    def set_alert(
        self,
        body: str | None,
        action_loc_key: str | None = None,
        launch_image: str | None = None,
    ) -> None:
        if not body and (action_loc_key is not None or launch_image is not None):
            raise InvalidInputError(
                "alert",
                "No alert body given, but action-loc-key and/or launch-image given.",
                reason="decoration_without_body",
            )

        if not action_loc_key and not launch_image:
            self._alert = body
            return

        try:
            self._alert = StructuredAlert(
                body=body,
                action_loc_key=action_loc_key or None,
                launch_image=launch_image or None,
            )
        except ValidationError as exc:
            raise InvalidInputError("alert", f"Invalid alert for message: {exc}", value=body) from exc

    def set_alert_localized(
        self,
        loc_key: str | None,
        loc_args: list[Any] | tuple[Any, ...] = (),
        action_loc_key: str | None = None,
        launch_image: str | None = None,
    ) -> None:
        if not loc_key:
            raise InvalidInputError("alert", "No alert loc-key given.", reason="missing_loc_key")
        if not isinstance(loc_args, (list, tuple)):
            raise InvalidInputError(
                "alert",
                "Alert loc-args must be a list of arguments.",
                reason="invalid_loc_args",
                value=loc_args,
            )

        _ensure_serializable("alert", list(loc_args))
        try:
            self._alert = LocalizedAlert(
                loc_key=loc_key,
                loc_args=list(loc_args),
                action_loc_key=action_loc_key or None,
                launch_image=launch_image or None,
            )
        except ValidationError as exc:
            raise InvalidInputError("alert", f"Invalid localized alert for message: {exc}", value=loc_key) from exc

    @property
    def badge(self) -> int | None:
        return self._badge

    def set_badge(self, badge: int | None) -> None:
        if badge is None:
            self._badge = None
            return

        try:
            value = int(badge)
        except (TypeError, ValueError, OverflowError) as exc:
            raise InvalidInputError("badge", f"Badge is not a number: {badge!r}", value=badge) from exc
        if value < 0:
            raise OutOfRangeError("badge", "Badge must be 0 or higher.", value=value)
        self._badge = value

    def clear_badge(self) -> None:
        self.set_badge(0)

    @property
    def sound(self) -> str | None:
        return self._sound

    def set_sound(self, sound: str | None = DEFAULT_SOUND) -> None:
        self._sound = sound

    @property
    def payload(self) -> dict[str, Any] | None:
        return None if self._payload is None else dict(self._payload)

    def set_payload(self, payload: Mapping[str, Any] | str | bytes | None) -> None:
        """Set the custom payload, either as a mapping or as a JSON object string.

        Empty mappings and empty strings are rejected; pass ``None`` to remove
        the payload. Keys named ``alert``, ``badge`` or ``sound`` are replaced
        by the notification fields when those are set.
        """
        if payload is None:
            self._payload = None
            return

        if isinstance(payload, Mapping):
            if not payload:
                raise InvalidInputError("payload", "Invalid payload for message. Payload was empty, but not None.", reason="empty")
            # stored in its JSON form, detached from the caller's objects
            self._payload = json.loads(_ensure_serializable("payload", dict(payload)))
            return

        if not isinstance(payload, (str, bytes, bytearray)):
            raise InvalidInputError(
                "payload",
                f"Invalid payload for message. Unsupported type: {type(payload).__name__}",
                value=payload,
            )
        if not payload:
            raise InvalidInputError("payload", "Invalid payload for message. Payload was empty, but not None.", reason="empty")

        try:
            decoded = json.loads(payload, parse_constant=_reject_constant)
        except ValueError as exc:
            raise InvalidInputError(
                "payload", "Invalid payload for message. Payload was invalid JSON.", reason="invalid_json", value=payload
            ) from exc
        if not isinstance(decoded, dict):
            raise InvalidInputError(
                "payload",
                "Invalid payload for message. Payload must be a JSON object.",
                reason="not_an_object",
                value=payload,
            )
        self._payload = decoded

    def as_dict(self) -> dict[str, Any]:
        message: dict[str, Any] = dict(self._payload) if self._payload is not None else {}

        if self._alert is not None:
            message["alert"] = alert_to_wire(self._alert)
        if self._badge is not None:
            message["badge"] = self._badge
        if self._sound is not None:
            message["sound"] = self._sound

        return message

    def get_json(self) -> str:
        return _encode(self.as_dict())
