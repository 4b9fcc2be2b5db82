import json
from dataclasses import replace
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from notificare.errors import InvalidInputError, OutOfRangeError, PayloadTooLargeError
from notificare.models.message import Message
from notificare.models.notification import MessageRequest
from notificare.notifications.providers import MockMessageSender
from notificare.notifications.service import NotificationService


def test_build_and_send_notification(test_settings, device_token: str) -> None:
    sender = MockMessageSender()
    service = NotificationService(sender=sender, settings=test_settings)

    result = service.send_request(
        MessageRequest(
            device_token=device_token,
            alert="Check portfolio",
            badge=2,
            sound="default",
            payload={"risk": "high"},
            expires_at=datetime(2030, 1, 1, tzinfo=timezone.utc),
        )
    )

    assert result.success is True
    assert result.sender == "mock"
    assert result.device_token == device_token

    token, expires_at, body = sender.outbox[0]
    assert token == device_token
    assert expires_at == int(datetime(2030, 1, 1, tzinfo=timezone.utc).timestamp())
    assert json.loads(body) == {"risk": "high", "alert": "Check portfolio", "badge": 2, "sound": "default"}
    assert result.payload_bytes == len(body)


def test_build_message_uses_configured_certificate(test_settings, device_token: str) -> None:
    service = NotificationService(settings=test_settings)

    message = service.build_message(MessageRequest(device_token=device_token))

    assert message.certificate is not None
    assert message.certificate.pem_file == "certs/apns-sandbox.pem"
    assert message.get_json() == "{}"


def test_build_message_localized_alert(test_settings, device_token: str) -> None:
    service = NotificationService(settings=test_settings)

    message = service.build_message(
        MessageRequest(device_token=device_token, loc_key="GAME_INVITE", loc_args=["Jenna"], action_loc_key="PLAY")
    )

    assert message.alert == {"loc-key": "GAME_INVITE", "loc-args": ["Jenna"], "action-loc-key": "PLAY"}


def test_build_message_structured_alert(test_settings, device_token: str) -> None:
    service = NotificationService(settings=test_settings)

    message = service.build_message(
        MessageRequest(device_token=device_token, alert="Hello", launch_image="Launch.png")
    )

    assert message.alert == {"body": "Hello", "launch-image": "Launch.png"}


def test_empty_sound_uses_configured_default(test_settings, device_token: str) -> None:
    service = NotificationService(settings=test_settings)

    message = service.build_message(MessageRequest(device_token=device_token, sound=""))

    assert message.sound == test_settings.apns_default_sound


def test_request_rejects_alert_and_loc_key(device_token: str) -> None:
    with pytest.raises(ValidationError):
        MessageRequest(device_token=device_token, alert="Hello", loc_key="KEY")


def test_invalid_request_propagates_message_errors(test_settings, device_token: str) -> None:
    sender = MockMessageSender()
    service = NotificationService(sender=sender, settings=test_settings)

    with pytest.raises(InvalidInputError):
        service.send_request(MessageRequest(device_token="abc"))
    with pytest.raises(InvalidInputError):
        service.send_request(MessageRequest(device_token=device_token, action_loc_key="VIEW"))
    with pytest.raises(OutOfRangeError):
        service.send_request(MessageRequest(device_token=device_token, badge=-1))

    assert sender.outbox == []


def test_oversized_payload_is_not_sent(test_settings, device_token: str) -> None:
    sender = MockMessageSender()
    service = NotificationService(sender=sender, settings=test_settings)
    message = Message(device_token)
    message.set_payload({"blob": "x" * 300})

    with pytest.raises(PayloadTooLargeError) as excinfo:
        service.send(message)

    assert excinfo.value.limit == 256
    assert sender.outbox == []


def test_unknown_sender_falls_back_to_mock(test_settings) -> None:
    service = NotificationService(settings=replace(test_settings, notification_sender="carrier-pigeon"))

    assert isinstance(service.sender, MockMessageSender)
