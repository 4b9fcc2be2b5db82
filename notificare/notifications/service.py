from __future__ import annotations

import logging

from notificare.config import Settings, get_settings
from notificare.errors import MessageError, PayloadTooLargeError
from notificare.models.message import Message
from notificare.models.notification import MessageRequest, SendResult
from notificare.notifications.providers import BaseMessageSender, MockMessageSender

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, sender: BaseMessageSender | None = None, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.senders: dict[str, BaseMessageSender] = {"mock": MockMessageSender()}
        if sender is not None:
            self.senders[sender.name] = sender
            self.sender = sender
        else:
            self.sender = self.senders.get(self.settings.notification_sender, self.senders["mock"])

    def build_message(self, request: MessageRequest) -> Message:
        message = Message(request.device_token, self.settings.default_certificate())
        message.set_expires_at(request.expires_at)

        if request.loc_key is not None:
            message.set_alert_localized(
                request.loc_key,
                request.loc_args,
                request.action_loc_key,
                request.launch_image,
            )
        elif request.alert is not None or request.action_loc_key is not None or request.launch_image is not None:
            message.set_alert(request.alert, request.action_loc_key, request.launch_image)

        message.set_badge(request.badge)
        if request.sound is not None:
            message.set_sound(request.sound or self.settings.apns_default_sound)
        if request.payload is not None:
            message.set_payload(request.payload)
        return message

    def render(self, message: Message) -> bytes:
        body = message.get_json().encode("utf-8")
        limit = self.settings.apns_max_payload_bytes
        if len(body) > limit:
            raise PayloadTooLargeError(len(body), limit)
        return body

    def send(self, message: Message) -> SendResult:
        body = self.render(message)
        result = self.sender.send(message, body)
        logger.info(
            "Notification dispatched",
            extra={
                "sender": self.sender.name,
                "device_token": message.device_token,
                "payload_bytes": result.payload_bytes,
                "expires_at": message.expires_at,
            },
        )
        return result

    def send_request(self, request: MessageRequest) -> SendResult:
        try:
            message = self.build_message(request)
            return self.send(message)
        except MessageError as exc:
            logger.warning("Notification rejected", extra={"field": exc.field, "error": str(exc)})
            raise
