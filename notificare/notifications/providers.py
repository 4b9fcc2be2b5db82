from __future__ import annotations

from abc import ABC, abstractmethod

from notificare.models.message import Message
from notificare.models.notification import SendResult
from notificare.utils.time import utc_now


class BaseMessageSender(ABC):
    """Transport seam: receives a validated message and its rendered body."""

    name: str = "base"

    @abstractmethod
    def send(self, message: Message, body: bytes) -> SendResult:
        raise NotImplementedError


class MockMessageSender(BaseMessageSender):
    name = "mock"

    def __init__(self) -> None:
        self.outbox: list[tuple[str, int, bytes]] = []

    def send(self, message: Message, body: bytes) -> SendResult:
        self.outbox.append((message.device_token, message.expires_at, body))
        return SendResult(
            success=True,
            sender=self.name,
            device_token=message.device_token,
            payload_bytes=len(body),
            timestamp=utc_now(),
        )
