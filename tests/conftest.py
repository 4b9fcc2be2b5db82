from __future__ import annotations

import pytest

from notificare.config import Settings
from notificare.models.certificate import Certificate
from notificare.models.message import Message

VALID_TOKEN = "0123456789abcdef" * 4


@pytest.fixture
def device_token() -> str:
    return VALID_TOKEN


@pytest.fixture
def certificate() -> Certificate:
    return Certificate(pem_file="certs/apns-sandbox.pem", passphrase="secret")


@pytest.fixture
def message(device_token: str) -> Message:
    return Message(device_token)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        apns_certificate_path="certs/apns-sandbox.pem",
        apns_certificate_passphrase="secret",
        apns_max_payload_bytes=256,
        notification_sender="mock",
    )
