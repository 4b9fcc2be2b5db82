from __future__ import annotations

import os
from dataclasses import dataclass

from notificare.models.certificate import Certificate


SUPPORTED_APNS_ENVS = {"SANDBOX", "PRODUCTION"}


def _current_apns_env() -> str:
    raw = os.getenv("APNS_ENV", "SANDBOX").strip().upper()
    if not raw:
        return "SANDBOX"
    if raw not in SUPPORTED_APNS_ENVS:
        raise ValueError(f"Invalid APNS_ENV: {raw}. Supported values: {sorted(SUPPORTED_APNS_ENVS)}")
    return raw


@dataclass(frozen=True)
class Settings:
    app_name: str = os.getenv("APP_NAME", "notificare")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    apns_env: str = _current_apns_env()
    apns_certificate_path: str = os.getenv("APNS_CERTIFICATE_PATH", "").strip()
    apns_certificate_passphrase: str = os.getenv("APNS_CERTIFICATE_PASSPHRASE", "")
    apns_default_sound: str = os.getenv("APNS_DEFAULT_SOUND", "default")
    apns_max_payload_bytes: int = int(os.getenv("APNS_MAX_PAYLOAD_BYTES", "4096"))

    notification_sender: str = os.getenv("NOTIFICATION_SENDER", "mock").strip().lower()

    def default_certificate(self) -> Certificate | None:
        if not self.apns_certificate_path:
            return None
        return Certificate(
            pem_file=self.apns_certificate_path,
            passphrase=self.apns_certificate_passphrase or None,
            environment=self.apns_env,
        )


settings = Settings()


def get_settings() -> Settings:
    return settings
