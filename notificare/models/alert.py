from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field


class StructuredAlert(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    body: str
    action_loc_key: str | None = Field(default=None, alias="action-loc-key")
    launch_image: str | None = Field(default=None, alias="launch-image")

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class LocalizedAlert(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    loc_key: str = Field(alias="loc-key")
    loc_args: list[Any] = Field(default_factory=list, alias="loc-args")
    action_loc_key: str | None = Field(default=None, alias="action-loc-key")
    launch_image: str | None = Field(default=None, alias="launch-image")

    def as_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


Alert = Union[str, StructuredAlert, LocalizedAlert]


def alert_to_wire(alert: Alert | None) -> str | dict[str, Any] | None:
    if alert is None or isinstance(alert, str):
        return alert
    return alert.as_dict()
