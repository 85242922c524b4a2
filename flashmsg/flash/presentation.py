"""Presentation settings applied when messages are rendered."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flashmsg.flash.messages import MessageType, lookup_type

DEFAULT_CLASS_MAP: Mapping[str, str] = MappingProxyType(
    {
        MessageType.INFO.value: "alert-info",
        MessageType.SUCCESS.value: "alert-success",
        MessageType.WARNING.value: "alert-warning",
        MessageType.ERROR.value: "alert-danger",
    }
)


class FlashConfig(BaseModel):
    """
    Immutable presentation settings.

    wrapper:
        Two-slot ``%s`` template. The first slot receives the CSS classes,
        the second the decorated message body.
    before / after:
        Markup placed inside the wrapper around the message text.
    close_button:
        Markup prepended to ``before`` for non-sticky messages.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    wrapper: str = "<div class='%s'>%s</div>\n"
    before: str = ""
    after: str = ""
    close_button: str = ""
    sticky_class: str = "sticky"
    message_class: str = "alert dismissable"
    class_map: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_CLASS_MAP))

    @field_validator("wrapper")
    @classmethod
    def _two_slots(cls, value: str) -> str:
        slots = value.replace("%%", "")
        if slots.count("%s") != 2 or "%" in slots.replace("%s", ""):
            raise ValueError("wrapper needs exactly two %s placeholders")
        return value

    @field_validator("class_map")
    @classmethod
    def _known_types(cls, value: dict[str, str]) -> dict[str, str]:
        merged = dict(DEFAULT_CLASS_MAP)
        for key, css in value.items():
            msg_type = lookup_type(key)
            if msg_type is None:
                raise ValueError(f"unknown message type: {key!r}")
            merged[msg_type.value] = css
        return merged

    def css_for(self, msg_type: MessageType) -> str:
        return self.class_map[msg_type.value]


class FlashConfigBuilder:
    """Fluent builder for ``FlashConfig``; every setter returns the builder."""

    def __init__(self, base: FlashConfig | None = None) -> None:
        self._values: dict[str, Any] = (base or FlashConfig()).model_dump()

    def _set(self, name: str, value: str) -> FlashConfigBuilder:
        if not isinstance(value, str):
            raise TypeError(f"{name} must be a string, got {type(value).__name__}")
        self._values[name] = value
        return self

    def set_wrapper(self, wrapper: str = "") -> FlashConfigBuilder:
        return self._set("wrapper", wrapper)

    def set_before(self, before: str = "") -> FlashConfigBuilder:
        return self._set("before", before)

    def set_after(self, after: str = "") -> FlashConfigBuilder:
        return self._set("after", after)

    def set_close_button(self, close_button: str = "") -> FlashConfigBuilder:
        return self._set("close_button", close_button)

    def set_sticky_class(self, sticky_class: str = "") -> FlashConfigBuilder:
        return self._set("sticky_class", sticky_class)

    def set_message_class(self, message_class: str = "") -> FlashConfigBuilder:
        return self._set("message_class", message_class)

    def set_class_map(
        self, msg_type: str | MessageType | Mapping[str, str], css_class: str | None = None
    ) -> FlashConfigBuilder:
        """
        Merge CSS classes for message types.

        Accepts either a single type with its class, or a whole mapping.
        A single type without a class leaves the map untouched.
        """
        if isinstance(msg_type, Mapping):
            updates = dict(msg_type)
        else:
            if css_class is None:
                return self
            updates = {msg_type: css_class}

        class_map = dict(self._values["class_map"])
        for key, css in updates.items():
            known = lookup_type(key)
            if known is None:
                raise ValueError(f"unknown message type: {key!r}")
            if not isinstance(css, str):
                raise TypeError(f"CSS class for {known.label} must be a string")
            class_map[known.value] = css
        self._values["class_map"] = class_map
        return self

    def build(self) -> FlashConfig:
        return FlashConfig(**self._values)
