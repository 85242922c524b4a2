"""HTML sanitization for rendered flash output."""

from __future__ import annotations

from typing import Protocol

import nh3

# Attributes a message wrapper or close button typically needs
_GENERIC_ATTRIBUTES = {
    "class",
    "id",
    "role",
    "title",
    "aria-label",
    "aria-hidden",
    "aria-live",
    "data-dismiss",
    "data-bs-dismiss",
}


class Sanitizer(Protocol):
    def __call__(self, html: str) -> str: ...


class HtmlSanitizer:
    """
    Allow-list cleaner for post-style content.

    Scripts, event handlers and unknown tags are removed; the usual
    formatting tags plus ``button`` survive so close buttons keep working.
    """

    def __init__(
        self,
        extra_tags: set[str] | None = None,
        extra_attributes: dict[str, set[str]] | None = None,
    ) -> None:
        self.tags = set(nh3.ALLOWED_TAGS) | {"button"} | (extra_tags or set())
        attributes = {tag: set(attrs) for tag, attrs in nh3.ALLOWED_ATTRIBUTES.items()}
        attributes.setdefault("*", set()).update(_GENERIC_ATTRIBUTES)
        attributes.setdefault("button", set()).add("type")
        for tag, attrs in (extra_attributes or {}).items():
            attributes.setdefault(tag, set()).update(attrs)
        self.attributes = attributes

    def __call__(self, html: str) -> str:
        if not html:
            return ""
        return nh3.clean(html, tags=self.tags, attributes=self.attributes)


def passthrough(html: str) -> str:
    """Sanitizer for hosts that already trust every configured decoration."""
    return html
