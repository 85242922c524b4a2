"""Session-backed flash message queue and renderer."""

from __future__ import annotations

import io
import logging
import uuid
from collections.abc import Iterable, MutableMapping
from typing import Any, Protocol

from fastapi.responses import RedirectResponse, Response
from markupsafe import Markup

from flashmsg.flash.errors import FlashRedirect, RedirectNotConfigured
from flashmsg.flash.messages import (
    DEFAULT_TYPE,
    SESSION_KEY,
    AddResult,
    Empty,
    Messages,
    MessageType,
    PendingResult,
    Queued,
    Rejected,
    StoredMessage,
    coerce_type,
    lookup_type,
    resolve_types,
)
from flashmsg.flash.presentation import FlashConfig
from flashmsg.flash.sanitize import HtmlSanitizer, Sanitizer
from flashmsg.utils.htmx import hx_redirect

logger = logging.getLogger(__name__)

TypeArg = str | MessageType


class ResponseWriter(Protocol):
    def write(self, text: str) -> Any: ...


class FlashMessages:
    """
    Queue, render and clear flash messages stored in a session mapping.

    Nothing is cached on the instance: every call reads and writes
    ``session[SESSION_KEY]`` so two managers bound to the same session
    see the same buckets.
    """

    def __init__(
        self,
        session: MutableMapping[str, Any],
        config: FlashConfig | None = None,
        *,
        sanitizer: Sanitizer | None = None,
        writer: ResponseWriter | None = None,
        htmx: bool = False,
    ) -> None:
        self.session = session
        self.config = config or FlashConfig()
        self.sanitizer = sanitizer or HtmlSanitizer()
        self.output: ResponseWriter = writer if writer is not None else io.StringIO()
        self.htmx = htmx
        self.redirect_url: str | None = None
        self.msg_id = uuid.uuid4().hex

    # -------- Queueing --------

    def add(
        self,
        text: str,
        msg_type: TypeArg | None = DEFAULT_TYPE,
        redirect_to: str | None = None,
        sticky: bool = False,
    ) -> AddResult:
        """Append a message to its type's bucket and remember the redirect target."""
        if not text:
            logger.info("Ignoring empty flash message")
            return Rejected("empty message")

        resolved = coerce_type(msg_type)
        record: StoredMessage = {"sticky": bool(sticky), "message": text}

        buckets = self._buckets()
        if buckets is None:
            buckets = {}
        buckets.setdefault(resolved.value, []).append(record)
        self.session[SESSION_KEY] = buckets

        if redirect_to is not None:
            self.redirect_url = redirect_to
        logger.debug("Queued %s flash message (sticky=%s)", resolved.label, record["sticky"])
        return Queued(resolved, record)

    def info(self, text: str, redirect_to: str | None = None, sticky: bool = False) -> AddResult:
        return self.add(text, MessageType.INFO, redirect_to, sticky)

    def success(self, text: str, redirect_to: str | None = None, sticky: bool = False) -> AddResult:
        return self.add(text, MessageType.SUCCESS, redirect_to, sticky)

    def warning(self, text: str, redirect_to: str | None = None, sticky: bool = False) -> AddResult:
        return self.add(text, MessageType.WARNING, redirect_to, sticky)

    def error(self, text: str, redirect_to: str | None = None, sticky: bool = False) -> AddResult:
        return self.add(text, MessageType.ERROR, redirect_to, sticky)

    def add_sticky(
        self, text: str, msg_type: TypeArg | None = DEFAULT_TYPE, redirect_to: str | None = None
    ) -> AddResult:
        """Queue a message rendered without a close button."""
        return self.add(text, msg_type, redirect_to, sticky=True)

    def finalize(self, *, halt: bool = False) -> Response:
        """
        Build the redirect that follows queueing.

        halt:
            Raise ``FlashRedirect`` carrying the response instead of
            returning it, ending the request from anywhere in the stack.

        Raises ``RedirectNotConfigured`` when no target was ever given.
        """
        if not self.redirect_url:
            logger.error("Flash message queued without a redirect target (id=%s)", self.msg_id)
            raise RedirectNotConfigured()

        if self.htmx:
            response = hx_redirect(self.redirect_url)
        else:
            response = RedirectResponse(self.redirect_url, status_code=303)
        if halt:
            raise FlashRedirect(response)
        return response

    # -------- Rendering --------

    def display(
        self,
        types: TypeArg | Iterable[TypeArg] | None = None,
        emit: bool = True,
    ) -> Markup | None:
        """
        Render and consume queued messages.

        types:
            None for every type in default order, one type, or a sequence
            giving both the selection and the display order.
        emit:
            Write the sanitized HTML to ``self.output`` and return None;
            with False the HTML is returned instead.

        Returns None when the session holds no message namespace at all.
        """
        buckets = self._buckets()
        if buckets is None:
            return None

        parts: list[str] = []
        rendered: list[str] = []
        for key in resolve_types(types):
            msg_type = lookup_type(key)
            queued = buckets.get(key) if msg_type else None
            if not queued:
                continue
            parts.extend(self.format_message(msg, msg_type) for msg in queued)
            # Consumed on first visit; a type named twice renders once
            del buckets[key]
            rendered.append(key)

        if rendered:
            self.session[SESSION_KEY] = buckets
            logger.debug("Rendered flash messages: %s", ", ".join(rendered))

        html = Markup(self.sanitizer("".join(parts)))
        if emit:
            self.output.write(html)
            return None
        return html

    def format_message(self, message: StoredMessage, msg_type: TypeArg) -> str:
        """Wrap one stored message using the presentation settings; no escaping."""
        cfg = self.config
        resolved = lookup_type(msg_type) or DEFAULT_TYPE
        css_class = f"{cfg.message_class} {cfg.css_for(resolved)}"
        before = cfg.before

        if message["sticky"]:
            css_class += f" {cfg.sticky_class}"
        else:
            before = cfg.close_button + before

        return cfg.wrapper % (css_class, before + message["message"] + cfg.after)

    # -------- Queries --------

    def _buckets(self) -> dict[str, list[StoredMessage]] | None:
        """The message namespace, or None when it is missing or not a mapping."""
        buckets = self.session.get(SESSION_KEY)
        return buckets if isinstance(buckets, dict) else None

    def has_errors(self) -> bool:
        return bool(self.has_messages(MessageType.ERROR))

    def has_messages(self, msg_type: TypeArg | None = None) -> PendingResult:
        """Pending messages for one type, or for the first non-empty type. Non-consuming."""
        buckets = self._buckets() or {}
        if msg_type is not None:
            candidates = [lookup_type(msg_type)]
        else:
            candidates = list(MessageType)

        for candidate in candidates:
            if candidate is None:
                continue
            items = buckets.get(candidate.value)
            if items:
                return Messages(candidate, list(items))
        return Empty()

    def pending_counts(self) -> dict[str, int]:
        buckets = self._buckets() or {}
        return {t.label: len(buckets.get(t.value) or []) for t in MessageType}

    def clear(self, types: TypeArg | Iterable[TypeArg] | None = None) -> FlashMessages:
        """Drop the named buckets, or the whole namespace when none are named."""
        if not types:
            self.session.pop(SESSION_KEY, None)
            return self

        buckets = self._buckets()
        if buckets is None:
            return self
        for key in resolve_types(types):
            buckets.pop(key, None)
        self.session[SESSION_KEY] = buckets
        return self
