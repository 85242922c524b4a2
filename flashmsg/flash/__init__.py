"""Flash message queue: queue in one request, render once in the next."""

from flashmsg.flash.errors import FlashRedirect, RedirectNotConfigured
from flashmsg.flash.manager import FlashMessages
from flashmsg.flash.messages import (
    DEFAULT_TYPE,
    SESSION_KEY,
    Empty,
    Messages,
    MessageType,
    Queued,
    Rejected,
)
from flashmsg.flash.presentation import FlashConfig, FlashConfigBuilder
from flashmsg.flash.sanitize import HtmlSanitizer, Sanitizer, passthrough

__all__ = [
    "DEFAULT_TYPE",
    "SESSION_KEY",
    "Empty",
    "FlashConfig",
    "FlashConfigBuilder",
    "FlashMessages",
    "FlashRedirect",
    "HtmlSanitizer",
    "Messages",
    "MessageType",
    "Queued",
    "RedirectNotConfigured",
    "Rejected",
    "Sanitizer",
    "passthrough",
]
