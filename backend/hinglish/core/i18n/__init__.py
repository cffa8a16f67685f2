"""Localized user-facing messages."""

from .catalog import DEFAULT_LOCALE, MessageCatalog, load_messages

__all__ = ["DEFAULT_LOCALE", "MessageCatalog", "load_messages"]
