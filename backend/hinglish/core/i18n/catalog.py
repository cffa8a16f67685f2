"""Localized message catalog.

Messages live in ``_locales/<locale>/messages.json`` using the browser
extension layout: ``{"key": {"message": "...", "description": "..."}}``.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).parent / "_locales"
DEFAULT_LOCALE = "en"


@lru_cache(maxsize=None)
def load_messages(locale: str, locales_dir: Path = LOCALES_DIR) -> Dict[str, str]:
    """Load the key -> message mapping for a locale.

    Returns an empty mapping if the locale has no messages file.
    """
    path = locales_dir / locale / "messages.json"
    if not path.exists():
        logger.warning("No messages file for locale %s", locale)
        return {}

    with path.open(encoding="utf-8") as f:
        raw = json.load(f)
    return {key: entry["message"] for key, entry in raw.items()}


class MessageCatalog:
    """Looks up user-facing messages by key.

    Lookup order: requested locale, default locale, then the key itself.
    """

    def __init__(self, locale: str = DEFAULT_LOCALE, locales_dir: Path = LOCALES_DIR):
        self.locale = locale
        self.locales_dir = locales_dir

    def get_message(self, key: str, locale: Optional[str] = None) -> str:
        for candidate in (locale or self.locale, DEFAULT_LOCALE):
            messages = load_messages(candidate, self.locales_dir)
            if key in messages:
                return messages[key]
        return key
