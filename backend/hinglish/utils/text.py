"""Text utilities for deciding what to translate."""

import re

_DIGITS_ONLY = re.compile(r"[0-9]+")


def is_translatable_text(text: str) -> bool:
    """Check whether text is worth sending to the translation pipeline.

    Skips:
    1. Empty and single-character strings
    2. Pure digit strings
    3. Strings that look like serialized data (wrapped in {} or [])

    Args:
        text: Candidate text

    Returns:
        True if the text should be translated
    """
    if not text or len(text) < 2 or _DIGITS_ONLY.fullmatch(text):
        return False

    if text.startswith("{") and text.endswith("}"):
        return False
    if text.startswith("[") and text.endswith("]"):
        return False

    return True
