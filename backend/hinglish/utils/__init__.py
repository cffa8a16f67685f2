"""Utility modules for the hinglish backend."""

from .text import is_translatable_text

__all__ = ["is_translatable_text"]
