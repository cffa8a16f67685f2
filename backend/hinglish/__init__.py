"""Hinglish Translator - context-aware translation pipeline."""

__version__ = "0.1.0"
