"""API v1 routes."""

from . import translation

__all__ = ["translation"]
