"""Application services."""

from .format_service import FormatRequest, FormatService

__all__ = ["FormatRequest", "FormatService"]
