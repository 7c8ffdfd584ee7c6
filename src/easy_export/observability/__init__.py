"""Observability – structured logging."""

from easy_export.observability.logging import Logger, get_logger

__all__ = ["Logger", "get_logger"]
