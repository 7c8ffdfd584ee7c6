"""Observability – structured logging ports and helpers."""
from easy_export.observability.logging.protocol import Logger
from easy_export.observability.logging.processors import get_logger

__all__ = [
    "Logger",
    "get_logger",
]
