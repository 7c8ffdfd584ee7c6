"""Kernel – framework-agnostic building blocks."""

from easy_export.kernel.errors import ApplicationError, BaseError, DomainError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ValidationError",
]
