"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    └── ApplicationError     (application.py)
        └── ExportError      (easy_export.application.export.errors)
"""

from easy_export.kernel.errors.application import ApplicationError
from easy_export.kernel.errors.base import BaseError
from easy_export.kernel.errors.domain import DomainError, ValidationError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ValidationError",
]
