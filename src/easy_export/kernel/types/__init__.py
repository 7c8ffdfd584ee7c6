"""Kernel types – value objects."""
from easy_export.kernel.types.slug import Slug

__all__ = ["Slug"]
