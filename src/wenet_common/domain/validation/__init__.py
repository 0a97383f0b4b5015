"""Validation errors and the per-request validation context."""

from __future__ import annotations

from .context import ProfileDirectory, Validable, ValidateContext
from .errors import DuplicatedIdentityError, UndefinedReferenceError, ValidationError

__all__ = [
    "DuplicatedIdentityError",
    "ProfileDirectory",
    "UndefinedReferenceError",
    "Validable",
    "ValidateContext",
    "ValidationError",
]
