"""Validation failures raised while checking or merging models."""

from __future__ import annotations


class ValidationError(ValueError):
    """A model value is not acceptable.

    ``code`` is the dotted path of the offending value (for example
    ``profile.materials.1.quantity``) and is what clients receive.
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message

    def as_payload(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}


class UndefinedReferenceError(ValidationError):
    """An incoming element names an identity that the stored list does not contain."""


class DuplicatedIdentityError(UndefinedReferenceError):
    """An incoming element repeats an identity already used earlier in the same list."""
