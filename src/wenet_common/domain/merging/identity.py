"""Identity policies: how elements of a list field are matched across lists.

A policy answers two questions about list elements:

- ``has_identity(incoming)``: does the incoming element refer to an existing
  element rather than describe a new one?
- ``same_identity(stored, incoming)``: do both elements denote the same entity?

``same_identity`` is only asked when ``has_identity(incoming)`` is true.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wenet_common.domain.model import (
        CommunityMember,
        Competence,
        Material,
        Meaning,
        PlannedActivity,
        RelevantLocation,
        Routine,
        SocialPractice,
    )

type IdentityKey = tuple[Hashable, ...]


class IdentityPolicy[T](ABC):
    """Decide whether list elements carry an identity and whether two of them match."""

    @abstractmethod
    def has_identity(self, element: T) -> bool: ...

    @abstractmethod
    def same_identity(self, stored: T, incoming: T) -> bool: ...

    def describe(self, element: T) -> str:
        """Human readable identity of ``element`` for error messages."""
        return repr(element)


class KeyedIdentityPolicy[T](IdentityPolicy[T]):
    """Identity given by a tuple of attributes; absent if any of them is ``None``."""

    def __init__(self, *attributes: str) -> None:
        if not attributes:
            raise ValueError("a keyed identity needs at least one attribute")
        self.attributes = attributes

    def key(self, element: T) -> IdentityKey | None:
        values = tuple(getattr(element, name) for name in self.attributes)
        if any(value is None for value in values):
            return None
        return values

    def has_identity(self, element: T) -> bool:
        return self.key(element) is not None

    def same_identity(self, stored: T, incoming: T) -> bool:
        stored_key = self.key(stored)
        return stored_key is not None and stored_key == self.key(incoming)

    def describe(self, element: T) -> str:
        return ", ".join(
            f"{name}={getattr(element, name)!r}" for name in self.attributes
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self.attributes)})"


class NoIdentityPolicy[T](IdentityPolicy[T]):
    """Elements never carry an identity: every incoming element is new."""

    def has_identity(self, element: T) -> bool:
        return False

    def same_identity(self, stored: T, incoming: T) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


PLANNED_ACTIVITY_IDENTITY: KeyedIdentityPolicy[PlannedActivity] = KeyedIdentityPolicy("id")
RELEVANT_LOCATION_IDENTITY: KeyedIdentityPolicy[RelevantLocation] = KeyedIdentityPolicy("id")
SOCIAL_PRACTICE_IDENTITY: KeyedIdentityPolicy[SocialPractice] = KeyedIdentityPolicy("id")
MATERIAL_IDENTITY: KeyedIdentityPolicy[Material] = KeyedIdentityPolicy("name", "classification")
COMPETENCE_IDENTITY: KeyedIdentityPolicy[Competence] = KeyedIdentityPolicy("name", "ontology")
MEANING_IDENTITY: KeyedIdentityPolicy[Meaning] = KeyedIdentityPolicy("name", "category")
COMMUNITY_MEMBER_IDENTITY: KeyedIdentityPolicy[CommunityMember] = KeyedIdentityPolicy("user_id")
ROUTINE_IDENTITY: NoIdentityPolicy[Routine] = NoIdentityPolicy()
