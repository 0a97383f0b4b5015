"""Validation context shared by every model check of one request.

The context carries the error code of the value being checked, the optional
profile directory used to confirm referenced user ids, and the list merge
settings. Child contexts created with :meth:`ValidateContext.with_code` share
the cache of confirmed profile ids, so one profile is looked up at most once
per request.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from wenet_common.config.merge import EmptyListPolicy

from .errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

log = getLogger(__name__)


class ProfileDirectory(Protocol):
    """Answers whether a user profile exists."""

    async def profile_exists(self, profile_id: str) -> bool: ...


class Validable(Protocol):
    async def validate(self, context: ValidateContext) -> None: ...


@dataclass(frozen=True, slots=True)
class ValidateContext:
    error_code: str
    profiles: ProfileDirectory | None = None
    empty_list_policy: EmptyListPolicy = EmptyListPolicy.KEEP
    known_profile_ids: set[str] = field(default_factory=set[str])

    def with_code(self, error_code: str) -> ValidateContext:
        return replace(self, error_code=error_code)

    def field_code(self, name: str) -> str:
        return f"{self.error_code}.{name}"

    def fail_field(self, name: str, message: str) -> ValidationError:
        return ValidationError(self.field_code(name), message)

    @staticmethod
    def normalize_string(value: str | None) -> str | None:
        if value is None:
            return None
        stripped = value.strip()
        return stripped or None

    def validate_string_field(self, name: str, value: str | None) -> str:
        normalized = self.normalize_string(value)
        if normalized is None:
            raise self.fail_field(name, f"The '{name}' can not be empty.")
        return normalized

    def validate_nullable_string_field(
        self,
        name: str,
        value: str | None,
        allowed: Sequence[str] | None = None,
    ) -> str | None:
        normalized = self.normalize_string(value)
        if normalized is not None and allowed is not None and normalized not in allowed:
            raise self.fail_field(
                name, f"The '{normalized}' is not a valid value, expected one of {list(allowed)}."
            )
        return normalized

    def validate_number_on_range(
        self,
        name: str,
        value: float | None,
        minimum: float | None,
        maximum: float | None,
        *,
        nullable: bool = True,
    ) -> None:
        if value is None:
            if not nullable:
                raise self.fail_field(name, f"You must to define a '{name}'.")
            return
        if minimum is not None and value < minimum:
            raise self.fail_field(name, f"The '{name}' can not be less than {minimum}.")
        if maximum is not None and value > maximum:
            raise self.fail_field(name, f"The '{name}' can not be greater than {maximum}.")

    def validate_nullable_instant(self, name: str, value: str | None) -> str | None:
        normalized = self.normalize_string(value)
        if normalized is None:
            return None
        try:
            parsed = datetime.fromisoformat(normalized)
        except ValueError:
            raise self.fail_field(
                name, f"The '{normalized}' is not a valid ISO-8601 instant."
            ) from None
        if parsed.tzinfo is None:
            raise self.fail_field(name, f"The '{normalized}' has no time zone.")
        return normalized

    def validate_nullable_string_list(
        self, name: str, values: list[str] | None
    ) -> list[str] | None:
        if values is None:
            return None
        normalized: list[str] = []
        for index, value in enumerate(values):
            normalized.append(self.validate_string_field(f"{name}.{index}", value))
        return normalized

    async def validate_defined_profile_id(self, name: str, profile_id: str | None) -> str:
        normalized = self.validate_string_field(name, profile_id)
        await self._require_profile(self.field_code(name), normalized)
        return normalized

    async def validate_defined_profile_ids(
        self, name: str, profile_ids: list[str] | None
    ) -> list[str] | None:
        if profile_ids is None:
            return None
        validated: list[str] = []
        for index, profile_id in enumerate(profile_ids):
            normalized = self.validate_string_field(f"{name}.{index}", profile_id)
            if normalized in validated:
                raise self.fail_field(
                    f"{name}.{index}",
                    f"The profile '{normalized}' is already defined at "
                    f"{validated.index(normalized)}.",
                )
            await self._require_profile(self.field_code(f"{name}.{index}"), normalized)
            validated.append(normalized)
        return validated

    async def validate_list_field[T: Validable](
        self,
        name: str,
        elements: Iterable[T] | None,
        same: Callable[[T, T], bool] | None = None,
    ) -> None:
        """Validate each element at ``<name>.<index>`` and reject repeated elements."""

        if elements is None:
            return
        seen: list[T] = []
        for index, element in enumerate(elements):
            code = self.field_code(f"{name}.{index}")
            if same is not None:
                for position, previous in enumerate(seen):
                    if same(previous, element):
                        raise ValidationError(code, f"The element is already defined at {position}.")
            await element.validate(self.with_code(code))
            seen.append(element)

    async def _require_profile(self, code: str, profile_id: str) -> None:
        if profile_id in self.known_profile_ids:
            return
        if self.profiles is None:
            log.debug("No profile directory configured, skipping check of %s", profile_id)
            return
        if not await self.profiles.profile_exists(profile_id):
            raise ValidationError(code, f"The profile '{profile_id}' is not defined.")
        self.known_profile_ids.add(profile_id)
