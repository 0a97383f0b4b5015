"""User profile model."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wenet_common.domain.merging.field_lists import (
    merge_competences,
    merge_materials,
    merge_meanings,
    merge_planned_activities,
    merge_relevant_locations,
    merge_routines,
    set_field,
)
from wenet_common.domain.merging.identity import (
    COMPETENCE_IDENTITY,
    MATERIAL_IDENTITY,
    MEANING_IDENTITY,
    PLANNED_ACTIVITY_IDENTITY,
    RELEVANT_LOCATION_IDENTITY,
)
from wenet_common.domain.merging.values import merge_values
from wenet_common.domain.model.enums import Gender

if TYPE_CHECKING:
    from wenet_common.domain.model.elements import (
        Competence,
        Material,
        Meaning,
        PlannedActivity,
        RelevantLocation,
        Routine,
    )
    from wenet_common.domain.validation import ValidateContext

GENDERS = tuple(gender.value for gender in Gender)
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(slots=True, kw_only=True)
class UserProfile:
    id: str | None = None
    name: dict[str, object] | None = None
    date_of_birth: dict[str, object] | None = None
    gender: str | None = None
    email: str | None = None
    locale: str | None = None
    phone_number: str | None = None
    avatar: str | None = None
    nationality: str | None = None
    occupation: str | None = None
    has_locations: bool | None = None
    norms: list[dict[str, object]] | None = None
    planned_activities: list[PlannedActivity] | None = None
    relevant_locations: list[RelevantLocation] | None = None
    relationships: list[dict[str, object]] | None = None
    personal_behaviors: list[Routine] | None = None
    materials: list[Material] | None = None
    competences: list[Competence] | None = None
    meanings: list[Meaning] | None = None
    creation_ts: int | None = None
    last_update_ts: int | None = None

    async def validate(self, context: ValidateContext) -> None:
        self._validate_fields(context)
        await context.validate_list_field(
            "plannedActivities", self.planned_activities, PLANNED_ACTIVITY_IDENTITY.same_identity
        )
        await context.validate_list_field(
            "relevantLocations", self.relevant_locations, RELEVANT_LOCATION_IDENTITY.same_identity
        )
        await context.validate_list_field("personalBehaviors", self.personal_behaviors)
        await context.validate_list_field(
            "materials", self.materials, MATERIAL_IDENTITY.same_identity
        )
        await context.validate_list_field(
            "competences", self.competences, COMPETENCE_IDENTITY.same_identity
        )
        await context.validate_list_field("meanings", self.meanings, MEANING_IDENTITY.same_identity)

    def _validate_fields(self, context: ValidateContext) -> None:
        self.gender = context.validate_nullable_string_field("gender", self.gender, GENDERS)
        self.email = context.normalize_string(self.email)
        if self.email is not None and not _EMAIL_PATTERN.match(self.email):
            raise context.fail_field("email", f"The '{self.email}' is not a valid email.")
        self.locale = context.normalize_string(self.locale)
        self.phone_number = context.normalize_string(self.phone_number)
        self.avatar = context.normalize_string(self.avatar)
        self.nationality = context.normalize_string(self.nationality)
        self.occupation = context.normalize_string(self.occupation)

    async def merge(self, source: UserProfile, context: ValidateContext) -> UserProfile:
        """Merge a partial profile into this one.

        Scalar fields are taken from ``source`` when set; ``name`` and
        ``date_of_birth`` are merged key by key while ``norms`` and
        ``relationships`` are replaced as a whole. The element list fields are
        reconciled one after the other (planned activities, relevant locations,
        personal behaviours, materials, competences, meanings); the first failing
        field aborts the merge. The stored ``id`` and timestamps are kept.
        """

        merged = UserProfile(
            id=self.id,
            name=merge_values(self.name, source.name),
            date_of_birth=merge_values(self.date_of_birth, source.date_of_birth),
            gender=merge_values(self.gender, source.gender),
            email=merge_values(self.email, source.email),
            locale=merge_values(self.locale, source.locale),
            phone_number=merge_values(self.phone_number, source.phone_number),
            avatar=merge_values(self.avatar, source.avatar),
            nationality=merge_values(self.nationality, source.nationality),
            occupation=merge_values(self.occupation, source.occupation),
            has_locations=merge_values(self.has_locations, source.has_locations),
            norms=merge_values(self.norms, source.norms),
            relationships=merge_values(self.relationships, source.relationships),
            creation_ts=self.creation_ts,
            last_update_ts=self.last_update_ts,
        )
        merged._validate_fields(context)
        merged = await merge_planned_activities(
            merged,
            self.planned_activities,
            source.planned_activities,
            code_prefix=context.field_code("plannedActivities"),
            context=context,
            bind=set_field("planned_activities"),
        )
        merged = await merge_relevant_locations(
            merged,
            self.relevant_locations,
            source.relevant_locations,
            code_prefix=context.field_code("relevantLocations"),
            context=context,
            bind=set_field("relevant_locations"),
        )
        merged = await merge_routines(
            merged,
            self.personal_behaviors,
            source.personal_behaviors,
            code_prefix=context.field_code("personalBehaviors"),
            context=context,
            bind=set_field("personal_behaviors"),
        )
        merged = await merge_materials(
            merged,
            self.materials,
            source.materials,
            code_prefix=context.field_code("materials"),
            context=context,
            bind=set_field("materials"),
        )
        merged = await merge_competences(
            merged,
            self.competences,
            source.competences,
            code_prefix=context.field_code("competences"),
            context=context,
            bind=set_field("competences"),
        )
        return await merge_meanings(
            merged,
            self.meanings,
            source.meanings,
            code_prefix=context.field_code("meanings"),
            context=context,
            bind=set_field("meanings"),
        )
