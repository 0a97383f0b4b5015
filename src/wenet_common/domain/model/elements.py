"""Elements of the list fields of a user profile.

Each element validates itself against a :class:`ValidateContext` (normalizing
values in place) and merges an incoming partial element into a new element:
incoming values that are not ``None`` win, stored values fill the gaps, and the
stored identity is kept. Merged elements are validated before being returned.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wenet_common.domain.merging.values import merge_mappings, merge_values
from wenet_common.domain.model.base import new_id

if TYPE_CHECKING:
    from wenet_common.domain.model.enums import PlannedActivityStatus
    from wenet_common.domain.validation import ValidateContext


@dataclass(slots=True, kw_only=True)
class PlannedActivity:
    id: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    description: str | None = None
    attendees: list[str] | None = None
    status: PlannedActivityStatus | None = None

    async def validate(self, context: ValidateContext) -> None:
        self.id = context.normalize_string(self.id) or new_id()
        self.start_time = context.validate_nullable_instant("startTime", self.start_time)
        self.end_time = context.validate_nullable_instant("endTime", self.end_time)
        self.description = context.normalize_string(self.description)
        self.attendees = await context.validate_defined_profile_ids("attendees", self.attendees)

    async def merge(self, source: PlannedActivity, context: ValidateContext) -> PlannedActivity:
        merged = PlannedActivity(
            id=self.id,
            start_time=merge_values(self.start_time, source.start_time),
            end_time=merge_values(self.end_time, source.end_time),
            description=merge_values(self.description, source.description),
            attendees=merge_values(self.attendees, source.attendees),
            status=merge_values(self.status, source.status),
        )
        await merged.validate(context)
        return merged


@dataclass(slots=True, kw_only=True)
class RelevantLocation:
    id: str | None = None
    label: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    async def validate(self, context: ValidateContext) -> None:
        self.id = context.normalize_string(self.id) or new_id()
        self.label = context.normalize_string(self.label)
        context.validate_number_on_range("latitude", self.latitude, -90.0, 90.0)
        context.validate_number_on_range("longitude", self.longitude, -180.0, 180.0)

    async def merge(self, source: RelevantLocation, context: ValidateContext) -> RelevantLocation:
        merged = RelevantLocation(
            id=self.id,
            label=merge_values(self.label, source.label),
            latitude=merge_values(self.latitude, source.latitude),
            longitude=merge_values(self.longitude, source.longitude),
        )
        await merged.validate(context)
        return merged


@dataclass(slots=True, kw_only=True)
class Routine:
    """Weekly behaviour of a user: scored labels per time slot."""

    user_id: str | None = None
    weekday: str | None = None
    label_distribution: dict[str, object] | None = None
    confidence: float | None = None

    async def validate(self, context: ValidateContext) -> None:
        self.user_id = await context.validate_defined_profile_id("user_id", self.user_id)
        self.weekday = context.validate_string_field("weekday", self.weekday)
        if self.label_distribution is None:
            raise context.fail_field("label_distribution", "The 'label_distribution' can not be null.")
        for slot, scored_labels in self.label_distribution.items():
            _validate_scored_labels(context, f"label_distribution.{slot}", scored_labels)
        if self.confidence is None:
            raise context.fail_field("confidence", "The 'confidence' can not be null.")

    async def merge(self, source: Routine, context: ValidateContext) -> Routine:
        merged = Routine(
            user_id=merge_values(self.user_id, source.user_id),
            weekday=merge_values(self.weekday, source.weekday),
            label_distribution=merge_mappings(self.label_distribution, source.label_distribution),
            confidence=merge_values(self.confidence, source.confidence),
        )
        await merged.validate(context)
        return merged


def _validate_scored_labels(context: ValidateContext, name: str, scored_labels: object) -> None:
    if not isinstance(scored_labels, list):
        raise context.fail_field(name, "Does not contains an array of scored labels.")
    names: list[str] = []
    for index, scored_label in enumerate(scored_labels):  # pyright: ignore[reportUnknownVariableType,reportUnknownArgumentType]
        code = f"{name}.{index}"
        if not isinstance(scored_label, Mapping):
            raise context.fail_field(code, "Is not a scored label.")
        label = scored_label.get("label")  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
        label_name = label.get("name") if isinstance(label, Mapping) else None  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
        if not isinstance(label_name, str) or not label_name.strip():
            raise context.fail_field(f"{code}.label.name", "The label name can not be empty.")
        if label_name in names:
            raise context.fail_field(
                f"{code}.label.name",
                f"The label '{label_name}' is already defined at {names.index(label_name)}.",
            )
        score = scored_label.get("score")  # pyright: ignore[reportUnknownMemberType,reportUnknownVariableType]
        if isinstance(score, bool) or not isinstance(score, int | float):
            raise context.fail_field(f"{code}.score", "The score must be a number.")
        names.append(label_name)


@dataclass(slots=True, kw_only=True)
class Material:
    name: str | None = None
    description: str | None = None
    quantity: int | None = None
    classification: str | None = None

    async def validate(self, context: ValidateContext) -> None:
        self.name = context.validate_string_field("name", self.name)
        self.description = context.normalize_string(self.description)
        context.validate_number_on_range("quantity", self.quantity, 1, None)
        self.classification = context.validate_string_field("classification", self.classification)

    async def merge(self, source: Material, context: ValidateContext) -> Material:
        merged = Material(
            name=merge_values(self.name, source.name),
            description=merge_values(self.description, source.description),
            quantity=merge_values(self.quantity, source.quantity),
            classification=merge_values(self.classification, source.classification),
        )
        await merged.validate(context)
        return merged


@dataclass(slots=True, kw_only=True)
class Competence:
    name: str | None = None
    ontology: str | None = None
    level: float | None = None

    async def validate(self, context: ValidateContext) -> None:
        self.name = context.validate_string_field("name", self.name)
        self.ontology = context.validate_string_field("ontology", self.ontology)
        context.validate_number_on_range("level", self.level, 0.0, 1.0)

    async def merge(self, source: Competence, context: ValidateContext) -> Competence:
        merged = Competence(
            name=merge_values(self.name, source.name),
            ontology=merge_values(self.ontology, source.ontology),
            level=merge_values(self.level, source.level),
        )
        await merged.validate(context)
        return merged


@dataclass(slots=True, kw_only=True)
class Meaning:
    name: str | None = None
    category: str | None = None
    level: float | None = None

    async def validate(self, context: ValidateContext) -> None:
        self.name = context.validate_string_field("name", self.name)
        self.category = context.validate_string_field("category", self.category)
        context.validate_number_on_range("level", self.level, None, None, nullable=False)

    async def merge(self, source: Meaning, context: ValidateContext) -> Meaning:
        merged = Meaning(
            name=merge_values(self.name, source.name),
            category=merge_values(self.category, source.category),
            level=merge_values(self.level, source.level),
        )
        await merged.validate(context)
        return merged
