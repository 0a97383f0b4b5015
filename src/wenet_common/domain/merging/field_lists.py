"""Merge helpers for the list fields of profiles and communities."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .identity import (
    COMMUNITY_MEMBER_IDENTITY,
    COMPETENCE_IDENTITY,
    MATERIAL_IDENTITY,
    MEANING_IDENTITY,
    PLANNED_ACTIVITY_IDENTITY,
    RELEVANT_LOCATION_IDENTITY,
    ROUTINE_IDENTITY,
    SOCIAL_PRACTICE_IDENTITY,
)
from .reconcile import merge_field_list

if TYPE_CHECKING:
    from collections.abc import Sequence

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
    from wenet_common.domain.validation import ValidateContext

    from .reconcile import FieldBinder


def set_field[M, T](name: str) -> FieldBinder[M, T]:
    """Binder that stores the merged list on attribute ``name`` of the model."""

    def bind(model: M, values: list[T] | None) -> M:
        setattr(model, name, values)
        return model

    return bind


async def merge_planned_activities[M](
    model: M,
    stored: list[PlannedActivity] | None,
    incoming: Sequence[PlannedActivity] | None,
    *,
    code_prefix: str,
    context: ValidateContext,
    bind: FieldBinder[M, PlannedActivity],
) -> M:
    return await merge_field_list(
        model,
        stored,
        incoming,
        code_prefix=code_prefix,
        policy=PLANNED_ACTIVITY_IDENTITY,
        bind=bind,
        context=context,
    )


async def merge_relevant_locations[M](
    model: M,
    stored: list[RelevantLocation] | None,
    incoming: Sequence[RelevantLocation] | None,
    *,
    code_prefix: str,
    context: ValidateContext,
    bind: FieldBinder[M, RelevantLocation],
) -> M:
    return await merge_field_list(
        model,
        stored,
        incoming,
        code_prefix=code_prefix,
        policy=RELEVANT_LOCATION_IDENTITY,
        bind=bind,
        context=context,
    )


async def merge_social_practices[M](
    model: M,
    stored: list[SocialPractice] | None,
    incoming: Sequence[SocialPractice] | None,
    *,
    code_prefix: str,
    context: ValidateContext,
    bind: FieldBinder[M, SocialPractice],
) -> M:
    return await merge_field_list(
        model,
        stored,
        incoming,
        code_prefix=code_prefix,
        policy=SOCIAL_PRACTICE_IDENTITY,
        bind=bind,
        context=context,
    )


async def merge_materials[M](
    model: M,
    stored: list[Material] | None,
    incoming: Sequence[Material] | None,
    *,
    code_prefix: str,
    context: ValidateContext,
    bind: FieldBinder[M, Material],
) -> M:
    return await merge_field_list(
        model,
        stored,
        incoming,
        code_prefix=code_prefix,
        policy=MATERIAL_IDENTITY,
        bind=bind,
        context=context,
    )


async def merge_competences[M](
    model: M,
    stored: list[Competence] | None,
    incoming: Sequence[Competence] | None,
    *,
    code_prefix: str,
    context: ValidateContext,
    bind: FieldBinder[M, Competence],
) -> M:
    return await merge_field_list(
        model,
        stored,
        incoming,
        code_prefix=code_prefix,
        policy=COMPETENCE_IDENTITY,
        bind=bind,
        context=context,
    )


async def merge_meanings[M](
    model: M,
    stored: list[Meaning] | None,
    incoming: Sequence[Meaning] | None,
    *,
    code_prefix: str,
    context: ValidateContext,
    bind: FieldBinder[M, Meaning],
) -> M:
    return await merge_field_list(
        model,
        stored,
        incoming,
        code_prefix=code_prefix,
        policy=MEANING_IDENTITY,
        bind=bind,
        context=context,
    )


async def merge_routines[M](
    model: M,
    stored: list[Routine] | None,
    incoming: Sequence[Routine] | None,
    *,
    code_prefix: str,
    context: ValidateContext,
    bind: FieldBinder[M, Routine],
) -> M:
    # routines have no identity: incoming routines are always appended
    return await merge_field_list(
        model,
        stored,
        incoming,
        code_prefix=code_prefix,
        policy=ROUTINE_IDENTITY,
        bind=bind,
        context=context,
    )


async def merge_members[M](
    model: M,
    stored: list[CommunityMember] | None,
    incoming: Sequence[CommunityMember] | None,
    *,
    code_prefix: str,
    context: ValidateContext,
    bind: FieldBinder[M, CommunityMember],
) -> M:
    return await merge_field_list(
        model,
        stored,
        incoming,
        code_prefix=code_prefix,
        policy=COMMUNITY_MEMBER_IDENTITY,
        bind=bind,
        context=context,
    )
