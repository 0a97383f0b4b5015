"""Translate profile manager payloads into domain models and back."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from wenet_common.domain.model import (
    CommunityMember,
    CommunityProfile,
    Competence,
    Material,
    Meaning,
    PlannedActivity,
    RelevantLocation,
    Routine,
    SocialPractice,
    UserProfile,
)

from .schema import (
    CommunityMemberPayload,
    CommunityProfilePayload,
    CompetencePayload,
    MaterialPayload,
    MeaningPayload,
    PlannedActivityPayload,
    RelevantLocationPayload,
    RoutinePayload,
    SocialPracticePayload,
    UserProfilePayload,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from pydantic import BaseModel


def _translate_list[P, T](payloads: list[P] | None, translate: Callable[[P], T]) -> list[T] | None:
    if payloads is None:
        return None
    return [translate(payload) for payload in payloads]


def _fields(payload: BaseModel) -> dict[str, Any]:
    return {name: getattr(payload, name) for name in type(payload).model_fields}


def _material(payload: MaterialPayload) -> Material:
    return Material(**_fields(payload))


def _competence(payload: CompetencePayload) -> Competence:
    return Competence(**_fields(payload))


def _meaning(payload: MeaningPayload) -> Meaning:
    return Meaning(**_fields(payload))


def _planned_activity(payload: PlannedActivityPayload) -> PlannedActivity:
    return PlannedActivity(**_fields(payload))


def _relevant_location(payload: RelevantLocationPayload) -> RelevantLocation:
    return RelevantLocation(**_fields(payload))


def _routine(payload: RoutinePayload) -> Routine:
    return Routine(**_fields(payload))


def _member(payload: CommunityMemberPayload) -> CommunityMember:
    return CommunityMember(**_fields(payload))


def _social_practice(payload: SocialPracticePayload) -> SocialPractice:
    return SocialPractice(
        id=payload.id,
        label=payload.label,
        materials=_translate_list(payload.materials, _material),
        competences=_translate_list(payload.competences, _competence),
        norms=payload.norms,
    )


def profile_from_payload(payload: Mapping[str, object]) -> UserProfile:
    document = UserProfilePayload.model_validate(payload)
    return UserProfile(
        id=document.id,
        name=document.name,
        date_of_birth=document.date_of_birth,
        gender=document.gender,
        email=document.email,
        locale=document.locale,
        phone_number=document.phone_number,
        avatar=document.avatar,
        nationality=document.nationality,
        occupation=document.occupation,
        has_locations=document.has_locations,
        norms=document.norms,
        planned_activities=_translate_list(document.planned_activities, _planned_activity),
        relevant_locations=_translate_list(document.relevant_locations, _relevant_location),
        relationships=document.relationships,
        personal_behaviors=_translate_list(document.personal_behaviors, _routine),
        materials=_translate_list(document.materials, _material),
        competences=_translate_list(document.competences, _competence),
        meanings=_translate_list(document.meanings, _meaning),
        creation_ts=document.creation_ts,
        last_update_ts=document.last_update_ts,
    )


def community_from_payload(payload: Mapping[str, object]) -> CommunityProfile:
    document = CommunityProfilePayload.model_validate(payload)
    return CommunityProfile(
        id=document.id,
        app_id=document.app_id,
        name=document.name,
        description=document.description,
        keywords=document.keywords,
        members=_translate_list(document.members, _member),
        social_practices=_translate_list(document.social_practices, _social_practice),
        norms=document.norms,
        task_type_ids=document.task_type_ids,
        creation_ts=document.creation_ts,
        last_update_ts=document.last_update_ts,
    )


def profile_to_payload(profile: UserProfile) -> dict[str, object]:
    document = UserProfilePayload.model_validate(asdict(profile))
    return document.model_dump(mode="json", by_alias=True, exclude_none=True)


def community_to_payload(community: CommunityProfile) -> dict[str, object]:
    document = CommunityProfilePayload.model_validate(asdict(community))
    return document.model_dump(mode="json", by_alias=True, exclude_none=True)
