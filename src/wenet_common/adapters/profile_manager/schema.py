"""JSON documents exchanged with the profile manager.

Field names follow the wire format (camelCase). List fields default to ``None``
so that "not sent" and "sent empty" stay distinguishable in a partial update.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from wenet_common.domain.model.enums import PlannedActivityStatus

log = logging.getLogger(__name__)


class WeNetBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning(
            "WeNet %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class PlannedActivityPayload(WeNetBaseModel):
    id: str | None = None
    start_time: str | None = Field(default=None, alias="startTime")
    end_time: str | None = Field(default=None, alias="endTime")
    description: str | None = None
    attendees: list[str] | None = None
    status: PlannedActivityStatus | None = None


class RelevantLocationPayload(WeNetBaseModel):
    id: str | None = None
    label: str | None = None
    latitude: float | None = None
    longitude: float | None = None


class RoutinePayload(WeNetBaseModel):
    user_id: str | None = None
    weekday: str | None = None
    label_distribution: dict[str, object] | None = None
    confidence: float | None = None


class MaterialPayload(WeNetBaseModel):
    name: str | None = None
    description: str | None = None
    quantity: int | None = None
    classification: str | None = None


class CompetencePayload(WeNetBaseModel):
    name: str | None = None
    ontology: str | None = None
    level: float | None = None


class MeaningPayload(WeNetBaseModel):
    name: str | None = None
    category: str | None = None
    level: float | None = None


class CommunityMemberPayload(WeNetBaseModel):
    user_id: str | None = Field(default=None, alias="userId")
    privileges: list[str] | None = None
    creation_ts: int | None = Field(default=None, alias="_creationTs")
    last_update_ts: int | None = Field(default=None, alias="_lastUpdateTs")


class SocialPracticePayload(WeNetBaseModel):
    id: str | None = None
    label: str | None = None
    materials: list[MaterialPayload] | None = None
    competences: list[CompetencePayload] | None = None
    norms: list[dict[str, object]] | None = None


class UserProfilePayload(WeNetBaseModel):
    id: str | None = None
    name: dict[str, object] | None = None
    date_of_birth: dict[str, object] | None = Field(default=None, alias="dateOfBirth")
    gender: str | None = None
    email: str | None = None
    locale: str | None = None
    phone_number: str | None = Field(default=None, alias="phoneNumber")
    avatar: str | None = None
    nationality: str | None = None
    occupation: str | None = None
    has_locations: bool | None = Field(default=None, alias="hasLocations")
    norms: list[dict[str, object]] | None = None
    planned_activities: list[PlannedActivityPayload] | None = Field(
        default=None, alias="plannedActivities"
    )
    relevant_locations: list[RelevantLocationPayload] | None = Field(
        default=None, alias="relevantLocations"
    )
    relationships: list[dict[str, object]] | None = None
    personal_behaviors: list[RoutinePayload] | None = Field(
        default=None, alias="personalBehaviors"
    )
    materials: list[MaterialPayload] | None = None
    competences: list[CompetencePayload] | None = None
    meanings: list[MeaningPayload] | None = None
    creation_ts: int | None = Field(default=None, alias="_creationTs")
    last_update_ts: int | None = Field(default=None, alias="_lastUpdateTs")


class CommunityProfilePayload(WeNetBaseModel):
    id: str | None = None
    app_id: str | None = Field(default=None, alias="appId")
    name: str | None = None
    description: str | None = None
    keywords: list[str] | None = None
    members: list[CommunityMemberPayload] | None = None
    social_practices: list[SocialPracticePayload] | None = Field(
        default=None, alias="socialPractices"
    )
    norms: list[dict[str, object]] | None = None
    task_type_ids: list[str] | None = Field(default=None, alias="taskTypeIds")
    creation_ts: int | None = Field(default=None, alias="_creationTs")
    last_update_ts: int | None = Field(default=None, alias="_lastUpdateTs")
