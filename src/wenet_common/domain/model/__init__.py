"""Public domain model surface."""

from __future__ import annotations

from wenet_common.domain.model.base import new_id
from wenet_common.domain.model.community import CommunityMember, CommunityProfile, SocialPractice
from wenet_common.domain.model.elements import (
    Competence,
    Material,
    Meaning,
    PlannedActivity,
    RelevantLocation,
    Routine,
)
from wenet_common.domain.model.enums import Gender, PlannedActivityStatus
from wenet_common.domain.model.profile import GENDERS, UserProfile

__all__ = [  # noqa: RUF022
    # owning entities
    "UserProfile",
    "CommunityProfile",
    # list elements
    "PlannedActivity",
    "RelevantLocation",
    "Routine",
    "Material",
    "Competence",
    "Meaning",
    "CommunityMember",
    "SocialPractice",
    # enums
    "Gender",
    "GENDERS",
    "PlannedActivityStatus",
    # helpers
    "new_id",
]
