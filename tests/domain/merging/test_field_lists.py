from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest

from tests.helpers.profiles import (
    make_activity,
    make_competence,
    make_location,
    make_material,
    make_meaning,
    make_routine,
)
from wenet_common.domain.merging import (
    merge_competences,
    merge_materials,
    merge_meanings,
    merge_members,
    merge_planned_activities,
    merge_relevant_locations,
    merge_routines,
    merge_social_practices,
    set_field,
)
from wenet_common.domain.model import (
    CommunityMember,
    CommunityProfile,
    Competence,
    Meaning,
    RelevantLocation,
    SocialPractice,
    UserProfile,
)
from wenet_common.domain.validation import UndefinedReferenceError, ValidationError

if TYPE_CHECKING:
    from wenet_common.domain.validation import ValidateContext


def test_planned_activities_adapter_binds_field(context: ValidateContext) -> None:
    profile = UserProfile(id="p1")

    asyncio.run(
        merge_planned_activities(
            profile,
            [make_activity("a1")],
            [make_activity("a1", "updated")],
            code_prefix="profile.plannedActivities",
            context=context,
            bind=set_field("planned_activities"),
        )
    )

    assert profile.planned_activities is not None
    assert [activity.description for activity in profile.planned_activities] == ["updated"]


def test_relevant_locations_adapter_matches_by_id(context: ValidateContext) -> None:
    profile = UserProfile(id="p1")
    stored = [make_location("l1"), make_location("l2", "Work")]

    asyncio.run(
        merge_relevant_locations(
            profile,
            stored,
            [RelevantLocation(id="l2", label="Office"), make_location(None, "Gym")],
            code_prefix="profile.relevantLocations",
            context=context,
            bind=set_field("relevant_locations"),
        )
    )

    assert profile.relevant_locations is not None
    assert [location.label for location in profile.relevant_locations] == ["Home", "Office", "Gym"]
    assert profile.relevant_locations[1].latitude == 41.38


def test_relevant_location_out_of_range_is_reported(context: ValidateContext) -> None:
    with pytest.raises(ValidationError) as excinfo:
        asyncio.run(
            merge_relevant_locations(
                UserProfile(id="p1"),
                [make_location("l1")],
                [RelevantLocation(id="l1", latitude=91.0)],
                code_prefix="profile.relevantLocations",
                context=context,
                bind=set_field("relevant_locations"),
            )
        )

    assert excinfo.value.code == "profile.relevantLocations.0.latitude"


def test_materials_adapter_updates_matching_pair(context: ValidateContext) -> None:
    profile = UserProfile(id="p1")

    asyncio.run(
        merge_materials(
            profile,
            [make_material("bike", "transport", quantity=1)],
            [make_material("bike", "transport", quantity=2)],
            code_prefix="profile.materials",
            context=context,
            bind=set_field("materials"),
        )
    )

    assert profile.materials == [make_material("bike", "transport", quantity=2)]


def test_competences_adapter_rejects_unknown_pair(context: ValidateContext) -> None:
    with pytest.raises(UndefinedReferenceError) as excinfo:
        asyncio.run(
            merge_competences(
                UserProfile(id="p1"),
                [make_competence()],
                [make_competence(ontology="other")],
                code_prefix="profile.competences",
                context=context,
                bind=set_field("competences"),
            )
        )

    assert excinfo.value.code == "profile.competences_id"


def test_competences_adapter_keeps_level_when_omitted(context: ValidateContext) -> None:
    profile = UserProfile(id="p1")

    asyncio.run(
        merge_competences(
            profile,
            [make_competence()],
            [Competence(name="language_Italian_C1", ontology="esco")],
            code_prefix="profile.competences",
            context=context,
            bind=set_field("competences"),
        )
    )

    assert profile.competences is not None
    assert profile.competences[0].level == 0.5


def test_meanings_adapter_updates_level(context: ValidateContext) -> None:
    profile = UserProfile(id="p1")

    asyncio.run(
        merge_meanings(
            profile,
            [make_meaning()],
            [Meaning(name="extraversion", category="big_five", level=0.3)],
            code_prefix="profile.meanings",
            context=context,
            bind=set_field("meanings"),
        )
    )

    assert profile.meanings == [Meaning(name="extraversion", category="big_five", level=0.3)]


def test_routines_adapter_appends_everything(context: ValidateContext) -> None:
    profile = UserProfile(id="p1")
    stored = [make_routine()]

    asyncio.run(
        merge_routines(
            profile,
            stored,
            [make_routine(weekday="tuesday")],
            code_prefix="profile.personalBehaviors",
            context=context,
            bind=set_field("personal_behaviors"),
        )
    )

    assert profile.personal_behaviors is not None
    assert [routine.weekday for routine in profile.personal_behaviors] == ["monday", "tuesday"]


def test_routines_adapter_validates_new_routines(context: ValidateContext) -> None:
    with pytest.raises(ValidationError) as excinfo:
        asyncio.run(
            merge_routines(
                UserProfile(id="p1"),
                [make_routine()],
                [make_routine(user_id="ghost")],
                code_prefix="profile.personalBehaviors",
                context=context,
                bind=set_field("personal_behaviors"),
            )
        )

    assert excinfo.value.code == "profile.personalBehaviors.0.user_id"


def test_members_adapter_updates_privileges(context: ValidateContext) -> None:
    community = CommunityProfile(id="c1")
    stored = [
        CommunityMember(user_id="user-1", privileges=["read"], creation_ts=10),
        CommunityMember(user_id="user-2"),
    ]

    asyncio.run(
        merge_members(
            community,
            stored,
            [CommunityMember(user_id="user-1", privileges=["read", "write"])],
            code_prefix="community.members",
            context=context,
            bind=set_field("members"),
        )
    )

    assert community.members == [
        CommunityMember(user_id="user-1", privileges=["read", "write"], creation_ts=10),
        CommunityMember(user_id="user-2"),
    ]


def test_social_practices_adapter_appends_new_practice(context: ValidateContext) -> None:
    community = CommunityProfile(id="c1")

    asyncio.run(
        merge_social_practices(
            community,
            [SocialPractice(id="sp1", label="cooking")],
            [SocialPractice(label="hiking", materials=[make_material("boots", "clothes")])],
            code_prefix="community.socialPractices",
            context=context,
            bind=set_field("social_practices"),
        )
    )

    assert community.social_practices is not None
    assert [practice.label for practice in community.social_practices] == ["cooking", "hiking"]
    assert community.social_practices[1].id is not None
