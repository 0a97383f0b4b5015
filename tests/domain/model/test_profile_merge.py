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
from wenet_common.domain.model import Material, PlannedActivity, UserProfile
from wenet_common.domain.validation import UndefinedReferenceError, ValidationError

if TYPE_CHECKING:
    from tests.helpers.profiles import FakeProfileDirectory
    from wenet_common.domain.validation import ValidateContext


def _stored_profile() -> UserProfile:
    return UserProfile(
        id="profile-1",
        gender="F",
        email="ada@example.org",
        occupation="engineer",
        planned_activities=[make_activity("a1", "dinner")],
        relevant_locations=[make_location("l1")],
        personal_behaviors=[make_routine()],
        materials=[make_material("bike", "transport", quantity=1)],
        competences=[make_competence()],
        meanings=[make_meaning()],
        creation_ts=100,
        last_update_ts=200,
    )


def test_partial_update_keeps_everything_not_sent(context: ValidateContext) -> None:
    stored = _stored_profile()

    merged = asyncio.run(stored.merge(UserProfile(occupation="nurse"), context))

    assert merged.occupation == "nurse"
    assert merged.gender == "F"
    assert merged.email == "ada@example.org"
    assert merged.planned_activities == stored.planned_activities
    assert merged.relevant_locations == stored.relevant_locations
    assert merged.personal_behaviors == stored.personal_behaviors
    assert merged.materials == stored.materials
    assert merged.competences == stored.competences
    assert merged.meanings == stored.meanings


def test_merge_keeps_identity_and_timestamps(context: ValidateContext) -> None:
    stored = _stored_profile()

    merged = asyncio.run(
        stored.merge(UserProfile(id="other", creation_ts=1, last_update_ts=2), context)
    )

    assert merged.id == "profile-1"
    assert merged.creation_ts == 100
    assert merged.last_update_ts == 200


def test_merge_reconciles_every_list_field(context: ValidateContext) -> None:
    stored = _stored_profile()
    patch = UserProfile(
        planned_activities=[PlannedActivity(id="a1", description="lunch"), make_activity(None, "gym")],
        personal_behaviors=[make_routine(weekday="sunday")],
        materials=[Material(name="bike", classification="transport", quantity=2)],
    )

    merged = asyncio.run(stored.merge(patch, context))

    assert merged.planned_activities is not None
    assert [activity.description for activity in merged.planned_activities] == ["lunch", "gym"]
    assert merged.personal_behaviors is not None
    assert [routine.weekday for routine in merged.personal_behaviors] == ["monday", "sunday"]
    assert merged.materials == [make_material("bike", "transport", quantity=2)]
    # the stored profile is left as it was
    assert stored.planned_activities == [make_activity("a1", "dinner")]
    assert stored.materials == [make_material("bike", "transport", quantity=1)]


def test_invalid_scalar_field_fails_before_lists(
    context: ValidateContext, profile_directory: FakeProfileDirectory
) -> None:
    patch = UserProfile(
        gender="unknown",
        planned_activities=[PlannedActivity(attendees=["user-1"])],
    )

    with pytest.raises(ValidationError) as excinfo:
        asyncio.run(_stored_profile().merge(patch, context))

    assert excinfo.value.code == "profile.gender"
    assert profile_directory.lookups == []


def test_invalid_email_is_rejected(context: ValidateContext) -> None:
    with pytest.raises(ValidationError) as excinfo:
        asyncio.run(_stored_profile().merge(UserProfile(email="not-an-email"), context))

    assert excinfo.value.code == "profile.email"


def test_first_failing_field_aborts_the_merge(context: ValidateContext) -> None:
    patch = UserProfile(
        relevant_locations=[make_location("missing")],
        materials=[make_material("car", "transport")],
    )

    with pytest.raises(UndefinedReferenceError) as excinfo:
        asyncio.run(_stored_profile().merge(patch, context))

    assert excinfo.value.code == "profile.relevantLocations_id"


def test_failure_code_names_the_list_element(context: ValidateContext) -> None:
    patch = UserProfile(
        materials=[
            make_material("bike", "transport", quantity=3),
            Material(name="ball", quantity=2),
        ]
    )

    with pytest.raises(ValidationError) as excinfo:
        asyncio.run(_stored_profile().merge(patch, context))

    assert excinfo.value.code == "profile.materials.1.classification"


def test_validate_rejects_repeated_list_elements(context: ValidateContext) -> None:
    profile = UserProfile(
        id="profile-1",
        materials=[make_material("bike", "transport"), make_material("bike", "transport")],
    )

    with pytest.raises(ValidationError) as excinfo:
        asyncio.run(profile.validate(context))

    assert excinfo.value.code == "profile.materials.1"
    assert "already defined at 0" in excinfo.value.message


def test_validate_checks_nested_elements(context: ValidateContext) -> None:
    profile = UserProfile(
        id="profile-1",
        meanings=[make_meaning(), make_meaning(name="openness", category="")],
    )

    with pytest.raises(ValidationError) as excinfo:
        asyncio.run(profile.validate(context))

    assert excinfo.value.code == "profile.meanings.1.category"
