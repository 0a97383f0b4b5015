from __future__ import annotations

import pytest

from tests.helpers.profiles import make_activity, make_competence, make_material, make_routine
from wenet_common.domain.merging import (
    COMMUNITY_MEMBER_IDENTITY,
    COMPETENCE_IDENTITY,
    MATERIAL_IDENTITY,
    MEANING_IDENTITY,
    PLANNED_ACTIVITY_IDENTITY,
    RELEVANT_LOCATION_IDENTITY,
    ROUTINE_IDENTITY,
    SOCIAL_PRACTICE_IDENTITY,
    KeyedIdentityPolicy,
)
from wenet_common.domain.model import CommunityMember, Material, Meaning, SocialPractice


def test_id_based_policies_need_an_id() -> None:
    assert PLANNED_ACTIVITY_IDENTITY.has_identity(make_activity("a1"))
    assert not PLANNED_ACTIVITY_IDENTITY.has_identity(make_activity(None))
    assert SOCIAL_PRACTICE_IDENTITY.has_identity(SocialPractice(id="p1"))
    assert not SOCIAL_PRACTICE_IDENTITY.has_identity(SocialPractice(label="cooking"))


def test_id_based_policies_compare_ids() -> None:
    assert PLANNED_ACTIVITY_IDENTITY.same_identity(make_activity("a1", "x"), make_activity("a1", "y"))
    assert not PLANNED_ACTIVITY_IDENTITY.same_identity(make_activity("a1"), make_activity("a2"))
    assert RELEVANT_LOCATION_IDENTITY.attributes == ("id",)


def test_composite_key_needs_every_part() -> None:
    assert MATERIAL_IDENTITY.has_identity(make_material("car", "transport"))
    assert not MATERIAL_IDENTITY.has_identity(Material(name="car"))
    assert not MATERIAL_IDENTITY.has_identity(Material(classification="transport"))
    assert not MEANING_IDENTITY.has_identity(Meaning(category="big_five"))


def test_composite_key_compares_every_part() -> None:
    stored = make_material("bike", "transport", quantity=1)

    assert MATERIAL_IDENTITY.same_identity(stored, make_material("bike", "transport", quantity=3))
    assert not MATERIAL_IDENTITY.same_identity(stored, make_material("car", "transport"))
    assert not MATERIAL_IDENTITY.same_identity(stored, make_material("bike", "toy"))
    assert COMPETENCE_IDENTITY.same_identity(make_competence(), make_competence())


def test_stored_element_without_key_never_matches() -> None:
    assert not MATERIAL_IDENTITY.same_identity(Material(name="bike"), make_material("bike", "x"))


def test_members_are_identified_by_user_id() -> None:
    stored = CommunityMember(user_id="u1", privileges=["read"])

    assert COMMUNITY_MEMBER_IDENTITY.has_identity(CommunityMember(user_id="u1"))
    assert not COMMUNITY_MEMBER_IDENTITY.has_identity(CommunityMember(privileges=["read"]))
    assert COMMUNITY_MEMBER_IDENTITY.same_identity(stored, CommunityMember(user_id="u1"))


def test_routines_never_have_identity() -> None:
    routine = make_routine()

    assert not ROUTINE_IDENTITY.has_identity(routine)
    assert not ROUTINE_IDENTITY.same_identity(routine, make_routine())


def test_describe_names_key_values() -> None:
    assert MATERIAL_IDENTITY.describe(make_material("car", "transport")) == (
        "name='car', classification='transport'"
    )
    assert repr(MATERIAL_IDENTITY) == "KeyedIdentityPolicy(name, classification)"


def test_keyed_policy_requires_attributes() -> None:
    with pytest.raises(ValueError, match="at least one attribute"):
        KeyedIdentityPolicy[Material]()
