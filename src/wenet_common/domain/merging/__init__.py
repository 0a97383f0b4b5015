"""Merging of list-valued fields during partial updates."""

from __future__ import annotations

from .field_lists import (
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
from .identity import (
    COMMUNITY_MEMBER_IDENTITY,
    COMPETENCE_IDENTITY,
    MATERIAL_IDENTITY,
    MEANING_IDENTITY,
    PLANNED_ACTIVITY_IDENTITY,
    RELEVANT_LOCATION_IDENTITY,
    ROUTINE_IDENTITY,
    SOCIAL_PRACTICE_IDENTITY,
    IdentityPolicy,
    KeyedIdentityPolicy,
    NoIdentityPolicy,
)
from .reconcile import FieldBinder, MergeableElement, merge_field_list, reconcile_list
from .values import merge_mappings, merge_values

__all__ = [
    "COMMUNITY_MEMBER_IDENTITY",
    "COMPETENCE_IDENTITY",
    "MATERIAL_IDENTITY",
    "MEANING_IDENTITY",
    "PLANNED_ACTIVITY_IDENTITY",
    "RELEVANT_LOCATION_IDENTITY",
    "ROUTINE_IDENTITY",
    "SOCIAL_PRACTICE_IDENTITY",
    "FieldBinder",
    "IdentityPolicy",
    "KeyedIdentityPolicy",
    "MergeableElement",
    "NoIdentityPolicy",
    "merge_competences",
    "merge_field_list",
    "merge_mappings",
    "merge_materials",
    "merge_meanings",
    "merge_members",
    "merge_planned_activities",
    "merge_relevant_locations",
    "merge_routines",
    "merge_social_practices",
    "merge_values",
    "reconcile_list",
    "set_field",
]
