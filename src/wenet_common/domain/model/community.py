"""Community models: communities, their members and social practices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from wenet_common.domain.merging.field_lists import (
    merge_competences,
    merge_materials,
    merge_members,
    merge_social_practices,
    set_field,
)
from wenet_common.domain.merging.identity import (
    COMMUNITY_MEMBER_IDENTITY,
    COMPETENCE_IDENTITY,
    MATERIAL_IDENTITY,
    SOCIAL_PRACTICE_IDENTITY,
)
from wenet_common.domain.merging.values import merge_values
from wenet_common.domain.model.base import new_id

if TYPE_CHECKING:
    from wenet_common.domain.model.elements import Competence, Material
    from wenet_common.domain.validation import ValidateContext


@dataclass(slots=True, kw_only=True)
class CommunityMember:
    user_id: str | None = None
    privileges: list[str] | None = None
    creation_ts: int | None = None
    last_update_ts: int | None = None

    async def validate(self, context: ValidateContext) -> None:
        self.user_id = await context.validate_defined_profile_id("userId", self.user_id)
        self.privileges = context.validate_nullable_string_list("privileges", self.privileges)

    async def merge(self, source: CommunityMember, context: ValidateContext) -> CommunityMember:
        merged = CommunityMember(
            user_id=self.user_id,
            privileges=merge_values(self.privileges, source.privileges),
            creation_ts=self.creation_ts,
            last_update_ts=self.last_update_ts,
        )
        await merged.validate(context)
        return merged


@dataclass(slots=True, kw_only=True)
class SocialPractice:
    id: str | None = None
    label: str | None = None
    materials: list[Material] | None = None
    competences: list[Competence] | None = None
    norms: list[dict[str, object]] | None = None

    async def validate(self, context: ValidateContext) -> None:
        self._validate_fields(context)
        await context.validate_list_field(
            "materials", self.materials, MATERIAL_IDENTITY.same_identity
        )
        await context.validate_list_field(
            "competences", self.competences, COMPETENCE_IDENTITY.same_identity
        )

    def _validate_fields(self, context: ValidateContext) -> None:
        self.id = context.normalize_string(self.id) or new_id()
        self.label = context.normalize_string(self.label)

    async def merge(self, source: SocialPractice, context: ValidateContext) -> SocialPractice:
        """Merge a partial practice into this one.

        Only the materials and competences that ``source`` names or adds are
        validated; the retained stored ones are kept as they are.
        """

        merged = SocialPractice(
            id=self.id,
            label=merge_values(self.label, source.label),
            norms=merge_values(self.norms, source.norms),
        )
        merged._validate_fields(context)
        merged = await merge_materials(
            merged,
            self.materials,
            source.materials,
            code_prefix=context.field_code("materials"),
            context=context,
            bind=set_field("materials"),
        )
        return await merge_competences(
            merged,
            self.competences,
            source.competences,
            code_prefix=context.field_code("competences"),
            context=context,
            bind=set_field("competences"),
        )


@dataclass(slots=True, kw_only=True)
class CommunityProfile:
    id: str | None = None
    app_id: str | None = None
    name: str | None = None
    description: str | None = None
    keywords: list[str] | None = None
    members: list[CommunityMember] | None = None
    social_practices: list[SocialPractice] | None = None
    norms: list[dict[str, object]] | None = None
    task_type_ids: list[str] | None = None
    creation_ts: int | None = None
    last_update_ts: int | None = None

    async def validate(self, context: ValidateContext) -> None:
        self._validate_fields(context)
        await context.validate_list_field(
            "members", self.members, COMMUNITY_MEMBER_IDENTITY.same_identity
        )
        await context.validate_list_field(
            "socialPractices", self.social_practices, SOCIAL_PRACTICE_IDENTITY.same_identity
        )

    def _validate_fields(self, context: ValidateContext) -> None:
        self.app_id = context.normalize_string(self.app_id)
        self.name = context.normalize_string(self.name)
        self.description = context.normalize_string(self.description)
        self.keywords = context.validate_nullable_string_list("keywords", self.keywords)
        self.task_type_ids = context.validate_nullable_string_list(
            "taskTypeIds", self.task_type_ids
        )

    async def merge(self, source: CommunityProfile, context: ValidateContext) -> CommunityProfile:
        """Merge a partial community into this one.

        The stored ``id`` and timestamps are kept. Members are matched by user id
        and social practices by id; any failure aborts the whole merge. ``norms``
        and ``task_type_ids`` are replaced as a whole when sent.
        """

        merged = CommunityProfile(
            id=self.id,
            app_id=merge_values(self.app_id, source.app_id),
            name=merge_values(self.name, source.name),
            description=merge_values(self.description, source.description),
            keywords=merge_values(self.keywords, source.keywords),
            norms=merge_values(self.norms, source.norms),
            task_type_ids=merge_values(self.task_type_ids, source.task_type_ids),
            creation_ts=self.creation_ts,
            last_update_ts=self.last_update_ts,
        )
        merged._validate_fields(context)
        merged = await merge_members(
            merged,
            self.members,
            source.members,
            code_prefix=context.field_code("members"),
            context=context,
            bind=set_field("members"),
        )
        return await merge_social_practices(
            merged,
            self.social_practices,
            source.social_practices,
            code_prefix=context.field_code("socialPractices"),
            context=context,
            bind=set_field("social_practices"),
        )
