"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from contextlib import AsyncExitStack
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from wenet_common.adapters.profile_manager import (
    ProfileManagerClient,
    community_from_payload,
    community_to_payload,
    profile_from_payload,
    profile_to_payload,
)
from wenet_common.config import find_profile_manager_config, get_merge_config
from wenet_common.domain.validation import ValidateContext

if TYPE_CHECKING:
    from collections.abc import Mapping

    from wenet_common.config import MergeConfig
    from wenet_common.domain.validation import ProfileDirectory

log = getLogger(__name__)


class DocumentKind(StrEnum):
    PROFILE = "profile"
    COMMUNITY = "community"


def merge_documents(
    stored: Mapping[str, object],
    patch: Mapping[str, object],
    *,
    kind: DocumentKind,
    profiles: ProfileDirectory | None = None,
    merge_config: MergeConfig | None = None,
) -> dict[str, object]:
    """Merge a partial ``patch`` document into a ``stored`` one and return the result.

    Raises ``ValidationError`` when the patch is rejected.
    """

    return asyncio.run(
        merge_documents_async(
            stored,
            patch,
            kind=kind,
            profiles=profiles,
            merge_config=merge_config,
        )
    )


async def merge_documents_async(
    stored: Mapping[str, object],
    patch: Mapping[str, object],
    *,
    kind: DocumentKind,
    profiles: ProfileDirectory | None = None,
    merge_config: MergeConfig | None = None,
) -> dict[str, object]:
    effective_config = merge_config or get_merge_config()
    async with AsyncExitStack() as stack:
        directory = profiles
        if directory is None:
            manager_config = find_profile_manager_config()
            if manager_config is not None:
                directory = await stack.enter_async_context(
                    ProfileManagerClient(config=manager_config)
                )
        context = ValidateContext(
            error_code=kind.value,
            profiles=directory,
            empty_list_policy=effective_config.empty_list_policy,
        )
        log.info(
            "Merging %s document: empty_list_policy=%s, profile checks=%s",
            kind,
            context.empty_list_policy,
            "on" if directory is not None else "off",
        )
        if kind is DocumentKind.PROFILE:
            profile = await profile_from_payload(stored).merge(
                profile_from_payload(patch), context
            )
            return profile_to_payload(profile)
        community = await community_from_payload(stored).merge(
            community_from_payload(patch), context
        )
        return community_to_payload(community)
