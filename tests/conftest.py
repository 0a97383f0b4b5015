from __future__ import annotations

import pytest

from tests.helpers.profiles import FakeProfileDirectory
from wenet_common.config import EmptyListPolicy
from wenet_common.domain.validation import ValidateContext


@pytest.fixture
def profile_directory() -> FakeProfileDirectory:
    return FakeProfileDirectory(profile_ids={"user-1", "user-2", "user-3"})


@pytest.fixture
def context(profile_directory: FakeProfileDirectory) -> ValidateContext:
    return ValidateContext(error_code="profile", profiles=profile_directory)


@pytest.fixture
def clearing_context(profile_directory: FakeProfileDirectory) -> ValidateContext:
    return ValidateContext(
        error_code="profile",
        profiles=profile_directory,
        empty_list_policy=EmptyListPolicy.CLEAR,
    )


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "WENET_PROFILE_MANAGER_URL",
        "WENET_PROFILE_MANAGER_TIMEOUT",
        "WENET_API_KEY",
        "WENET_EMPTY_LIST_POLICY",
    ):
        monkeypatch.delenv(name, raising=False)
