"""Profile manager API client."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Self
from urllib.parse import quote

import httpx

if TYPE_CHECKING:
    from types import TracebackType

    from wenet_common.config.profile_manager import ProfileManagerConfig

log = getLogger(__name__)

API_KEY_HEADER = "x-wenet-component-apikey"


class ProfileManagerAPIError(RuntimeError):
    """Raised when the profile manager returns an unexpected response."""


class ProfileManagerClient:
    """Small async client for the profile endpoints of the profile manager.

    Implements the ``ProfileDirectory`` port used by validation to confirm that
    referenced users exist.
    """

    def __init__(
        self,
        *,
        config: ProfileManagerConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        headers = {"Accept": "application/json"}
        if config.api_key:
            headers[API_KEY_HEADER] = config.api_key
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            headers=headers,
            transport=transport,
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def profile_exists(self, profile_id: str) -> bool:
        response = await self._client.get(f"/profiles/{quote(profile_id, safe='')}")
        if response.status_code == httpx.codes.NOT_FOUND:
            log.debug("Profile %s not found", profile_id)
            return False
        if response.status_code != httpx.codes.OK:
            raise ProfileManagerAPIError(
                f"Unexpected status {response.status_code} checking profile {profile_id}"
            )
        return True
