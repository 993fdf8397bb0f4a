"""Azure DevOps platform client implementation."""

import base64
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

from renovate_config.models.config import RenovateConfig
from renovate_config.platforms.azure.models import ConnectionData, GitRepository
from renovate_config.platforms.base import (
    AuthenticationError,
    PlatformClient,
    session_base_url,
)

log = logging.getLogger(__name__)

API_VERSION = "7.1"


@dataclass(frozen=True, kw_only=True)
class AzureDevOpsClient(PlatformClient):
    """Azure DevOps API client.

    The endpoint is the organization URL (``https://dev.azure.com/{org}/``)
    and repositories are identified as ``project/name``.
    """

    config: RenovateConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: RenovateConfig
    ) -> AsyncGenerator["AzureDevOpsClient", None]:
        """Create client with managed session lifecycle."""
        # Azure DevOps uses Basic Auth with empty username and PAT as password
        auth_string = f":{config.token.get_secret_value()}"
        auth_bytes = base64.b64encode(auth_string.encode("ascii")).decode("ascii")
        headers = {
            "Authorization": f"Basic {auth_bytes}",
            "Content-Type": "application/json",
        }
        async with aiohttp.ClientSession(
            base_url=session_base_url(config.endpoint),
            headers=headers,
        ) as session:
            yield cls(config=config, session=session)

    async def verify_token(self) -> str:
        """Return the display name of the token's identity."""
        url = "_apis/connectionData"

        async with self.session.get(url) as response:
            if response.status != 200:
                text = await response.text()
                raise AuthenticationError(
                    f"Azure DevOps rejected token: {response.status} {text}"
                )
            data = await response.json()

        connection = ConnectionData.model_validate(data)
        return connection.authenticated_user.provider_display_name

    async def repository_accessible(self, repository: str) -> bool:
        """Check repository read access."""
        project, name = repository.split("/", 1)
        url = f"{project}/_apis/git/repositories/{name}?api-version={API_VERSION}"

        async with self.session.get(url) as response:
            if response.status in {403, 404}:
                return False
            if response.status != 200:
                text = await response.text()
                raise RuntimeError(
                    f"Failed to get repository {repository}: {response.status} {text}"
                )
            data = await response.json()

        repo = GitRepository.model_validate(data)
        log.info("Repository %s is accessible (id=%s)", repository, repo.id)
        return True
