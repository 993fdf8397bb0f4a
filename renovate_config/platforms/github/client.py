"""GitHub platform client implementation."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

from renovate_config.models.config import RenovateConfig
from renovate_config.platforms.base import (
    AuthenticationError,
    PlatformClient,
    session_base_url,
)
from renovate_config.platforms.github.models import Repository, User

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class GitHubClient(PlatformClient):
    """GitHub (and GitHub Enterprise) API client."""

    config: RenovateConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: RenovateConfig
    ) -> AsyncGenerator["GitHubClient", None]:
        """Create client with managed session lifecycle."""
        headers = {
            "Authorization": f"Bearer {config.token.get_secret_value()}",
            "Accept": "application/vnd.github+json",
        }
        async with aiohttp.ClientSession(
            base_url=session_base_url(config.endpoint),
            headers=headers,
        ) as session:
            yield cls(config=config, session=session)

    async def verify_token(self) -> str:
        """Return the login of the token's user."""
        async with self.session.get("user") as response:
            if response.status != 200:
                text = await response.text()
                raise AuthenticationError(
                    f"GitHub rejected token: {response.status} {text}"
                )
            data = await response.json()

        return User.model_validate(data).login

    async def repository_accessible(self, repository: str) -> bool:
        """Check repository read access."""
        url = f"repos/{repository}"

        async with self.session.get(url) as response:
            if response.status in {403, 404}:
                return False
            if response.status != 200:
                text = await response.text()
                raise RuntimeError(
                    f"Failed to get repository {repository}: {response.status} {text}"
                )
            data = await response.json()

        repo = Repository.model_validate(data)
        log.info(
            "Repository %s is accessible (private=%s)", repo.full_name, repo.private
        )
        return True
