"""Abstract base class for code forge API clients."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from renovate_config.models.config import RenovateConfig
from renovate_config.models.result import VerificationResult

log = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Raised when the forge rejects the configured token."""


@dataclass(frozen=True, kw_only=True)
class PlatformClient(ABC):
    """Abstract base for forge API clients.

    A client checks the same things the update bot relies on at startup:
    that the token authenticates against the endpoint, and that it can read
    each configured repository.
    """

    @abstractmethod
    async def verify_token(self) -> str:
        """Authenticate with the configured token.

        Returns:
            Name of the account the token belongs to

        Raises:
            AuthenticationError: If the forge rejects the token

        """

    @abstractmethod
    async def repository_accessible(self, repository: str) -> bool:
        """Check whether the token can read a repository.

        Args:
            repository: Repository identifier in owner/name format

        Returns:
            True if readable, False if missing or forbidden

        """

    async def check(self, config: RenovateConfig) -> VerificationResult:
        """Verify the token and every repository of a record."""
        account = await self.verify_token()
        log.info("Token authenticated as %s", account)

        accessible: list[str] = []
        inaccessible: list[str] = []
        for repository in config.repositories:
            if await self.repository_accessible(repository):
                accessible.append(repository)
            else:
                log.warning("Repository %s is not accessible", repository)
                inaccessible.append(repository)

        return VerificationResult(
            account=account, accessible=accessible, inaccessible=inaccessible
        )


def session_base_url(endpoint: str) -> str:
    """Return the endpoint as a session base URL with a trailing slash."""
    return endpoint if endpoint.endswith("/") else f"{endpoint}/"
