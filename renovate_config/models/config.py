"""Resolved configuration record loaded by the dependency-update bot."""

from collections.abc import Sequence
from typing import Any

from pydantic import AliasChoices, Field

from renovate_config.models.base import Model
from renovate_config.models.fields import (
    HostType,
    HttpsUrl,
    NonEmptyStr,
    Platform,
    RepositoryId,
    ResolvedSecret,
)

MASKED_SECRET = "**********"


class HostRule(Model):
    """Credentials injected for packages resolved from a matching host."""

    host_type: HostType = Field(
        ...,
        validation_alias=AliasChoices("host_type", "hostType"),
        description="Registry protocol family",
    )
    match_host: NonEmptyStr = Field(
        ...,
        validation_alias=AliasChoices("match_host", "matchHost"),
        description="Host pattern the rule applies to",
    )
    username: NonEmptyStr = Field(..., description="Registry username")
    password: ResolvedSecret = Field(..., description="Registry password or token")

    def to_renovate_dict(self, *, reveal_secrets: bool = False) -> dict[str, str]:
        """Return the rule in the bot's camelCase shape."""
        return {
            "hostType": self.host_type,
            "matchHost": self.match_host,
            "username": self.username,
            "password": (
                self.password.get_secret_value() if reveal_secrets else MASKED_SECRET
            ),
        }


class RenovateConfig(Model):
    """Complete configuration record with every secret resolved."""

    platform: Platform = Field(..., description="Code forge the bot targets")
    endpoint: HttpsUrl = Field(..., description="Forge API base URL")
    token: ResolvedSecret = Field(..., description="Forge API token")
    host_rules: Sequence[HostRule] = Field(
        ...,
        validation_alias=AliasChoices("host_rules", "hostRules"),
        min_length=1,
        description="Ordered host rules",
    )
    repositories: Sequence[RepositoryId] = Field(
        ..., min_length=1, description="Repositories in owner/name format"
    )

    def to_renovate_dict(self, *, reveal_secrets: bool = False) -> dict[str, Any]:
        """Return the record in the shape the bot loads.

        Secrets are masked unless ``reveal_secrets`` is set.
        """
        return {
            "platform": self.platform,
            "endpoint": self.endpoint,
            "token": (
                self.token.get_secret_value() if reveal_secrets else MASKED_SECRET
            ),
            "hostRules": [
                rule.to_renovate_dict(reveal_secrets=reveal_secrets)
                for rule in self.host_rules
            ],
            "repositories": list(self.repositories),
        }
