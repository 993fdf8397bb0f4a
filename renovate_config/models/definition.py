"""Unresolved configuration records as stored on disk.

A definition has the same shape as :class:`RenovateConfig`, but each secret is
a reference to the environment variable it is read from. Definitions can be
written out and checked in without carrying any secret value.
"""

from collections.abc import Sequence

from pydantic import AliasChoices, Field

from renovate_config.models.base import Model
from renovate_config.models.fields import (
    HostType,
    HttpsUrl,
    NonEmptyStr,
    Platform,
    RepositoryId,
)

ENV_NAME_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*$"


class SecretRef(Model):
    """Reference to a secret held in an environment variable."""

    env: str = Field(
        ..., pattern=ENV_NAME_PATTERN, description="Environment variable name"
    )


class HostRuleDefinition(Model):
    """Host rule whose password is still a reference."""

    host_type: HostType = Field(
        ..., validation_alias=AliasChoices("host_type", "hostType")
    )
    match_host: NonEmptyStr = Field(
        ..., validation_alias=AliasChoices("match_host", "matchHost")
    )
    username: NonEmptyStr
    password: SecretRef


class ConfigDefinition(Model):
    """Configuration record whose secrets are still references."""

    platform: Platform
    endpoint: HttpsUrl
    token: SecretRef
    host_rules: Sequence[HostRuleDefinition] = Field(
        ..., validation_alias=AliasChoices("host_rules", "hostRules"), min_length=1
    )
    repositories: Sequence[RepositoryId] = Field(..., min_length=1)

    def secret_refs(self) -> Sequence[SecretRef]:
        """Return every secret reference in declaration order."""
        return [self.token, *(rule.password for rule in self.host_rules)]

    def secret_names(self) -> Sequence[str]:
        """Return the environment variables this definition needs.

        Names are listed once, in the order they are first used.
        """
        return list(dict.fromkeys(ref.env for ref in self.secret_refs()))
