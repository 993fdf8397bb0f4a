"""Default configuration record for the shadow-tool repository."""

from pydantic import SecretStr

from renovate_config.models.config import HostRule, RenovateConfig
from renovate_config.models.definition import (
    ConfigDefinition,
    HostRuleDefinition,
    SecretRef,
)

TOKEN_ENV = "TOKEN"
GITHUB_API_ENDPOINT = "https://api.github.com/"
AZURE_ARTIFACTS_HOST = "pkgs.dev.azure.com"
AZURE_ARTIFACTS_USERNAME = "apikey"
DEFAULT_REPOSITORIES = ("rabobank/shadow-tool",)

DEFAULT_DEFINITION = ConfigDefinition(
    platform="github",
    endpoint=GITHUB_API_ENDPOINT,
    token=SecretRef(env=TOKEN_ENV),
    host_rules=[
        HostRuleDefinition(
            host_type="npm",
            match_host=AZURE_ARTIFACTS_HOST,
            username=AZURE_ARTIFACTS_USERNAME,
            password=SecretRef(env=TOKEN_ENV),
        )
    ],
    repositories=list(DEFAULT_REPOSITORIES),
)


def build_default_config(token: SecretStr | str) -> RenovateConfig:
    """Build the default record from an explicitly passed token.

    The same token authenticates against the forge and the Azure Artifacts
    npm feed.
    """
    secret = token if isinstance(token, SecretStr) else SecretStr(token)
    return RenovateConfig(
        platform=DEFAULT_DEFINITION.platform,
        endpoint=DEFAULT_DEFINITION.endpoint,
        token=secret,
        host_rules=[
            HostRule(
                host_type="npm",
                match_host=AZURE_ARTIFACTS_HOST,
                username=AZURE_ARTIFACTS_USERNAME,
                password=secret,
            )
        ],
        repositories=list(DEFAULT_REPOSITORIES),
    )
