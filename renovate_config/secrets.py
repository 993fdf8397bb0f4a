"""Resolution of secret references against an injected environment."""

import logging
from collections.abc import Mapping, Sequence

from renovate_config.models.config import HostRule, RenovateConfig
from renovate_config.models.definition import ConfigDefinition, SecretRef

log = logging.getLogger(__name__)


class MissingSecretError(Exception):
    """Raised when environment variables needed by a definition are unset."""

    def __init__(self, names: Sequence[str]) -> None:
        self.names = tuple(names)
        super().__init__(
            "Missing secret environment variable(s): " + ", ".join(self.names)
        )


def resolve_secret(ref: SecretRef, environ: Mapping[str, str]) -> str:
    """Return the value of a single secret reference.

    Raises:
        MissingSecretError: If the variable is unset or empty

    """
    if not (value := environ.get(ref.env, "")):
        raise MissingSecretError([ref.env])
    return value


def resolve_config(
    definition: ConfigDefinition, environ: Mapping[str, str]
) -> RenovateConfig:
    """Build a resolved configuration record from a definition.

    Args:
        definition: Definition whose secrets are environment references
        environ: Environment values to resolve against (e.g. ``os.environ``)

    Returns:
        The resolved, validated configuration record

    Raises:
        MissingSecretError: If any referenced variable is unset or empty,
            naming all of them at once

    """
    missing = [name for name in definition.secret_names() if not environ.get(name)]
    if missing:
        raise MissingSecretError(missing)

    log.debug(
        "Resolving %d secret reference(s) for platform=%s",
        len(definition.secret_refs()),
        definition.platform,
    )

    return RenovateConfig(
        platform=definition.platform,
        endpoint=definition.endpoint,
        token=resolve_secret(definition.token, environ),
        host_rules=[
            HostRule(
                host_type=rule.host_type,
                match_host=rule.match_host,
                username=rule.username,
                password=resolve_secret(rule.password, environ),
            )
            for rule in definition.host_rules
        ],
        repositories=list(definition.repositories),
    )
