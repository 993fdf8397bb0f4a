"""Field types shared by resolved and unresolved configuration records."""

import re
from typing import Annotated, Literal
from urllib.parse import urlsplit

from pydantic import AfterValidator, SecretStr, StringConstraints

Platform = Literal["github", "gitlab", "azure", "bitbucket", "gitea"]

HostType = Annotated[str, StringConstraints(pattern=r"^[a-z0-9-]+$")]

REPOSITORY_PATTERN = re.compile(r"^(?!\.+/)[A-Za-z0-9_.-]+/(?!\.+$)[A-Za-z0-9_.-]+$")


def _validate_https_url(value: str) -> str:
    parts = urlsplit(value)
    if parts.scheme != "https" or not parts.netloc:
        raise ValueError(f"Endpoint must be an https:// URL with a host: {value!r}")
    return value


def _require_secret(value: SecretStr) -> SecretStr:
    if not value.get_secret_value():
        raise ValueError("Secret value must not be empty")
    return value


def _validate_repository(value: str) -> str:
    if not REPOSITORY_PATTERN.match(value):
        raise ValueError(f"Repository must be in owner/name format: {value!r}")
    return value


NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
HttpsUrl = Annotated[str, AfterValidator(_validate_https_url)]
RepositoryId = Annotated[str, AfterValidator(_validate_repository)]
ResolvedSecret = Annotated[SecretStr, AfterValidator(_require_secret)]
