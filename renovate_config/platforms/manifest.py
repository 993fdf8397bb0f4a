"""Platform manifest definition for the plugin system."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass

from renovate_config.models.config import RenovateConfig
from renovate_config.platforms.base import PlatformClient


@dataclass(frozen=True, kw_only=True)
class PlatformManifest:
    """Manifest describing a platform client plugin.

    The manifest holds the client factory so clients are only imported for
    the platform a record targets.
    """

    client_factory: Callable[
        [RenovateConfig], AbstractAsyncContextManager[PlatformClient]
    ]
