"""Lookup of platform clients registered as entry points.

Each installed platform registers a :class:`PlatformManifest` under the
``renovate_config.platforms`` group, keyed by the ``platform`` value of the
record it verifies. Records may target forges that have no client installed.
"""

from collections.abc import Sequence
from importlib.metadata import entry_points

from renovate_config.models.fields import Platform
from renovate_config.platforms.manifest import PlatformManifest

ENTRY_POINT_GROUP = "renovate_config.platforms"


class PlatformNotFoundError(Exception):
    """Raised when no client is registered for a record's platform."""

    def __init__(self, platform: str, available: Sequence[str]) -> None:
        self.platform = platform
        self.available = tuple(available)
        super().__init__(
            f"No verifier for platform '{platform}'; "
            f"available: {', '.join(self.available) or 'none'}"
        )


def available_platforms() -> Sequence[str]:
    """Return the sorted keys of every registered platform client."""
    return sorted({entry.name for entry in entry_points(group=ENTRY_POINT_GROUP)})


def load_platform_manifest(platform: Platform | str) -> PlatformManifest:
    """Load the client manifest for a record's platform.

    Raises:
        PlatformNotFoundError: If no client is registered for the platform

    """
    matches = entry_points(group=ENTRY_POINT_GROUP, name=platform)
    if not matches:
        raise PlatformNotFoundError(platform, available_platforms())

    (entry, *_) = matches
    manifest: PlatformManifest = entry.load()
    return manifest
