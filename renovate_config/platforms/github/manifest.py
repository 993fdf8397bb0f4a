"""GitHub platform manifest."""

from renovate_config.platforms.github.client import GitHubClient
from renovate_config.platforms.manifest import PlatformManifest

github_manifest = PlatformManifest(client_factory=GitHubClient.from_config)
