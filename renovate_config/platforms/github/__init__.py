"""GitHub platform module."""

from renovate_config.platforms.github.client import GitHubClient
from renovate_config.platforms.github.manifest import github_manifest

__all__ = ["GitHubClient", "github_manifest"]
