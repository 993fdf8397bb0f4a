"""Azure DevOps platform manifest."""

from renovate_config.platforms.azure.client import AzureDevOpsClient
from renovate_config.platforms.manifest import PlatformManifest

azure_manifest = PlatformManifest(client_factory=AzureDevOpsClient.from_config)
