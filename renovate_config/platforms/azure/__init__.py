"""Azure DevOps platform module."""

from renovate_config.platforms.azure.client import AzureDevOpsClient
from renovate_config.platforms.azure.manifest import azure_manifest

__all__ = ["AzureDevOpsClient", "azure_manifest"]
