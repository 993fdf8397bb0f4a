"""Pydantic models for Azure DevOps API responses."""

from pydantic import BaseModel, ConfigDict, Field


class AuthenticatedUser(BaseModel):
    """Identity the token authenticated as."""

    model_config = ConfigDict(populate_by_name=True)

    provider_display_name: str = Field(alias="providerDisplayName")


class ConnectionData(BaseModel):
    """Response from the ``_apis/connectionData`` endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    authenticated_user: AuthenticatedUser = Field(alias="authenticatedUser")


class GitRepository(BaseModel):
    """A Git repository in an Azure DevOps project."""

    id: str
    name: str
