"""Pydantic models for GitHub REST API responses."""

from pydantic import BaseModel


class User(BaseModel):
    """The authenticated user from ``GET /user``."""

    login: str


class Repository(BaseModel):
    """A repository from ``GET /repos/{owner}/{repo}``."""

    full_name: str
    private: bool = False
