"""Repository and profile models as returned by the GitHub REST API."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Visibility = Literal["public", "private"]


class RepositoryOwner(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    login: str
    avatar_url: Optional[str] = None
    html_url: Optional[str] = None


class Repository(BaseModel):
    """One entry of the account's repository collection.

    Field names follow the domain; aliases map them to the API record so
    ``Repository.model_validate(record)`` accepts the raw listing entry.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: int
    display_name: str = Field(alias="name")
    full_name: str
    description: Optional[str] = None
    canonical_url: str = Field(alias="html_url")
    popularity_score: int = Field(default=0, ge=0, alias="stargazers_count")
    derivation_count: int = Field(default=0, ge=0, alias="forks_count")
    primary_language: Optional[str] = Field(default=None, alias="language")
    is_private: bool = Field(default=False, alias="private")
    is_derived: bool = Field(default=False, alias="fork")
    last_modified_at: datetime = Field(alias="updated_at")
    owner: RepositoryOwner

    @property
    def visibility(self) -> Visibility:
        return "private" if self.is_private else "public"

    @property
    def owner_login(self) -> str:
        return self.owner.login

    @property
    def delete_path(self) -> str:
        """API path of the delete endpoint for this repository."""
        return f"/repos/{self.full_name}"


class UserProfile(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    login: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or self.login
