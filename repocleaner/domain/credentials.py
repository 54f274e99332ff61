"""Account credentials captured by the setup page."""

import re

from pydantic import BaseModel, ConfigDict, field_validator

USERNAME_MAX_LENGTH = 39
TOKEN_MAX_LENGTH = 255

_USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9-]+$")
_TOKEN_PATTERN = re.compile(r"^(ghp_|github_pat_)[a-zA-Z0-9_]+$")


class Credentials(BaseModel):
    """GitHub login plus personal access token.

    Both values are trimmed before validation. The token is an opaque bearer
    value: it is never logged and ``repr`` hides it.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    username: str
    token: str

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not v:
            raise ValueError("Username cannot be empty")
        if len(v) > USERNAME_MAX_LENGTH:
            raise ValueError("Username must be less than 39 characters")
        if not _USERNAME_PATTERN.match(v):
            raise ValueError(
                "Username can only contain alphanumeric characters and hyphens"
            )
        return v

    @field_validator("token")
    @classmethod
    def validate_token(cls, v: str) -> str:
        if not v:
            raise ValueError("Token cannot be empty")
        if len(v) > TOKEN_MAX_LENGTH:
            raise ValueError("Token must be less than 255 characters")
        if not _TOKEN_PATTERN.match(v):
            raise ValueError(
                "Invalid GitHub token format. Must start with 'ghp_' or 'github_pat_'"
            )
        return v

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, token='***')"

    __str__ = __repr__


def field_errors(error) -> dict:
    """Map a pydantic ValidationError to ``{field: first message}``."""
    errors = {}
    for detail in error.errors():
        field = detail["loc"][0] if detail["loc"] else "__root__"
        message = detail["msg"]
        # pydantic prefixes ValueError messages raised by validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.setdefault(field, message)
    return errors
