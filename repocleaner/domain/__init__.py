"""Domain models and the pure view transform."""

from .credentials import Credentials
from .pagination import page_numbers, page_slice, total_pages
from .query import DerivedResult, available_languages, derive
from .repository import Repository, RepositoryOwner, UserProfile
from .view_state import ViewState

__all__ = [
    "Credentials",
    "DerivedResult",
    "Repository",
    "RepositoryOwner",
    "UserProfile",
    "ViewState",
    "available_languages",
    "derive",
    "page_numbers",
    "page_slice",
    "total_pages",
]
