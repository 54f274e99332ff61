"""Application components."""

from .css_loader import CssLoader
from .repo_cleaner_app import RepoCleanerApp

__all__ = ["CssLoader", "RepoCleanerApp"]
