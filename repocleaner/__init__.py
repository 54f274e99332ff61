"""Repo Cleaner - browse and prune the repositories of a GitHub account."""

__version__ = "1.0.0"
