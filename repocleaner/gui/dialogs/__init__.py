"""Dialogs."""

from .delete_dialog import DeleteDialog

__all__ = ["DeleteDialog"]
