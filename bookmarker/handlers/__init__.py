"""Interaction handlers."""

from bookmarker.handlers.bookmark import BookmarkHandler
from bookmarker.handlers.delete import DeleteHandler
from bookmarker.handlers.router import InteractionRouter

__all__ = ["BookmarkHandler", "DeleteHandler", "InteractionRouter"]
