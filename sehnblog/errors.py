"""Exception hierarchy for SehnBlog."""

from __future__ import annotations


class SehnBlogError(Exception):
    """Base class for all package errors."""


class StorageError(SehnBlogError):
    """Raised by storage backends when a read or write cannot complete."""


class ContentError(SehnBlogError):
    """Raised for a post that cannot be parsed or validated."""

    def __init__(self, path: object, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class FeedError(SehnBlogError):
    """Raised when the RSS feed cannot be generated."""
