"""Static site generation: markdown, templates, RSS feed."""

from .build import build_site
from .markdown import render_markdown
from .rss import FeedChannel, render_feed, write_feed

__all__ = [
    "build_site",
    "render_markdown",
    "FeedChannel",
    "render_feed",
    "write_feed",
]
