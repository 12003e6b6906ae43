"""Static site generator for the blog."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any

from ..config import COLOR_SCHEME_KEY, SITE_DESCRIPTION, SITE_TITLE
from ..content.posts import Post, load_posts
from .markdown import render_markdown
from .rss import FEED_FILENAME, FeedChannel, write_feed
from .templates import html_doc, post_page, posts_index

logger = logging.getLogger(__name__)


def build_site(
    content_dir: Path,
    out_dir: Path,
    site_url: str | None = None,
    public_dir: Path | None = None,
    title: str = SITE_TITLE,
    description: str = SITE_DESCRIPTION,
    include_drafts: bool = False,
    strict: bool = False,
    scheme_key: str = COLOR_SCHEME_KEY,
) -> dict[str, Any]:
    """Build the static HTML site from a directory of markdown posts.

    Layout: index.html, {slug}/index.html per post, rss.xml, plus a copy of
    ``public_dir``. The feed is skipped when no site URL is given.

    Returns:
        Report with ``posts``, ``out_dir``, ``feed`` and ``total_bytes``
    """
    content_dir = content_dir.resolve()
    out_dir = out_dir.resolve()
    out_dir.mkdir(parents=True, exist_ok=True)

    posts = load_posts(content_dir, include_drafts=include_drafts, strict=strict)
    logger.info("Loaded %d posts from %s", len(posts), content_dir)

    # Public assets first so generated pages win on conflicts.
    if public_dir is not None and public_dir.is_dir():
        shutil.copytree(public_dir, out_dir, dirs_exist_ok=True, ignore=_ignore)

    feed_path: Path | None = None
    if site_url:
        channel = FeedChannel(title=title, description=description, site=site_url)
        feed_path = write_feed(channel, posts, out_dir)
    else:
        logger.warning("No site URL configured; skipping %s", FEED_FILENAME)

    for post in posts:
        _write_post_page(post, out_dir, title, feed_path is not None, scheme_key)

    index = html_doc(
        title=title,
        site_title=title,
        home_href="./",
        body=posts_index(posts),
        description=description,
        feed_href=FEED_FILENAME if feed_path else None,
        scheme_key=scheme_key,
    )
    (out_dir / "index.html").write_text(index, encoding="utf-8")

    return {
        "posts": len(posts),
        "out_dir": str(out_dir),
        "feed": str(feed_path) if feed_path else None,
        "total_bytes": _dir_size_bytes(out_dir),
    }


def _write_post_page(post: Post, out_dir: Path, site_title: str, has_feed: bool, scheme_key: str) -> Path:
    # Slugs may be nested (2024/hello), so links climb one level per segment.
    root = "../" * (post.slug.count("/") + 1)
    page = html_doc(
        title=f"{post.title} · {site_title}",
        site_title=site_title,
        home_href=root,
        body=post_page(post, render_markdown(post.body)),
        description=post.description,
        feed_href=f"{root}{FEED_FILENAME}" if has_feed else None,
        scheme_key=scheme_key,
    )
    target = out_dir / post.slug / "index.html"
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(page, encoding="utf-8")
    return target


def _ignore(path: str, names: list[str]) -> set[str]:
    ignored = {".DS_Store", "__pycache__"}
    return {n for n in names if n in ignored}


def _dir_size_bytes(path: Path) -> int:
    total = 0
    for p in path.rglob("*"):
        if p.is_file():
            total += p.stat().st_size
    return total
