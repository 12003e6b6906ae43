"""Blog post loading: markdown files with YAML front matter."""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import ContentError

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIXES = (".md", ".markdown")
FRONT_MATTER_DELIMITER = "---"

# Accepted besides ISO dates, e.g. "Jul 08 2022"
DATE_FORMATS = ("%b %d %Y", "%B %d %Y", "%b %d, %Y", "%B %d, %Y")


class Post(BaseModel):
    """A single blog post."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    slug: str
    title: str
    description: str
    pub_date: date = Field(alias="pubDate")
    updated_date: date | None = Field(default=None, alias="updatedDate")
    hero_image: str | None = Field(default=None, alias="heroImage")
    draft: bool = False
    body: str = ""

    @field_validator("pub_date", "updated_date", mode="before")
    @classmethod
    def _parse_written_date(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str):
            text = " ".join(value.split())
            for fmt in DATE_FORMATS:
                try:
                    return datetime.strptime(text, fmt).date()
                except ValueError:
                    continue
        return value

    @property
    def link(self) -> str:
        return f"/{self.slug}/"


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split ``---`` delimited YAML front matter from the markdown body.

    Returns:
        (front matter mapping, body). Text without front matter yields an
        empty mapping.

    Raises:
        ValueError: Front matter is unterminated, invalid YAML, or not a mapping
    """
    text = text.replace("\r\n", "\n").lstrip("\ufeff")
    lines = text.split("\n")
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return {}, text

    for end in range(1, len(lines)):
        if lines[end].strip() == FRONT_MATTER_DELIMITER:
            break
    else:
        raise ValueError("unterminated front matter")

    try:
        data = yaml.safe_load("\n".join(lines[1:end]))
    except yaml.YAMLError as e:
        raise ValueError(f"invalid front matter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("front matter must be a mapping")

    body = "\n".join(lines[end + 1 :]).lstrip("\n")
    return data, body


def parse_post(path: Path, content_dir: Path | None = None) -> Post:
    """Parse one markdown file into a Post.

    The slug is the path relative to ``content_dir`` without its suffix
    (``2024/hello`` for ``2024/hello.md``), or the file stem without one.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ContentError(path, f"cannot read: {e}") from e

    try:
        meta, body = split_front_matter(text)
    except ValueError as e:
        raise ContentError(path, str(e)) from e

    fields = {k: v for k, v in meta.items() if isinstance(k, str) and k not in ("slug", "body")}
    try:
        return Post(slug=_slug_for(path, content_dir), body=body, **fields)
    except ValidationError as e:
        bad = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ContentError(path, f"invalid front matter fields: {bad}") from e


def load_posts(content_dir: Path, include_drafts: bool = False, strict: bool = False) -> list[Post]:
    """Load every post under ``content_dir``, newest first.

    Args:
        content_dir: Directory of markdown files (searched recursively)
        include_drafts: Keep posts marked ``draft: true``
        strict: Raise on the first invalid post instead of skipping it

    Returns:
        Posts sorted by publication date descending, then slug
    """
    if not content_dir.exists():
        logger.info("Content directory %s does not exist", content_dir)
        return []

    posts: list[Post] = []
    sources: dict[str, Path] = {}
    for path in sorted(content_dir.rglob("*")):
        if not path.is_file() or path.suffix.lower() not in MARKDOWN_SUFFIXES:
            continue
        try:
            post = parse_post(path, content_dir)
        except ContentError as e:
            if strict:
                raise
            logger.warning("Skipping %s", e)
            continue
        if post.draft and not include_drafts:
            logger.debug("Skipping draft %s", post.slug)
            continue
        # hello.md and hello.markdown would both publish to /hello/.
        if post.slug in sources:
            err = ContentError(path, f"slug {post.slug!r} already used by {sources[post.slug]}")
            if strict:
                raise err
            logger.warning("Skipping %s", err)
            continue
        sources[post.slug] = path
        posts.append(post)

    return sort_posts(posts)


def _slug_for(path: Path, content_dir: Path | None) -> str:
    if content_dir is None:
        return path.stem
    try:
        rel = path.relative_to(content_dir)
    except ValueError:
        return path.stem
    return rel.with_suffix("").as_posix()


def sort_posts(posts: list[Post]) -> list[Post]:
    # Two passes: slug ascending, then a stable sort by date descending.
    by_slug = sorted(posts, key=lambda p: p.slug)
    return sorted(by_slug, key=lambda p: p.pub_date, reverse=True)
