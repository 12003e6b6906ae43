"""RSS 2.0 feed serialization."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from urllib.parse import urljoin

from pydantic import BaseModel

from ..content.dates import rfc822
from ..content.posts import Post
from ..errors import FeedError

FEED_FILENAME = "rss.xml"


class FeedChannel(BaseModel):
    """Channel-level metadata for the feed."""

    title: str
    description: str
    site: str
    language: str = "en-us"


def absolute_url(site: str, path: str) -> str:
    """Join ``path`` onto the site URL, treating the site as a directory."""
    base = site if site.endswith("/") else site + "/"
    return urljoin(base, path.lstrip("/"))


def render_feed(channel: FeedChannel, posts: list[Post]) -> str:
    """Serialize posts (already ordered) into an RSS 2.0 document.

    Raises:
        FeedError: The channel has no absolute site URL
    """
    if not channel.site.startswith(("http://", "https://")):
        raise FeedError("an absolute site URL is required to build the RSS feed")

    rss = ET.Element("rss", {"version": "2.0"})
    chan = ET.SubElement(rss, "channel")
    ET.SubElement(chan, "title").text = channel.title
    ET.SubElement(chan, "description").text = channel.description
    ET.SubElement(chan, "link").text = absolute_url(channel.site, "")
    ET.SubElement(chan, "language").text = channel.language

    for post in posts:
        url = absolute_url(channel.site, post.link)
        item = ET.SubElement(chan, "item")
        ET.SubElement(item, "title").text = post.title
        ET.SubElement(item, "link").text = url
        ET.SubElement(item, "guid", {"isPermaLink": "true"}).text = url
        ET.SubElement(item, "description").text = post.description
        ET.SubElement(item, "pubDate").text = rfc822(post.pub_date)

    ET.indent(rss)
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + ET.tostring(rss, encoding="unicode") + "\n"


def write_feed(channel: FeedChannel, posts: list[Post], out_dir: Path) -> Path:
    path = out_dir / FEED_FILENAME
    path.write_text(render_feed(channel, posts), encoding="utf-8")
    return path
