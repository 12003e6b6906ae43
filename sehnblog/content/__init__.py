"""Blog content: posts and dates."""

from .dates import datetime_attr, format_date, rfc822
from .posts import Post, load_posts, parse_post, sort_posts, split_front_matter

__all__ = [
    "datetime_attr",
    "format_date",
    "rfc822",
    "Post",
    "load_posts",
    "parse_post",
    "sort_posts",
    "split_front_matter",
]
