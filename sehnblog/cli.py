"""CLI entry point for SehnBlog."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import CONTENT_DIR, LOG_LEVEL, PREFERENCES_FILE, PUBLIC_DIR, SITE_URL
from .errors import SehnBlogError
from .logging_utils import configure_logging


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sehnblog",
        description="Build a static blog from markdown posts.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"SehnBlog {__version__}",
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (default: %(default)s)")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_build = sub.add_parser("build", help="Build the static site")
    p_build.add_argument("--content", "-c", type=Path, default=CONTENT_DIR, help="Directory of markdown posts")
    p_build.add_argument("--out", "-o", type=Path, default=Path("./dist"), help="Output directory")
    p_build.add_argument("--public", type=Path, default=PUBLIC_DIR, help="Static assets copied as-is")
    p_build.add_argument("--site-url", default=SITE_URL or None, help="Absolute site URL (enables rss.xml)")
    p_build.add_argument("--drafts", action="store_true", help="Include posts marked draft")
    p_build.add_argument("--strict", action="store_true", help="Fail on invalid posts instead of skipping")

    p_posts = sub.add_parser("posts", help="List posts, newest first")
    p_posts.add_argument("--content", "-c", type=Path, default=CONTENT_DIR, help="Directory of markdown posts")
    p_posts.add_argument("--drafts", action="store_true", help="Include posts marked draft")

    p_scheme = sub.add_parser("scheme", help="Show or change the stored color scheme preference")
    p_scheme.add_argument("--file", type=Path, default=PREFERENCES_FILE, help="Preferences file")
    scheme_sub = p_scheme.add_subparsers(dest="action")
    scheme_sub.add_parser("get", help="Print the stored preference")
    p_set = scheme_sub.add_parser("set", help="Store a preference")
    p_set.add_argument("value", choices=["system", "light", "dark"])
    scheme_sub.add_parser("show", help="Print preference, OS scheme and effective scheme")

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    if args.cmd == "build":
        return _cmd_build(args)
    if args.cmd == "posts":
        return _cmd_posts(args)
    if args.cmd == "scheme":
        return _cmd_scheme(args)

    parser.print_help()
    return 2


def _cmd_build(args: Any) -> int:
    from .site.build import build_site

    try:
        report = build_site(
            args.content,
            args.out,
            site_url=args.site_url,
            public_dir=args.public,
            include_drafts=bool(args.drafts),
            strict=bool(args.strict),
        )
    except SehnBlogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Site generated")
    print(f"  Output: {report.get('out_dir')}")
    print(f"  Posts: {report.get('posts')}")
    print(f"  Feed: {report.get('feed') or 'skipped (no --site-url)'}")
    total_bytes = int(report.get("total_bytes") or 0)
    print(f"  Size: {total_bytes / 1024:.1f} KB")
    return 0


def _cmd_posts(args: Any) -> int:
    from .content.dates import format_date
    from .content.posts import load_posts

    posts = load_posts(args.content, include_drafts=bool(args.drafts))
    if not posts:
        print("No posts found")
        return 0

    for p in posts:
        draft = " (draft)" if p.draft else ""
        print(f"  {format_date(p.pub_date):13} {p.slug:32} {p.title}{draft}")
    return 0


def _cmd_scheme(args: Any) -> int:
    from .scheme import JsonFileStorage, Preference, PreferenceStore, detect_system_scheme, resolve_effective

    store = PreferenceStore(JsonFileStorage(args.file))
    action = args.action or "show"

    if action == "get":
        print(store.get().value)
        return 0

    if action == "set":
        store.set(Preference(args.value))
        stored = store.get()
        if stored.value != args.value:
            print(f"Error: could not write {args.file}", file=sys.stderr)
            return 1
        print(f"✓ Color scheme set: {stored.value}")
        return 0

    preference = store.get()
    os_scheme = detect_system_scheme()
    print(f"Preference: {preference.value}")
    print(f"OS scheme: {os_scheme.value}")
    print(f"Effective: {resolve_effective(preference, os_scheme).value}")
    return 0


if __name__ == "__main__":
    app()
