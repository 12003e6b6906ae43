"""HTML templates for the static site generator."""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import date
from html import escape

from ..config import COLOR_SCHEME_KEY
from ..content.dates import datetime_attr, format_date
from ..content.posts import Post
from ..scheme.preference import Preference
from ..scheme.switch import MOON_ICON, SELECT_ID, SUN_ICON, render_switch
from .styles import CSS

# Runs in <head> before first paint. Exposes updateDarkMode/isDarkMode, the
# host routines the switch script calls.
SCHEME_SCRIPT = """(function () {
  var key = %(key)s;
  var media = window.matchMedia("(prefers-color-scheme: dark)");
  function preference() {
    try {
      var v = localStorage.getItem(key);
      return v === "light" || v === "dark" ? v : "system";
    } catch (e) {
      return "system";
    }
  }
  window.isDarkMode = function () {
    return document.documentElement.classList.contains("dark");
  };
  window.updateDarkMode = function () {
    var p = preference();
    var dark = p === "dark" || (p === "system" && media.matches);
    var root = document.documentElement;
    root.classList.toggle("dark", dark);
    root.setAttribute("data-color-scheme", dark ? "dark" : "light");
  };
  window.updateDarkMode();
  media.addEventListener("change", window.updateDarkMode);
})();"""

SWITCH_SCRIPT = """(function () {
  var key = %(key)s;
  var select = document.getElementById(%(select_id)s);
  if (!select) return;
  var icon = select.parentNode.querySelector(".icon");
  function rerender() {
    var dark = window.isDarkMode();
    icon.classList.toggle(%(moon)s, dark);
    icon.classList.toggle(%(sun)s, !dark);
  }
  try {
    var v = localStorage.getItem(key);
    select.value = v === "light" || v === "dark" ? v : "system";
  } catch (e) {}
  select.addEventListener("change", function () {
    try { localStorage.setItem(key, select.value); } catch (e) {}
    window.updateDarkMode();
    rerender();
  });
  window.matchMedia("(prefers-color-scheme: dark)").addEventListener("change", rerender);
  rerender();
})();"""


def scheme_script(key: str = COLOR_SCHEME_KEY) -> str:
    return SCHEME_SCRIPT % {"key": json.dumps(key)}


def switch_script(key: str = COLOR_SCHEME_KEY) -> str:
    return SWITCH_SCRIPT % {
        "key": json.dumps(key),
        "select_id": json.dumps(SELECT_ID),
        "moon": json.dumps(f"icon-{MOON_ICON}"),
        "sun": json.dumps(f"icon-{SUN_ICON}"),
    }


def html_doc(
    title: str,
    site_title: str,
    home_href: str,
    body: str,
    description: str = "",
    feed_href: str | None = None,
    scheme_key: str = COLOR_SCHEME_KEY,
) -> str:
    head_extra = ""
    if description:
        head_extra += f'<meta name="description" content="{escape(description, quote=True)}">\n'
    if feed_href:
        head_extra += (
            f'<link rel="alternate" type="application/rss+xml" '
            f'title="{escape(site_title, quote=True)}" href="{escape(feed_href, quote=True)}">\n'
        )
    # Static markup is rendered for the default preference; the switch
    # script syncs it with storage on load.
    switch = render_switch(Preference.SYSTEM, SUN_ICON)
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(title)}</title>\n"
        f"{head_extra}"
        f"<script>{scheme_script(scheme_key)}</script>\n"
        f"<style>{CSS}</style>\n"
        "</head>\n"
        "<body>\n"
        "<header>\n"
        f'<a class="site-title" href="{escape(home_href, quote=True)}">{escape(site_title)}</a>\n'
        f"<nav>{link(feed_href, 'RSS') if feed_href else ''}{switch}</nav>\n"
        "</header>\n"
        "<main>\n"
        f"{body}\n"
        "</main>\n"
        f"<script>{switch_script(scheme_key)}</script>\n"
        "</body>\n"
        "</html>\n"
    )


def link(href: str, text: str) -> str:
    return f'<a href="{escape(href, quote=True)}">{escape(text)}</a>'


def time_tag(value: date) -> str:
    return f'<time datetime="{datetime_attr(value)}">{escape(format_date(value))}</time>'


def posts_index(posts: Iterable[Post]) -> str:
    lines = ['<ul class="posts">']
    for p in posts:
        lines.append(
            "<li>"
            f"{link(f'{p.slug}/', p.title)}"
            f'<span class="muted">{time_tag(p.pub_date)}</span>'
            "</li>"
        )
    lines.append("</ul>")
    return "\n".join(lines)


def post_page(post: Post, html: str) -> str:
    """Article body: hero image, title, dates, rendered markdown."""
    lines = ["<article>"]
    if post.hero_image:
        lines.append(f'<img class="hero" src="{escape(post.hero_image, quote=True)}" alt="">')
    lines.append(f"<h1>{escape(post.title)}</h1>")
    meta = time_tag(post.pub_date)
    if post.updated_date and post.updated_date != post.pub_date:
        meta += f" · Updated {time_tag(post.updated_date)}"
    lines.append(f'<div class="muted">{meta}</div>')
    lines.append("<hr>")
    lines.append(html)
    lines.append("</article>")
    return "\n".join(lines)
