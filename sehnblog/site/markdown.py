"""Markdown to HTML for post bodies.

A deterministic CommonMark subset: headings, paragraphs, lists, block
quotes, GFM tables, fenced code and inline code, links, images, bold and
emphasis. Everything is escaped by default.
"""

from __future__ import annotations

import re
from html import escape

# Fence languages rendered as a terminal window
TERMINAL_LANGUAGES = frozenset({"terminal", "shell-session", "console"})

_ORDERED_ITEM = re.compile(r"^\d+[.)]\s+")
_HEADING = re.compile(r"^(#{1,6})\s+(.*?)(?:\s+#+)?\s*$")
_UNSAFE_SCHEMES = ("javascript:", "data:", "vbscript:")
_PLACEHOLDER = re.compile(r"\x00(\d+)\x00")
_STAR_EM = re.compile(r"(?<![\w*])\*(?!\s)(.+?)(?<!\s)\*(?![\w*])")
_UNDERSCORE_EM = re.compile(r"(?<!\w)_(?!\s)(.+?)(?<!\s)_(?!\w)")


def render_markdown(md: str) -> str:
    md = md.replace("\r\n", "\n").replace("\r", "\n")
    lines = md.split("\n")
    out: list[str] = []
    para: list[str] = []

    def flush_paragraph() -> None:
        text = " ".join(s.strip() for s in para if s.strip())
        if text:
            out.append(f"<p>{render_inline(text)}</p>")
        para.clear()

    i = 0
    while i < len(lines):
        line = lines[i]
        stripped = line.strip()

        if stripped.startswith(("```", "~~~")):
            flush_paragraph()
            fence = stripped[:3]
            lang = stripped[3:].strip().split(" ", 1)[0].lower()
            code: list[str] = []
            i += 1
            while i < len(lines) and not lines[i].strip().startswith(fence):
                code.append(lines[i])
                i += 1
            i += 1  # closing fence (or end of input)
            out.append(_code_block("\n".join(code), lang))
            continue

        if stripped in ("---", "***", "___"):
            flush_paragraph()
            out.append("<hr>")
            i += 1
            continue

        if _is_table_start(lines, i):
            flush_paragraph()
            rows: list[str] = []
            while i < len(lines) and lines[i].strip().startswith("|"):
                rows.append(lines[i])
                i += 1
            out.append(_table(rows))
            continue

        heading = _HEADING.match(stripped)
        if heading:
            flush_paragraph()
            level = len(heading.group(1))
            out.append(f"<h{level}>{render_inline(heading.group(2))}</h{level}>")
            i += 1
            continue

        if stripped.startswith(("- ", "* ", "+ ")):
            flush_paragraph()
            out.append("<ul>")
            while i < len(lines) and lines[i].strip().startswith(("- ", "* ", "+ ")):
                out.append(f"<li>{render_inline(lines[i].strip()[2:].strip())}</li>")
                i += 1
            out.append("</ul>")
            continue

        if _ORDERED_ITEM.match(stripped):
            flush_paragraph()
            start = int(re.match(r"\d+", stripped).group(0))
            out.append("<ol>" if start == 1 else f'<ol start="{start}">')
            while i < len(lines) and _ORDERED_ITEM.match(lines[i].strip()):
                item = _ORDERED_ITEM.sub("", lines[i].strip(), count=1)
                out.append(f"<li>{render_inline(item)}</li>")
                i += 1
            out.append("</ol>")
            continue

        if stripped.startswith(">"):
            flush_paragraph()
            quoted: list[str] = []
            while i < len(lines) and lines[i].lstrip().startswith(">"):
                quoted.append(lines[i].lstrip()[1:].removeprefix(" "))
                i += 1
            out.append(f"<blockquote>\n{render_markdown(chr(10).join(quoted))}\n</blockquote>")
            continue

        if not stripped:
            flush_paragraph()
            i += 1
            continue

        para.append(line)
        i += 1

    flush_paragraph()
    return "\n".join(out)


def _code_block(code: str, lang: str) -> str:
    body = escape(code, quote=False)
    if lang in TERMINAL_LANGUAGES:
        # Window chrome is the empty .top bar.
        return f'<div class="terminal"><div class="top"></div><pre>{body}</pre></div>'
    if lang:
        return f'<pre><code class="language-{escape(lang)}">{body}</code></pre>'
    return f"<pre><code>{body}</code></pre>"


def render_inline(text: str) -> str:
    stash: list[str] = []
    html = _inline(text.replace("\x00", ""), stash)
    # Stashed fragments may hold placeholders of their own.
    while "\x00" in html:
        html = _PLACEHOLDER.sub(lambda m: stash[int(m.group(1))], html)
    return html


def _inline(text: str, stash: list[str]) -> str:
    """Escape ``text``, leaving ``\\x00N\\x00`` placeholders for finished markup."""

    def keep(html: str) -> str:
        stash.append(html)
        return f"\x00{len(stash) - 1}\x00"

    def nested(m: re.Match[str]) -> str:
        return _inline(m.group(1), stash)

    def image(m: re.Match[str]) -> str:
        src = safe_href(m.group(2))
        if not src:
            return keep(escape(m.group(1)))
        return keep(f'<img src="{escape(src)}" alt="{escape(m.group(1))}">')

    def anchor(m: re.Match[str]) -> str:
        href = safe_href(m.group(2))
        label = nested(m)
        if not href:
            return keep(label)
        return keep(f'<a href="{escape(href)}">{label}</a>')

    text = re.sub(r"`([^`]+)`", lambda m: keep(f"<code>{escape(m.group(1), quote=False)}</code>"), text)
    text = re.sub(r"!\[([^\]]*)\]\(([^)\s]+)\)", image, text)
    text = re.sub(r"\[([^\]]+)\]\(([^)\s]+)\)", anchor, text)
    text = re.sub(r"\*\*(.+?)\*\*", lambda m: keep(f"<strong>{nested(m)}</strong>"), text)
    text = _STAR_EM.sub(lambda m: keep(f"<em>{nested(m)}</em>"), text)
    text = _UNDERSCORE_EM.sub(lambda m: keep(f"<em>{nested(m)}</em>"), text)
    return escape(text, quote=False)


def safe_href(href: str | None) -> str | None:
    if href is None:
        return None
    cleaned = href.strip()
    if not cleaned or cleaned.lower().startswith(_UNSAFE_SCHEMES):
        return None
    return cleaned


def _is_table_start(lines: list[str], i: int) -> bool:
    if i + 1 >= len(lines):
        return False
    header, sep = lines[i].strip(), lines[i + 1].strip()
    return header.startswith("|") and sep.startswith("|") and "---" in sep


def _table(rows: list[str]) -> str:
    cells = [[c.strip() for c in r.strip().strip("|").split("|")] for r in rows]
    header, body = cells[0], cells[2:]
    out = ["<table>", "<thead>", "<tr>"]
    out.extend(f"<th>{render_inline(h)}</th>" for h in header)
    out.extend(["</tr>", "</thead>", "<tbody>"])
    for row in body:
        out.append("<tr>" + "".join(f"<td>{render_inline(c)}</td>" for c in row) + "</tr>")
    out.extend(["</tbody>", "</table>"])
    return "\n".join(out)
