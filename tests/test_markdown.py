"""Tests for markdown → HTML rendering."""

import unittest

from sehnblog.site.markdown import render_inline, render_markdown, safe_href


class TestRenderMarkdown(unittest.TestCase):
    def test_renders_headings_and_paragraphs(self) -> None:
        html = render_markdown("# Title\n\nFirst line\nsame paragraph.\n\n## Sub ##\n")
        self.assertIn("<h1>Title</h1>", html)
        self.assertIn("<p>First line same paragraph.</p>", html)
        self.assertIn("<h2>Sub</h2>", html)

    def test_renders_lists(self) -> None:
        html = render_markdown("- A\n- B\n\n3. three\n4. four\n")
        self.assertIn("<ul>\n<li>A</li>\n<li>B</li>\n</ul>", html)
        self.assertIn('<ol start="3">', html)
        self.assertIn("<li>four</li>", html)

    def test_renders_code_block_escaped_with_language(self) -> None:
        html = render_markdown("```python\nif a < b:\n    pass\n```\n")
        self.assertIn('<pre><code class="language-python">if a &lt; b:\n    pass</code></pre>', html)

    def test_terminal_fence_gets_window_chrome(self) -> None:
        html = render_markdown("```terminal\n$ echo <hi>\n<hi>\n```")
        self.assertIn('<div class="terminal"><div class="top"></div><pre>$ echo &lt;hi&gt;\n&lt;hi&gt;</pre></div>', html)

    def test_unterminated_fence_runs_to_end(self) -> None:
        html = render_markdown("```\ncode")
        self.assertIn("<pre><code>code</code></pre>", html)

    def test_renders_blockquote_and_rule(self) -> None:
        html = render_markdown("> quoted **text**\n\n---\n")
        self.assertIn("<blockquote>\n<p>quoted <strong>text</strong></p>\n</blockquote>", html)
        self.assertIn("<hr>", html)

    def test_renders_table(self) -> None:
        html = render_markdown("| Name | Value |\n| --- | --- |\n| A | `1` |\n")
        self.assertIn("<th>Name</th>", html)
        self.assertIn("<td><code>1</code></td>", html)

    def test_escapes_raw_html(self) -> None:
        html = render_markdown("<script>alert(1)</script>")
        self.assertNotIn("<script>", html)
        self.assertIn("&lt;script&gt;", html)


class TestRenderInline(unittest.TestCase):
    def test_links_emphasis_and_code(self) -> None:
        html = render_inline("See [the **docs**](https://x.test), *really*, and `a*b*c`.")
        self.assertIn('<a href="https://x.test">the <strong>docs</strong></a>', html)
        self.assertIn("<em>really</em>", html)
        self.assertIn("<code>a*b*c</code>", html)

    def test_code_inside_link_label(self) -> None:
        self.assertEqual(render_inline("[`cmd`](/x)"), '<a href="/x"><code>cmd</code></a>')

    def test_unsafe_links_are_dropped(self) -> None:
        html = render_inline("Click [bad](javascript:alert(1)) and [ok](https://example.com).")
        self.assertNotIn("javascript:", html.lower())
        self.assertIn("https://example.com", html)

    def test_images(self) -> None:
        self.assertEqual(render_inline("![a cat](/cat.png)"), '<img src="/cat.png" alt="a cat">')

    def test_snake_case_is_not_emphasis(self) -> None:
        self.assertEqual(render_inline("snake_case_name"), "snake_case_name")

    def test_nul_bytes_are_stripped(self) -> None:
        self.assertEqual(render_inline("a\x00b"), "ab")

    def test_safe_href(self) -> None:
        self.assertIsNone(safe_href(" data:text/html,x"))
        self.assertIsNone(safe_href(""))
        self.assertEqual(safe_href(" /path "), "/path")


if __name__ == "__main__":
    unittest.main()
