"""Inline CSS used by the static site generator."""

CSS = r"""
:root {
  --bg: #fbfbfa;
  --fg: #1a1a1a;
  --muted: #6a6a6a;
  --border: #e3e3e3;
  --link: #0b5ed7;
  --code-bg: #f1f1f1;
  --term-bg: #1e1e1e;
  --term-fg: #e6e6e6;
  --term-bar: #3a3a3a;
  --sans: system-ui, -apple-system, "Segoe UI", Roboto, sans-serif;
  --mono: ui-monospace, "SF Mono", "Consolas", "Liberation Mono", monospace;
  --page-max: 720px;
  color-scheme: light;
}

html.dark {
  --bg: #141414;
  --fg: #e8e8e8;
  --muted: #9a9a9a;
  --border: #2c2c2c;
  --link: #7ab0ff;
  --code-bg: #222;
  --term-bg: #0c0c0c;
  --term-bar: #2a2a2a;
  color-scheme: dark;
}

body {
  font-family: var(--sans);
  font-size: 17px;
  line-height: 1.65;
  max-width: var(--page-max);
  margin: 0 auto;
  padding: 2.25rem 1.25rem 3rem;
  background: var(--bg);
  color: var(--fg);
  -webkit-font-smoothing: antialiased;
}

a { color: var(--link); text-decoration: none; }
a:hover { text-decoration: underline; text-underline-offset: 0.15em; }

header {
  display: flex;
  justify-content: space-between;
  align-items: center;
  border-bottom: 1px solid var(--border);
  padding-bottom: 0.75rem;
  margin-bottom: 2rem;
  gap: 0.5rem 1rem;
  flex-wrap: wrap;
}

header .site-title { font-weight: 600; color: var(--fg); }
nav { display: flex; align-items: center; gap: 1rem; font-size: 14px; }
nav a { color: var(--muted); }

h1, h2, h3 { line-height: 1.3; margin: 1.75rem 0 0.75rem; }
h1 { font-size: 28px; margin-top: 0; }
h2 { font-size: 21px; }
h3 { font-size: 18px; }

.muted { color: var(--muted); font-size: 14px; }
.sr-only {
  position: absolute; width: 1px; height: 1px; padding: 0; margin: -1px;
  overflow: hidden; clip: rect(0, 0, 0, 0); white-space: nowrap; border: 0;
}

ul.posts { list-style: none; padding-left: 0; }
ul.posts li { margin: 0 0 1.25rem; }
ul.posts time { display: block; }

img { max-width: 100%; height: auto; }
.hero { margin: 0 0 1.5rem; }

table { border-collapse: collapse; width: 100%; margin: 1rem 0; font-size: 15px; }
th, td { border: 1px solid var(--border); padding: 0.35rem 0.5rem; vertical-align: top; }
th { text-align: left; }

pre {
  overflow-x: auto;
  padding: 0.75rem 1rem;
  border: 1px solid var(--border);
  background: var(--code-bg);
  font-size: 14px;
}

code { font-family: var(--mono); }
p code, li code { background: var(--code-bg); padding: 0.1rem 0.25rem; }

.terminal {
  margin: 1rem 0;
  border-radius: 6px;
  overflow: hidden;
  background: var(--term-bg);
}
.terminal .top {
  height: 22px;
  background: var(--term-bar);
  background-image:
    radial-gradient(circle at 12px 11px, #ff5f56 5px, transparent 6px),
    radial-gradient(circle at 30px 11px, #ffbd2e 5px, transparent 6px),
    radial-gradient(circle at 48px 11px, #27c93f 5px, transparent 6px);
}
.terminal pre { margin: 0; border: none; background: transparent; color: var(--term-fg); }

.scheme-switch { display: flex; align-items: center; gap: 0.25rem; padding: 0.25rem; cursor: pointer; }
.scheme-switch:focus-within { outline: 1px solid var(--border); }
.scheme-switch select { background: transparent; color: inherit; border: none; outline: 0; cursor: pointer; }
.scheme-switch .icon { display: inline-block; width: 1em; height: 1em; }
.scheme-switch .icon-sun::before { content: "\2600"; }
.scheme-switch .icon-moon::before { content: "\263E"; }

blockquote {
  margin: 1rem 0;
  padding: 0 1rem;
  border-left: 3px solid var(--border);
  color: var(--muted);
}

hr { border: none; border-top: 1px solid var(--border); margin: 2rem 0; }

@media print {
  body { background: #fff; color: #000; max-width: none; padding: 1rem; }
  .scheme-switch { display: none; }
}
"""
