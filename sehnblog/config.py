"""Configuration constants and paths for SehnBlog."""

import os
from pathlib import Path

# Channel metadata used by the index page and the RSS feed
SITE_TITLE = os.getenv("SEHNBLOG_SITE_TITLE", "Gui Sehn")
SITE_DESCRIPTION = os.getenv("SEHNBLOG_SITE_DESCRIPTION", "Notes on software, mostly.")

# Absolute site URL; required for the RSS feed
SITE_URL = os.getenv("SEHNBLOG_SITE_URL", "")

# Content and public asset locations
CONTENT_DIR = Path(os.getenv("SEHNBLOG_CONTENT_DIR", "./content/blog"))
PUBLIC_DIR = Path(os.getenv("SEHNBLOG_PUBLIC_DIR", "./public"))

# Key the color scheme preference is stored under (browser localStorage and CLI store)
COLOR_SCHEME_KEY = os.getenv("SEHNBLOG_COLOR_SCHEME_KEY", "color_scheme")

# CLI preference store - user-level, survives project moves
PREFERENCES_FILE = Path(
    os.getenv("SEHNBLOG_PREFERENCES_FILE", Path.home() / ".sehnblog" / "preferences.json")
)

# Forces the detected OS scheme ("light" or "dark"); unset means autodetect
OS_SCHEME = os.getenv("SEHNBLOG_OS_SCHEME", "")

LOG_LEVEL = os.getenv("SEHNBLOG_LOG_LEVEL", "WARNING")
