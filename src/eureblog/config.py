"""Local configuration for eureblog."""

from __future__ import annotations

import os


DEFAULT_SITE_NAME = "Eure Blog"
DEFAULT_BASE_URL = "https://blog.eure.dev"
DEFAULT_GITHUB_REPO = "eure-lang/blog.eure.dev"
DEFAULT_DESCRIPTION = "A blog written in Eure."
DEFAULT_PYGMENTS_STYLE = "monokai"
DEFAULT_CSS_CLASS_PREFIX = "hl-"

# Name of the document's own format; code tagged with it is highlighted recursively.
HOST_LANGUAGE = "eure"

EUREBLOG_SITE_NAME = os.getenv("EUREBLOG_SITE_NAME", DEFAULT_SITE_NAME)
EUREBLOG_BASE_URL = os.getenv("EUREBLOG_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
EUREBLOG_GITHUB_REPO = os.getenv("EUREBLOG_GITHUB_REPO", DEFAULT_GITHUB_REPO)
EUREBLOG_DEFAULT_DESCRIPTION = os.getenv("EUREBLOG_DEFAULT_DESCRIPTION", DEFAULT_DESCRIPTION)
EUREBLOG_PYGMENTS_STYLE = os.getenv("EUREBLOG_PYGMENTS_STYLE", DEFAULT_PYGMENTS_STYLE)
EUREBLOG_CSS_CLASS_PREFIX = os.getenv("EUREBLOG_CSS_CLASS_PREFIX", DEFAULT_CSS_CLASS_PREFIX)
