"""explorer_network.config.defaults
================================

Small, stable default values for the network layer. They can be overridden
via environment variables or an external configuration file.

This module intentionally avoids importing from other packages to prevent
circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- API endpoints ----
# Main comic API; relative paths such as ``info.0.json`` resolve against it.
MAIN_DEFAULT_BASE_URL = "https://xkcd.com/"
# Search API; no public default, callers configure it explicitly.
SEARCH_DEFAULT_BASE_URL = ""
SEARCH_DEFAULT_PATH = "search"

# Debug builds attach request/response logging hooks.
DEBUG_DEFAULT = False
# Debug hooks log at most this many characters of each request/response body.
DEBUG_BODY_EXCERPT_CHARS = 2048
