"""
Runtime configuration.

Values are read once from the environment at import time.

License: MIT
"""

import os

# --- PLATFORM ---

# Target the resolved styles are rendered on ("web", "ios", "android", "native")
PLATFORM = os.getenv("THEMESTYLE_PLATFORM", "native").strip().lower()

# Platforms where web-only properties such as `cursor` are kept
WEB_PLATFORMS = frozenset({"web"})

# --- RESOLUTION ---

# Pixel base used for `rem` when a theme does not define one
DEFAULT_ROOT_METRIC = 8

# --- LOGGING ---

LOG_LEVEL = os.getenv("THEMESTYLE_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# --- SERVICE ---

HOST = os.getenv("THEMESTYLE_HOST", "0.0.0.0")
PORT = int(os.getenv("THEMESTYLE_PORT", "8000"))


def is_web_platform(platform: str) -> bool:
    """Return True if `platform` renders web-only properties."""
    return (platform or "").strip().lower() in WEB_PLATFORMS
