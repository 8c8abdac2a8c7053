"""Application configuration constants."""

from __future__ import annotations

APP_NAME = "CastCatalog"
APP_VERSION = "0.1.0"
ORG_NAME = "CastCatalog"

# Title given to the invisible root group of a new catalog
DEFAULT_ROOT_TITLE = "Media"

# Stream URL suffix -> content type sent along with a cast/playback request
STREAM_MIME_TYPES = {
    ".m3u8": "application/x-mpegurl",
    ".mpd": "application/dash+xml",
    ".mp4": "video/mp4",
    ".webm": "video/webm",
}
