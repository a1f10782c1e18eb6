# config.py
"""
Configuration settings for the living wallpaper.
"""
import datetime

# ── Basic Application Settings ──────────────────────────────────────────────

# Seconds between schedule re-polls.  Coarse on purpose: transitions are long
# (30 min from the builder), so a redraw every few minutes is smooth enough.
REFRESH_INTERVAL_SEC = 5 * 60

# Decoded images kept in memory (current still, or both ends of a transition)
IMAGE_CACHE_SIZE = 3

# Image extensions accepted as a bare wallpaper and by the playlist builder
IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg")

# Display settings
FULLSCREEN = True
WINDOWED_SIZE = (1920, 1080)
WINDOW_TITLE = "timewall"

# Main-loop rate (event polling only; rendering happens on ticks / redraws)
POLL_FPS = 4

# Default log level name for the console handler
LOG_LEVEL = "INFO"

# ── Playlist builder defaults ───────────────────────────────────────────────

SECONDS_IN_DAY       = 86400
TRANSITION_DURATION  = 1800       # 30 minutes per cross-fade
TRANSITION_TYPE      = "overlay"
BUILDER_ANCHOR       = datetime.datetime(2001, 1, 1, 0, 0, 0)
BUILDER_OUTPUT_NAME  = "dynamic_wallpaper.xml"
MIN_BUILDER_IMAGES   = 2
