# src/chipdrop/config.py

from __future__ import annotations

ROWS = 6
COLUMNS = 7
CONNECT_N = 4

PLAYERS = (1, 2)
HUMAN_PLAYER = 1
AI_PLAYER = 2

# Fallback order for the hard opponent, center column first
PREFERRED_COLUMNS = (3, 2, 4, 1, 5, 0, 6)

# Save files: <base>_<timestamp>.txt
SAVE_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"
SAVE_EXTENSION = ".txt"
SAVE_ENCODING = "utf-8"
DEFAULT_SAVE_BASE = "C4Save"

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.5  # short pause so the reply isn't instant

# Logging (off unless configure_logging() is called)
LOG_LEVEL = "INFO"
LOG_DIR = "logs"
LOG_ROTATION = "10 MB"
