"""
Design (config.py)
- Purpose: Centralize constants and configuration.
- Inputs: LOG_LEVEL environment variable (optional).
- Outputs: Constants (titles, notification timing, draft placeholders, settings, colors).
- Side effects: None.
- Thread-safety: N/A (read-only constants).
"""

import os

APP_TITLE = "> SERVER IP LIST"
APP_SUBTITLE = "System monitoring interface v2.4.1"
WINDOW_TITLE = "Server IP List"

LOG_LEVEL = os.getenv("LOG_LEVEL", "info").upper()

# Toasts stay visible for this long and then dismiss themselves
NOTIFY_DURATION_MS = 2000
NOTIFY_TITLE = "Server IP List"

# Values seeded into a fresh "add" draft (name is generated, see utils.placeholder_name)
PLACEHOLDER_PREFIX = "NEW-SRV-"
PLACEHOLDER_IP = "0.0.0.0"
PLACEHOLDER_STATUS = "offline"
PLACEHOLDER_LOCATION = "Unknown"
PLACEHOLDER_UPTIME = "0%"

# Shown read-only on the Settings tab
REFRESH_INTERVAL_SEC = 30
NOTIFICATIONS_ENABLED = True
THEME = "terminal_green"

TABS = ("servers", "settings")

# Terminal palette
COLOR_BG = "#0a0f0a"
COLOR_PANEL = "#111a11"
COLOR_FG = "#33ff66"
COLOR_MUTED = "#6b8f6b"
COLOR_OFFLINE = "#ff5555"
