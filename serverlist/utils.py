"""
Design (utils.py)
- Purpose: Reusable helpers: placeholder naming for new drafts, status rendering,
           footer timestamp, and row color tags.
- Inputs: Various helper parameters (counts, statuses, datetimes).
- Outputs: Helper results (strings).
- Side effects: None.
- Thread-safety: Stateless; safe to call from any thread.
"""

from datetime import datetime

from .config import PLACEHOLDER_PREFIX
from .models import ServerStatus


def placeholder_name(current_size: int) -> str:
    """
    Purpose: Name for a fresh "add" draft.
    Inputs: current_size (records currently in the registry)
    Outputs: "NEW-SRV-" + (current_size + 1) zero-padded to 2 digits, e.g. 6 -> "NEW-SRV-07".
    """
    return f"{PLACEHOLDER_PREFIX}{current_size + 1:02d}"


def format_status(status: ServerStatus) -> str:
    """Upper-case label used in the table, e.g. "ONLINE"."""
    return status.value.upper()


def status_tag(status: ServerStatus) -> str:
    return "online" if status is ServerStatus.ONLINE else "offline"


def footer_text(now: datetime | None = None) -> str:
    """
    Purpose: Status line shown at the bottom of the window.
    Inputs: now (defaults to the current local time)
    Outputs: "> System operational | Last update: HH:MM:SS"
    """
    now = now or datetime.now()
    return f"> System operational | Last update: {now.strftime('%H:%M:%S')}"
