"""
Design (notify.py)
- Purpose: The two outward side effects of the registry: clipboard writes and user-facing
           notifications (in-window toast plus an optional desktop notification via plyer).
- Inputs: Tk root (anything with clipboard_clear/clipboard_append), optional toast callback.
- Outputs: None.
- Side effects: Writes the system clipboard; shows toasts; posts OS notifications.
- Thread-safety: Main (Tk) thread only.
"""

import logging
from typing import Callable

from plyer import notification

from .config import NOTIFICATIONS_ENABLED, NOTIFY_TITLE

logger = logging.getLogger(__name__)


class Notifier:
    """
    Design (Notifier)
    - Public attributes:
        desktop_enabled (bool): also post OS notifications (toggled from the Settings tab)
    - Public methods:
        copy_to_clipboard(text): clipboard writer handed to ServerRegistry
        notify(message, duration_ms): observer handed to ServerRegistry
    """

    def __init__(
        self,
        root,
        on_toast: Callable[[str, int], None] | None = None,
        desktop_enabled: bool = NOTIFICATIONS_ENABLED,
    ) -> None:
        self.root = root
        self.on_toast = on_toast
        self.desktop_enabled = desktop_enabled

    def copy_to_clipboard(self, text: str) -> None:
        self.root.clipboard_clear()
        self.root.clipboard_append(text)

    def notify(self, message: str, duration_ms: int) -> None:
        """
        Purpose: Show a transient confirmation.
        Inputs: message (display text), duration_ms (how long it stays visible)
        Side effects: Toast via on_toast; desktop notification if enabled. Desktop backend
                      errors (no notifier on this OS, etc.) are logged and ignored.
        """
        if self.on_toast is not None:
            self.on_toast(message, duration_ms)
        if not self.desktop_enabled:
            return
        try:
            notification.notify(
                title=NOTIFY_TITLE,
                message=message,
                timeout=max(1, round(duration_ms / 1000)),
            )
        except Exception:
            logger.warning("Desktop notification failed: %s", message, exc_info=True)
