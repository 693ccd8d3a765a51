import logging
import sys
import tkinter as tk

from serverlist.config import LOG_LEVEL
from serverlist.notify import Notifier
from serverlist.repository import ServerRegistry
from serverlist.seed import load_seed_servers
from serverlist.ui import AppUI, ToastStack

# -------------------
# Logging setup
# -------------------

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def build_app(root: tk.Tk) -> AppUI:
    """Wire the registry to the clipboard/notification side effects and hand it to the UI."""
    toasts = ToastStack(root)
    notifier = Notifier(root, on_toast=toasts.show)
    registry = ServerRegistry(
        load_seed_servers(),
        on_notify=notifier.notify,
        clipboard=notifier.copy_to_clipboard,
    )
    logger.info("Loaded %d servers", len(registry))
    return AppUI(root, registry, notifier)


if __name__ == "__main__":
    root = tk.Tk()
    app = build_app(root)
    root.mainloop()
