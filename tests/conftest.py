import pytest

from serverlist.repository import ServerRegistry
from serverlist.seed import load_seed_servers


class Recorder:
    """Collects clipboard writes and notifications passed to a registry."""

    def __init__(self):
        self.clipboard = []
        self.notifications = []

    def copy(self, text):
        self.clipboard.append(text)

    def notify(self, message, duration_ms):
        self.notifications.append((message, duration_ms))


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def registry(recorder):
    return ServerRegistry(
        load_seed_servers(),
        on_notify=recorder.notify,
        clipboard=recorder.copy,
    )


@pytest.fixture
def empty_registry(recorder):
    return ServerRegistry(on_notify=recorder.notify, clipboard=recorder.copy)
