import pytest

from serverlist import notify
from serverlist.notify import Notifier


class FakeRoot:
    def __init__(self):
        self.calls = []

    def clipboard_clear(self):
        self.calls.append(("clear",))

    def clipboard_append(self, text):
        self.calls.append(("append", text))


class FakeNotification:
    def __init__(self, fail=False):
        self.sent = []
        self.fail = fail

    def notify(self, **kwargs):
        if self.fail:
            raise NotImplementedError("no backend")
        self.sent.append(kwargs)


@pytest.fixture
def fake_notification(monkeypatch):
    fake = FakeNotification()
    monkeypatch.setattr(notify, "notification", fake)
    return fake


def test_copy_to_clipboard_replaces_contents():
    root = FakeRoot()
    Notifier(root).copy_to_clipboard("10.0.0.45")
    assert root.calls == [("clear",), ("append", "10.0.0.45")]


def test_notify_shows_toast_and_desktop(fake_notification):
    toasts = []
    notifier = Notifier(FakeRoot(), on_toast=lambda m, d: toasts.append((m, d)))
    notifier.notify("Server X deleted", 2000)
    assert toasts == [("Server X deleted", 2000)]
    assert fake_notification.sent == [
        {"title": "Server IP List", "message": "Server X deleted", "timeout": 2},
    ]


def test_desktop_can_be_disabled(fake_notification):
    toasts = []
    notifier = Notifier(FakeRoot(), on_toast=lambda m, d: toasts.append(m), desktop_enabled=False)
    notifier.notify("hello", 2000)
    assert toasts == ["hello"]
    assert fake_notification.sent == []


def test_desktop_failure_is_ignored(monkeypatch):
    monkeypatch.setattr(notify, "notification", FakeNotification(fail=True))
    toasts = []
    Notifier(FakeRoot(), on_toast=lambda m, d: toasts.append(m)).notify("hello", 2000)
    assert toasts == ["hello"]


def test_short_durations_round_up_to_one_second(fake_notification):
    Notifier(FakeRoot()).notify("x", 200)
    assert fake_notification.sent[0]["timeout"] == 1
