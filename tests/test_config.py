from serverlist import config


def test_tabs_in_display_order():
    assert config.TABS == ("servers", "settings")
    assert [name.upper() for name in config.TABS] == ["SERVERS", "SETTINGS"]


def test_notification_duration_is_two_seconds():
    assert config.NOTIFY_DURATION_MS == 2000
