from datetime import datetime

from serverlist.models import ServerStatus
from serverlist.utils import footer_text, format_status, placeholder_name, status_tag


def test_placeholder_name_is_zero_padded():
    assert placeholder_name(0) == "NEW-SRV-01"
    assert placeholder_name(6) == "NEW-SRV-07"
    assert placeholder_name(99) == "NEW-SRV-100"


def test_status_rendering():
    assert format_status(ServerStatus.ONLINE) == "ONLINE"
    assert status_tag(ServerStatus.OFFLINE) == "offline"


def test_footer_text():
    now = datetime(2024, 1, 2, 9, 5, 7)
    assert footer_text(now) == "> System operational | Last update: 09:05:07"
