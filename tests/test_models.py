from serverlist.models import ServerDraft, ServerRecord, ServerStatus


def test_status_parse_is_permissive():
    assert ServerStatus.parse("online") is ServerStatus.ONLINE
    assert ServerStatus.parse("  ONLINE ") is ServerStatus.ONLINE
    assert ServerStatus.parse("Offline") is ServerStatus.OFFLINE
    assert ServerStatus.parse("rebooting") is ServerStatus.OFFLINE
    assert ServerStatus.parse("") is ServerStatus.OFFLINE


def test_to_draft_keeps_identifier_and_fields():
    record = ServerRecord(4, "DELTA-SRV-04", "192.168.100.12", ServerStatus.ONLINE, "Yekaterinburg", "99.7%")
    draft = record.to_draft()
    assert draft.id == 4
    assert draft.with_id(4) == record


def test_draft_is_not_aliased_to_record():
    record = ServerRecord(1, "A", "1.1.1.1", ServerStatus.ONLINE, "X", "1%")
    draft = record.to_draft()
    draft.name = "changed"
    assert record.name == "A"


def test_new_draft_has_no_identifier():
    draft = ServerDraft(name="n", ip="i")
    assert draft.id is None
    assert draft.status is ServerStatus.OFFLINE
