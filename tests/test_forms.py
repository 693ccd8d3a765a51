import pytest

from serverlist.forms import MODE_ADD, MODE_EDIT, FormSession
from serverlist.models import ServerStatus
from serverlist.repository import ServerNotFoundError


@pytest.fixture
def form(registry):
    return FormSession(registry)


def test_open_add_seeds_placeholder_without_allocating(form, registry):
    draft = form.open_add()
    assert draft.id is None
    assert (draft.name, draft.ip, draft.status, draft.location, draft.uptime) == (
        "NEW-SRV-07", "0.0.0.0", ServerStatus.OFFLINE, "Unknown", "0%",
    )
    assert form.mode == MODE_ADD
    assert len(registry) == 6


def test_cancel_add_leaves_registry_and_counter(form, registry):
    form.open_add()
    form.cancel()
    assert not form.is_open
    assert len(registry) == 6
    form.open_add()
    assert form.save().id == 7


def test_edit_draft_is_exact_copy(form, registry):
    draft = form.open_edit(5)
    assert form.mode == MODE_EDIT
    assert draft.with_id(draft.id) == registry.get(5)


def test_edit_draft_is_not_aliased(form, registry):
    draft = form.open_edit(5)
    draft.name = "changed"
    assert registry.get(5).name == "EPSILON-SRV-05"
    form.cancel()
    assert registry.get(5).name == "EPSILON-SRV-05"


def test_save_edit_updates_in_place(form, registry, recorder):
    draft = form.open_edit(1)
    draft.uptime = "12%"
    saved = form.save()
    assert saved.id == 1
    assert registry.get(1).uptime == "12%"
    assert len(registry) == 6
    assert recorder.notifications == [("Server ALPHA-SRV-01 updated", 2000)]
    assert not form.is_open


def test_save_after_record_deleted_falls_back_to_add(form, registry):
    draft = form.open_edit(2)
    draft.name = "BETA-REVIVED"
    registry.remove(2)
    saved = form.save()
    assert saved.id == 7
    assert [r.id for r in registry.list()] == [1, 3, 4, 5, 6, 7]


def test_open_edit_missing_keeps_form_closed(form):
    with pytest.raises(ServerNotFoundError):
        form.open_edit(99)
    assert not form.is_open


def test_only_one_draft_at_a_time(form):
    form.open_add()
    with pytest.raises(RuntimeError):
        form.open_edit(1)


def test_save_or_cancel_when_closed(form):
    with pytest.raises(RuntimeError):
        form.save()
    with pytest.raises(RuntimeError):
        form.cancel()


def test_placeholder_tracks_current_size(form, registry):
    registry.remove(6)
    registry.remove(5)
    assert form.open_add().name == "NEW-SRV-05"
