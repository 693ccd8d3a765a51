"""
Design (forms.py)
- Purpose: Hold the add/edit form's draft outside of Tk so the save/cancel protocol can be
           tested headless. The dialog in ui.py only copies widget values in and out.
- Inputs: ServerRegistry (injected), record ids for edit.
- Outputs: ServerDraft while open; the stored ServerRecord on save.
- Side effects: save() calls registry.add or registry.update; cancel() touches nothing.
- Thread-safety: Main (Tk) thread only.

States: Closed -> Open(draft) -> Closed (save mutates the registry, cancel does not).
"""

from .config import (
    PLACEHOLDER_IP,
    PLACEHOLDER_LOCATION,
    PLACEHOLDER_STATUS,
    PLACEHOLDER_UPTIME,
)
from .models import ServerDraft, ServerRecord, ServerStatus
from .repository import ServerRegistry
from .utils import placeholder_name

MODE_ADD = "add"
MODE_EDIT = "edit"


class FormSession:
    def __init__(self, registry: ServerRegistry) -> None:
        self.registry = registry
        self.draft: ServerDraft | None = None
        # Only used for the dialog title; save() never looks at it.
        self.mode: str | None = None

    @property
    def is_open(self) -> bool:
        return self.draft is not None

    def open_add(self) -> ServerDraft:
        """
        Purpose: Seed a new-record template. No identifier is allocated until save().
        Outputs: the draft (also kept on self.draft)
        """
        self._ensure_closed()
        self.draft = ServerDraft(
            name=placeholder_name(len(self.registry)),
            ip=PLACEHOLDER_IP,
            status=ServerStatus.parse(PLACEHOLDER_STATUS),
            location=PLACEHOLDER_LOCATION,
            uptime=PLACEHOLDER_UPTIME,
        )
        self.mode = MODE_ADD
        return self.draft

    def open_edit(self, server_id: int) -> ServerDraft:
        """
        Purpose: Seed the draft as an exact copy of a stored record, id included.
        Raises: ServerNotFoundError (session stays closed).
        """
        self._ensure_closed()
        self.draft = self.registry.get(server_id).to_draft()
        self.mode = MODE_EDIT
        return self.draft

    def save(self) -> ServerRecord:
        """
        Purpose: Commit the draft. A draft whose id exists in the registry right now is an
                 edit; anything else is an add. add() ignores the draft's id, so a draft
                 whose record was deleted meanwhile is stored under a fresh id.
        Outputs: the stored record
        Side effects: Closes the session when the registry call succeeds.
        """
        draft = self._require_open()
        if self.registry.exists(draft.id):
            record = self.registry.update(draft.id, draft)
        else:
            record = self.registry.add(draft)
        self._close()
        return record

    def cancel(self) -> None:
        self._require_open()
        self._close()

    def _ensure_closed(self) -> None:
        if self.draft is not None:
            raise RuntimeError("A server form is already open")

    def _require_open(self) -> ServerDraft:
        if self.draft is None:
            raise RuntimeError("No server form is open")
        return self.draft

    def _close(self) -> None:
        self.draft = None
        self.mode = None
