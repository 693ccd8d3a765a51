"""
Design (repository.py)
- Purpose: Encapsulate the server collection behind a tiny API, so the UI never touches a
           global list directly. A fresh registry can be built per test.
- Inputs: ServerDraft objects for add/update, identifiers for lookup/remove.
- Outputs: Copies of stored ServerRecord objects.
- Side effects: Mutates the internal ordered dict; calls the optional on_notify observer
                after successful update/remove/copy and the optional clipboard writer on copy.
- Thread-safety: Main (Tk) thread only; every user action runs to completion before the next.
"""

import logging
from dataclasses import replace
from typing import Callable, Iterable

from .config import NOTIFY_DURATION_MS
from .models import MUTABLE_FIELDS, ServerDraft, ServerRecord, ServerStatus

logger = logging.getLogger(__name__)

Notify = Callable[[str, int], None]
Clipboard = Callable[[str], None]


class ServerNotFoundError(KeyError):
    """Raised when an operation references an identifier that is not in the registry."""

    def __init__(self, server_id: int) -> None:
        super().__init__(server_id)
        self.server_id = server_id

    def __str__(self) -> str:
        return f"Server {self.server_id} not found"


class ServerRegistry:
    """
    Design (ServerRegistry)
    - State:
        _servers: {id -> ServerRecord}, insertion ordered
        _last_id: highest identifier ever issued, so removed ids are never handed out again
        _on_notify: optional observer (message, duration_ms)
        _clipboard: optional clipboard writer (text)
    """

    def __init__(
        self,
        records: Iterable[ServerRecord] = (),
        on_notify: Notify | None = None,
        clipboard: Clipboard | None = None,
        notify_duration_ms: int = NOTIFY_DURATION_MS,
    ) -> None:
        self._servers: dict[int, ServerRecord] = {}
        self._last_id = 0
        self._on_notify = on_notify
        self._clipboard = clipboard
        self._notify_duration_ms = notify_duration_ms
        for record in records:
            if record.id in self._servers:
                raise ValueError(f"Duplicate server id {record.id}")
            self._servers[record.id] = record.copy()
            self._last_id = max(self._last_id, record.id)

    def __len__(self) -> int:
        return len(self._servers)

    # -------- Reads --------

    def list(self) -> list[ServerRecord]:
        """
        Purpose: Current records in insertion order.
        Outputs: list of copies; mutating them does not affect the registry.
        """
        return [record.copy() for record in self._servers.values()]

    def get(self, server_id: int) -> ServerRecord:
        return self._require(server_id).copy()

    def exists(self, server_id: int | None) -> bool:
        return server_id is not None and server_id in self._servers

    # -------- CRUD --------

    def add(self, draft: ServerDraft) -> ServerRecord:
        """
        Purpose: Store a new record under the next identifier.
        Inputs: draft (its own id, if any, is ignored)
        Outputs: the created record (copy)
        Side effects: Appends to _servers; advances _last_id. Never fails.
        """
        new_id = max(self._servers, default=0)
        new_id = max(new_id, self._last_id) + 1
        record = draft.with_id(new_id)
        self._servers[new_id] = record
        self._last_id = new_id
        logger.info("Added server %s (%s) as id %d", record.name, record.ip, new_id)
        return record.copy()

    def update(self, server_id: int, patch: ServerDraft | None = None, **changes) -> ServerRecord:
        """
        Purpose: Change fields of an existing record; the identifier is kept.
        Inputs: server_id (int)
                patch (ServerDraft, optional): replaces every mutable field; patch.id is ignored
                **changes: individual fields (name, ip, status, location, uptime), applied
                           after patch; fields not named keep their current value
        Outputs: the updated record (copy)
        Side effects: Replaces the stored record; emits "Server <name> updated".
        Raises: ServerNotFoundError or TypeError (unknown field), leaving the collection untouched.
        """
        record = self._require(server_id)
        unknown = sorted(set(changes) - set(MUTABLE_FIELDS))
        if unknown:
            raise TypeError(f"Cannot update server field(s): {', '.join(unknown)}")

        fields = {}
        if patch is not None:
            fields = {name: getattr(patch, name) for name in MUTABLE_FIELDS}
        fields.update(changes)
        if "status" in fields:
            fields["status"] = ServerStatus.parse(fields["status"])

        updated = replace(record, **fields)
        self._servers[server_id] = updated
        logger.info("Updated server id %d (%s)", server_id, ", ".join(fields) or "no fields")
        self._emit(f"Server {updated.name} updated")
        return updated.copy()

    def remove(self, server_id: int) -> ServerRecord:
        """
        Purpose: Delete a record.
        Outputs: the removed record
        Side effects: Emits "Server <name> deleted" using the name captured before removal.
        Raises: ServerNotFoundError, leaving the collection untouched.
        """
        record = self._require(server_id)
        name = record.name
        del self._servers[server_id]
        logger.info("Removed server %s (id %d)", name, server_id)
        self._emit(f"Server {name} deleted")
        return record

    # -------- Side effects --------

    def copy_address(self, ip: str) -> None:
        """
        Purpose: Put the literal ip on the clipboard and confirm with a notification.
        Side effects: One clipboard write, one "IP <ip> copied to clipboard" notification.
                      Clipboard errors are logged; the operation still counts as done.
        """
        if self._clipboard is not None:
            try:
                self._clipboard(ip)
            except Exception:
                logger.warning("Clipboard write failed for %s", ip, exc_info=True)
        self._emit(f"IP {ip} copied to clipboard")

    # -------- Internals --------

    def _require(self, server_id: int) -> ServerRecord:
        record = self._servers.get(server_id)
        if record is None:
            logger.warning("Server id %s not found", server_id)
            raise ServerNotFoundError(server_id)
        return record

    def _emit(self, message: str) -> None:
        if self._on_notify is not None:
            self._on_notify(message, self._notify_duration_ms)
