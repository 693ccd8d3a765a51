"""
Design (models.py)
- Purpose: Define simple, typed data structures for domain entities (ServerRecord, ServerDraft).
- Inputs: Field values (str, int, ServerStatus).
- Outputs: Dataclass instances.
- Side effects: None.
- Thread-safety: Dataclasses are plain containers; ServerRegistry owns the stored ones.
"""

from dataclasses import dataclass, replace
from enum import Enum

# Everything on a record except the identifier
MUTABLE_FIELDS = ("name", "ip", "status", "location", "uptime")


class ServerStatus(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"

    @classmethod
    def parse(cls, text: str) -> "ServerStatus":
        """
        Purpose: Turn loosely-typed form text into a status.
        Inputs: text (any case, surrounding whitespace allowed)
        Outputs: ServerStatus; unknown text falls back to OFFLINE.
        """
        try:
            return cls((text or "").strip().lower())
        except ValueError:
            return cls.OFFLINE


@dataclass
class ServerRecord:
    """
    Design (ServerRecord)
    - Purpose: A single server entry shown on the dashboard.
    - Fields:
        id: unique positive integer, assigned by the registry and never changed.
        name: free-form label.
        ip: free-form address text (not validated).
        status: ONLINE / OFFLINE.
        location: free-form location text.
        uptime: free-form display string, e.g. "99.9%".
    """
    id: int
    name: str
    ip: str
    status: ServerStatus
    location: str
    uptime: str

    def to_draft(self) -> "ServerDraft":
        """Exact editable copy, identifier included."""
        return ServerDraft(
            id=self.id,
            name=self.name,
            ip=self.ip,
            status=self.status,
            location=self.location,
            uptime=self.uptime,
        )

    def copy(self) -> "ServerRecord":
        return replace(self)


@dataclass
class ServerDraft:
    """
    Design (ServerDraft)
    - Purpose: An unsaved record held by an open form. id is None until the registry allocates one.
    """
    name: str
    ip: str
    status: ServerStatus = ServerStatus.OFFLINE
    location: str = ""
    uptime: str = ""
    id: int | None = None

    def with_id(self, server_id: int) -> ServerRecord:
        return ServerRecord(
            id=server_id,
            name=self.name,
            ip=self.ip,
            status=self.status,
            location=self.location,
            uptime=self.uptime,
        )
