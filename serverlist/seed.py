"""
Design (seed.py)
- Purpose: Provide the fixed list of servers the dashboard starts with.
- Inputs: None.
- Outputs: load_seed_servers() -> list[ServerRecord] (fresh copies on every call).
- Side effects: None.
- Thread-safety: Read-only table; safe from any thread.
"""

from .models import ServerRecord, ServerStatus

# (id, name, ip, status, location, uptime)
_SEED_ROWS = (
    (1, "ALPHA-SRV-01", "192.168.1.100", "online", "Moscow DC", "99.9%"),
    (2, "BETA-SRV-02", "10.0.0.45", "online", "Saint Petersburg", "99.8%"),
    (3, "GAMMA-SRV-03", "172.16.0.233", "offline", "Novosibirsk", "95.2%"),
    (4, "DELTA-SRV-04", "192.168.100.12", "online", "Yekaterinburg", "99.7%"),
    (5, "EPSILON-SRV-05", "10.10.10.88", "online", "Kazan", "99.9%"),
    (6, "ZETA-SRV-06", "172.31.255.1", "online", "Rostov", "98.9%"),
)


def load_seed_servers() -> list[ServerRecord]:
    """
    Build the seed records. Each call returns new objects, so two registries never share state.
    """
    return [
        ServerRecord(
            id=server_id,
            name=name,
            ip=ip,
            status=ServerStatus(status),
            location=location,
            uptime=uptime,
        )
        for server_id, name, ip, status, location, uptime in _SEED_ROWS
    ]
