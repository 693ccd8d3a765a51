from serverlist.models import ServerStatus
from serverlist.seed import load_seed_servers


def test_six_seed_servers_with_ids_one_to_six():
    servers = load_seed_servers()
    assert [s.id for s in servers] == [1, 2, 3, 4, 5, 6]
    assert servers[1].ip == "10.0.0.45"
    assert servers[2].status is ServerStatus.OFFLINE


def test_each_call_returns_fresh_objects():
    first = load_seed_servers()
    first[0].name = "mutated"
    assert load_seed_servers()[0].name == "ALPHA-SRV-01"
