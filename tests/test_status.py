import json

import pytest

from tailtray.display import DNSName, HostName, sanitize_hostname
from tailtray.status import Machine, RawMachine, Status, parse_status

SAMPLE = {
    "BackendState": "Running",
    "MagicDNSSuffix": "example.ts.net",
    "Self": {
        "DNSName": "laptop.example.ts.net.",
        "HostName": "Laptop",
        "TailscaleIPs": ["100.64.0.1", "fd7a::1"],
        "ExitNodeOption": False,
        "ExitNode": False,
    },
    "Peer": {
        "nodekey:aaa": {
            "DNSName": "server.example.ts.net.",
            "HostName": "server",
            "TailscaleIPs": ["100.64.0.2"],
            "ExitNodeOption": True,
            "ExitNode": False,
        },
        "nodekey:bbb": {
            "DNSName": "",
            "HostName": "Shared Service",
            "TailscaleIPs": ["100.64.0.3"],
        },
    },
}


def test_parse_status_running():
    status = parse_status(json.dumps(SAMPLE))
    assert status.tailscale_up is True
    assert status.self_node.tailscale_ips == ["100.64.0.1", "fd7a::1"]


def test_parse_status_accepts_bytes():
    assert parse_status(json.dumps(SAMPLE).encode()) == parse_status(json.dumps(SAMPLE))


def test_parse_status_display_names():
    status = parse_status(json.dumps(SAMPLE))
    assert status.self_node.display_name == "laptop"
    assert isinstance(status.self_node.display_name, DNSName)
    service = status.peers["nodekey:bbb"]
    assert isinstance(service.display_name, HostName)
    assert service.display_name == sanitize_hostname("Shared Service")


def test_parse_status_peer_keys_preserved():
    status = parse_status(json.dumps(SAMPLE))
    assert set(status.peers) == set(SAMPLE["Peer"])
    assert status.peers["nodekey:aaa"].exit_node_option is True


def test_parse_status_not_running():
    data = dict(SAMPLE, BackendState="Stopped")
    assert parse_status(json.dumps(data)).tailscale_up is False


def test_parse_status_empty_object():
    status = parse_status("{}")
    assert status == Status(self_node=RawMachine().to_machine(""))
    assert status.peers == {}


def test_parse_status_invalid_json():
    with pytest.raises(ValueError):
        parse_status("not json")


def test_parse_status_wrong_type():
    with pytest.raises(ValueError):
        parse_status(json.dumps({"Self": {"TailscaleIPs": "100.64.0.1"}}))


def test_parse_status_top_level_array():
    with pytest.raises(ValueError):
        parse_status("[]")


def test_to_machine_keeps_raw_fields():
    raw = RawMachine(dns_name="a.example.ts.net.", host_name="a", tailscale_ips=["100.64.0.9"])
    machine = raw.to_machine("example.ts.net")
    assert isinstance(machine, Machine)
    assert machine.tailscale_ips == raw.tailscale_ips
    assert machine.host_name == raw.host_name


def test_has_active_exit_node():
    status = parse_status(json.dumps(SAMPLE))
    assert status.has_active_exit_node() is False
    status.peers["nodekey:aaa"].exit_node = True
    assert status.has_active_exit_node() is True


def test_has_active_exit_node_self():
    status = Status(self_node=Machine(exit_node=True))
    assert status.has_active_exit_node() is True