"""The tailnet status as reported by ``tailscale status --json``."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any

from .display import HostName, Name, dns_or_quote_hostname


def _get(obj: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = obj.get(key)
    if value is None:
        return default
    if not isinstance(value, kind):
        raise ValueError(f"field {key!r} has unexpected type {type(value).__name__}")
    return value


def _object(value: Any, what: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be a JSON object")
    return value


@dataclass
class RawMachine:
    """A machine entry exactly as the status report describes it."""

    dns_name: str = ""
    host_name: str = ""
    tailscale_ips: list[str] = field(default_factory=list)
    exit_node_option: bool = False
    exit_node: bool = False

    @classmethod
    def from_json(cls, obj: Any) -> RawMachine:
        obj = _object(obj, "machine")
        ips = _get(obj, "TailscaleIPs", list, [])
        if not all(isinstance(ip, str) for ip in ips):
            raise ValueError("field 'TailscaleIPs' must hold strings")
        return cls(
            dns_name=_get(obj, "DNSName", str, ""),
            host_name=_get(obj, "HostName", str, ""),
            tailscale_ips=list(ips),
            exit_node_option=_get(obj, "ExitNodeOption", bool, False),
            exit_node=_get(obj, "ExitNode", bool, False),
        )

    def to_machine(self, dns_suffix: str) -> Machine:
        """Attach a display name computed against ``dns_suffix``."""
        values = {f.name: getattr(self, f.name) for f in fields(RawMachine)}
        return Machine(**values, display_name=dns_or_quote_hostname(dns_suffix, self))


@dataclass
class Machine(RawMachine):
    """A machine together with the name to show for it."""

    display_name: Name = field(default_factory=lambda: HostName(""))


@dataclass
class Status:
    """Whether the backend is up, this machine, and its peers by key."""

    tailscale_up: bool = False
    self_node: Machine = field(default_factory=Machine)
    peers: dict[str, Machine] = field(default_factory=dict)

    def has_active_exit_node(self) -> bool:
        """True if this machine or any peer is the active exit node."""
        return self.self_node.exit_node or any(p.exit_node for p in self.peers.values())


def parse_status(data: str | bytes) -> Status:
    """Parse the JSON output of ``tailscale status --json``.

    Raises ValueError on malformed input.
    """
    raw = _object(json.loads(data), "status")
    suffix = _get(raw, "MagicDNSSuffix", str, "")
    backend_state = _get(raw, "BackendState", str, "")
    peers_raw = _object(raw.get("Peer"), "Peer")
    peers = {
        key: RawMachine.from_json(value).to_machine(suffix)
        for key, value in peers_raw.items()
    }
    return Status(
        tailscale_up="Running" in backend_state,
        self_node=RawMachine.from_json(raw.get("Self")).to_machine(suffix),
        peers=peers,
    )