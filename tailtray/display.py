"""Display names for tailnet machines."""

from __future__ import annotations

import re
from typing import Protocol, Union

MAX_LABEL_LENGTH = 63

_COMMON_SUFFIXES = (".local", ".localdomain", ".lan")
_EDGE_JUNK = re.compile(r"^[^a-z0-9]+|[^a-z0-9]+$")
_DASH_CHARS = frozenset(" ._-")


class HostName(str):
    """A machine name derived from its operating-system hostname."""


class DNSName(str):
    """A machine name derived from its MagicDNS name."""


Name = Union[HostName, DNSName]


class _Peer(Protocol):
    dns_name: str
    host_name: str


def _has_suffix(name: str, suffix: str) -> bool:
    name = name.removesuffix(".")
    suffix = suffix.removesuffix(".").removeprefix(".")
    base = name.removesuffix(suffix) if suffix else name
    return len(base) < len(name) and base.endswith(".")


def trim_suffix(name: str, suffix: str) -> str:
    """Strip the DNS ``suffix`` from ``name`` and drop any trailing dot."""
    if _has_suffix(name, suffix):
        name = name.removesuffix(".")
        name = name.removesuffix(suffix.strip("."))
    return name.removesuffix(".")


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _sanitize_label(label: str) -> str:
    label = _EDGE_JUNK.sub("", label.removesuffix(".").lower())
    out: list[str] = []
    for char in label:
        if len(out) >= MAX_LABEL_LENGTH:
            break
        if char in _DASH_CHARS:
            out.append("-")
        elif _is_alnum(char):
            out.append(char)
    return "".join(out)


def sanitize_hostname(hostname: str) -> str:
    """Turn an arbitrary hostname into a single valid DNS label."""
    for suffix in _COMMON_SUFFIXES:
        hostname = hostname.removesuffix(suffix)
    return _sanitize_label(hostname)


def dns_or_quote_hostname(dns_suffix: str, peer: _Peer) -> Name:
    """Prefer the peer's short MagicDNS name, falling back to its hostname."""
    base_name = trim_suffix(peer.dns_name, dns_suffix)
    if base_name:
        return DNSName(base_name)
    return HostName(sanitize_hostname(peer.host_name))