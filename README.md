# tailtray

Python helpers for working with a local Tailscale client through the
`tailscale` command: reading its status, naming machines the way the CLI
does, checking whether DNS and subnet routes are in use, and a few desktop
conveniences (opening a browser, notifications, the clipboard).

## Requirements

- Python 3.10 or later
- the `tailscale` command on `PATH` for the functions that query it
- optionally a clipboard tool (`wl-copy`, `xclip`, `xsel`, `pbcopy` or
  `clip`) and a notifier (`notify-send` or `osascript`)

## Installation

```
pip install .
```

## Modules

### `tailtray.status`

`parse_status(data)` turns the JSON printed by `tailscale status --json`
into a `Status`:

- `tailscale_up`: true when `BackendState` contains `Running`
- `self_node`: this machine, a `Machine`
- `peers`: a dict of `Machine` objects keyed as in the `Peer` object

A `Machine` has `dns_name`, `host_name`, `tailscale_ips`,
`exit_node_option`, `exit_node` and a `display_name`.
`Status.has_active_exit_node()` is true if this machine or any peer is the
active exit node. Malformed JSON or fields of the wrong type raise
`ValueError`. `RawMachine.from_json(obj)` and `RawMachine.to_machine(dns_suffix)`
build single entries.

### `tailtray.display`

- `trim_suffix(name, suffix)` strips a DNS suffix and any trailing dot.
- `sanitize_hostname(hostname)` turns a hostname into one valid DNS label
  (lower case, `.local`/`.localdomain`/`.lan` removed, at most 63
  characters).
- `dns_or_quote_hostname(dns_suffix, peer)` returns a `DNSName` with the
  peer's short MagicDNS name, or, if that is empty, a `HostName` from its
  sanitized hostname. Both are `str` subclasses.

### `tailtray.commands`

- `run_command(*args)` runs a command and returns its combined output;
  `CommandError` (with the output in `.output`) is raised if it cannot start
  or exits non-zero.
- `get_status()`, `get_dns_status()` and `get_routes_status()` query
  `tailscale` and return a `Status` or a bool.
- `parse_dns_status(output)` reads `tailscale dns status` output;
  `parse_routes_status(output)` reports routes as off when a `Health`
  message says `--accept-routes is false`.
- `executable(command)`, `split_lines(s)`, `trim_space(s)`,
  `contains_accept_routes_false(msg)`.
- `open_browser(url)`, `notify(title, message)` and
  `copy_to_clipboard(text)` for desktop actions.

```python
from tailtray.commands import get_status, get_dns_status, get_routes_status

status = get_status()
print(status.tailscale_up, status.has_active_exit_node())
for key, peer in status.peers.items():
    print(peer.display_name, peer.tailscale_ips)
print("DNS:", get_dns_status(), "routes:", get_routes_status())
```

## What it does not do

There is no tray menu, no command to start and no refresh loop. The package
does not connect or disconnect, switch exit nodes or toggle DNS and routes on
its own; a program that wants that calls `run_command` with the matching
`tailscale` arguments (for example `tailscale set --accept-dns=true`).

## Running the tests

```
pip install ".[test]"
pytest
```