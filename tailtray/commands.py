"""Running the tailscale CLI and desktop helpers."""

from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
import sys
from typing import Sequence

from .status import Status, parse_status

log = logging.getLogger(__name__)

_DNS_ENABLED = re.compile(r"Tailscale DNS:\s*enabled")
_DNS_DISABLED = re.compile(r"Tailscale DNS:\s*disabled")
_ACCEPT_ROUTES_FALSE = re.compile(r"--accept-routes\s+is\s+false")


class CommandError(Exception):
    """An external command could not be run or failed."""

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


def _run(args: Sequence[str], *, combine: bool = True, stdin: bytes | None = None) -> str:
    try:
        proc = subprocess.run(
            list(args),
            input=stdin,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT if combine else subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        raise CommandError(f"{args[0]}: {exc}") from exc
    output = (proc.stdout or b"").decode("utf-8", "replace")
    if proc.returncode != 0:
        raise CommandError(
            f"{' '.join(args)} exited with status {proc.returncode}", output
        )
    return output


def run_command(*args: str) -> str:
    """Run a command and return its combined stdout and stderr.

    Raises CommandError if it cannot start or exits with a non-zero status.
    """
    return _run(args)


def executable(command: str) -> bool:
    """True if ``command`` can be found on the PATH."""
    return shutil.which(command) is not None


def split_lines(s: str) -> list[str]:
    """Split on newlines, without a trailing empty line."""
    lines = s.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def trim_space(s: str) -> str:
    """Strip leading and trailing spaces and tabs."""
    return s.strip(" \t")


def contains_accept_routes_false(msg: str) -> bool:
    """True if a health message says ``--accept-routes is false``."""
    return _ACCEPT_ROUTES_FALSE.search(msg) is not None


def parse_dns_status(output: str) -> bool:
    """Read whether Tailscale DNS is enabled from ``tailscale dns status``."""
    for line in split_lines(output):
        if _DNS_ENABLED.match(line):
            return True
        if _DNS_DISABLED.match(line):
            return False
    return False


def parse_routes_status(output: str | bytes) -> bool:
    """Read whether subnet routes are accepted from status JSON.

    Raises ValueError on malformed input.
    """
    import json

    data = json.loads(output)
    if data is None:
        return True
    if not isinstance(data, dict):
        raise ValueError("status must be a JSON object")
    health = data.get("Health") or []
    if not isinstance(health, list) or not all(isinstance(m, str) for m in health):
        raise ValueError("field 'Health' must be a list of strings")
    return not any(contains_accept_routes_false(msg) for msg in health)


def get_dns_status() -> bool:
    """Ask the CLI whether Tailscale DNS is in use."""
    return parse_dns_status(run_command("tailscale", "dns", "status"))


def get_routes_status() -> bool:
    """Ask the CLI whether subnet routes are accepted."""
    return parse_routes_status(run_command("tailscale", "status", "--json"))


def get_status() -> Status:
    """Fetch and parse the current tailnet status."""
    return parse_status(_run(("tailscale", "status", "--json"), combine=False))


def open_browser(url: str) -> None:
    """Open ``url`` in the desktop's browser, logging on failure."""
    if sys.platform.startswith("linux"):
        cmd = ["xdg-open", url]
    elif sys.platform == "win32":
        cmd = ["rundll32", "url.dll,FileProtocolHandler", url]
    elif sys.platform == "darwin":
        cmd = ["open", url]
    else:
        log.warning("could not open link: unsupported platform")
        return
    try:
        subprocess.Popen(cmd)
    except OSError as exc:
        log.warning("could not open link: %s", exc)


def _applescript_quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def notify(title: str, message: str) -> bool:
    """Show a desktop notification; return whether it was delivered."""
    if sys.platform == "darwin":
        script = (
            f"display notification {_applescript_quote(message)} "
            f"with title {_applescript_quote(title)}"
        )
        cmd = ["osascript", "-e", script]
    elif sys.platform == "win32":
        log.info("%s: %s", title, message)
        return False
    else:
        cmd = ["notify-send", title, message]
    try:
        _run(cmd)
    except CommandError as exc:
        log.warning("notification failed: %s", exc)
        return False
    return True


def _clipboard_command() -> list[str]:
    if sys.platform == "darwin":
        candidates = [["pbcopy"]]
    elif sys.platform == "win32":
        candidates = [["clip"]]
    else:
        candidates = [
            ["xclip", "-in", "-selection", "clipboard"],
            ["xsel", "--input", "--clipboard"],
        ]
        if os.environ.get("WAYLAND_DISPLAY"):
            candidates.insert(0, ["wl-copy"])
    for cmd in candidates:
        if shutil.which(cmd[0]):
            return cmd
    raise CommandError("no clipboard utility available")


def copy_to_clipboard(text: str) -> None:
    """Put ``text`` on the system clipboard.

    Raises CommandError if no clipboard tool works.
    """
    _run(_clipboard_command(), stdin=text.encode("utf-8"))