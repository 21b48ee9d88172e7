"""Status parsing, display names and CLI helpers for a local Tailscale client."""

__version__ = "0.1.0"
__all__ = ["commands", "display", "status"]