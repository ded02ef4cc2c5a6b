"""Terminal control commands as ANSI escape sequences, and terminal event types."""

__version__ = "0.1.0"

__all__ = ["command", "cursor", "keys", "event", "describe"]