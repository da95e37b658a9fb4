"""Terminal music player core: command parsing, a control daemon and client, and interface state."""

__version__ = "0.1.0"