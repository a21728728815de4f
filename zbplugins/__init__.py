"""Chat-bot configuration command, coloured logging and transport-free plugin logic."""

__version__ = "1.5.0"