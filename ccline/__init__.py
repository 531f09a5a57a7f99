"""Status line configuration models, colour themes and interactive editor state."""

__version__ = "1.0.9"