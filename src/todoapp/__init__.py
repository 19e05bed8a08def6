"""todoapp - a small interactive to-do list manager."""

__version__ = "0.1.0"
