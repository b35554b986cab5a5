"""Version information for coursekit."""

__version__ = "0.1.0"
