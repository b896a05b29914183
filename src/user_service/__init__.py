"""User identity persistence layer."""

__version__ = "0.1.0"
