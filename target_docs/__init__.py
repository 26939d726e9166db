"""Per-target documentation page generator."""

__version__ = "0.1.0"
