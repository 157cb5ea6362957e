"""strap: plugin-aware command dispatcher."""

__version__ = "0.1.0"
