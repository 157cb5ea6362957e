"""Shared helpers for strap commands (terminal fonts, debug tracing)."""
