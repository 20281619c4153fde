"""
Commands Module

Command-line surface for the record store.

This module provides:
- Immutable invocation arguments with optional YAML defaults
- Per-operation argument validation and store bootstrap
- Operation dispatch with named outcomes
- Typer CLI entry point
"""

__version__ = "0.1.0"
