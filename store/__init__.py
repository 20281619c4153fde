"""
Store Module

Record storage and persistence layer.

This module provides:
- Bootstrap of the backing JSON file (created as an empty array)
- Full-file load and rewrite of the record array
- Add, list, find and remove by record id
"""

__version__ = "0.1.0"
