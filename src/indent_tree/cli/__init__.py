"""Command-line interface module for Indent Tree.

This module provides the indent-tree tool for querying and editing tree
buffers stored as indented text files.
"""

from .main import main

__all__ = ["main"]
