"""
caddytree exception classes.

This package provides the exception types raised by caddytree for
consistent error handling and reporting.
"""

from caddytree.exceptions.core import (
    CaddyTreeError,
    FormatOptionsError,
    NestingLevelError,
)

__all__ = [
    "CaddyTreeError",
    "FormatOptionsError",
    "NestingLevelError",
]
