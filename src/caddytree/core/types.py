"""
Core type definitions for caddytree.

This module contains the constants and type aliases shared by the tree
model, the ordering policy and the serializer.
"""

import re
import sys
from typing import Protocol

# Order of a directive that was never given an explicit position.
UNORDERED = sys.maxsize

# Snippet definitions are named "(name)" in a Caddyfile.
SNIPPET_PATTERN = re.compile(r"^\(.*\)$")

DirectiveKey = tuple[str, str]


class TextSink(Protocol):
    """Anything the serializer can write text into (``io.StringIO``, open files)."""

    def write(self, text: str, /) -> int: ...
