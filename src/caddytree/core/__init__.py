"""
Core caddytree components.

This package provides the directive tree model, its lookup and mutation
API, and the ordering policy applied before serialization.
"""

from caddytree.core.ordering import compare_directives, sort_block, sort_directives
from caddytree.core.tree import Block, Directive, create_block, create_directive
from caddytree.core.types import SNIPPET_PATTERN, UNORDERED, DirectiveKey, TextSink

__all__ = [
    "Block",
    "Directive",
    "create_block",
    "create_directive",
    "compare_directives",
    "sort_block",
    "sort_directives",
    "UNORDERED",
    "SNIPPET_PATTERN",
    "DirectiveKey",
    "TextSink",
]
