"""
caddytree - build Caddyfile directive trees and serialize them to text

caddytree models a Caddyfile as nested blocks of directives, offers
fetch-or-create style assembly helpers, and writes the tree out with a
deterministic, stable ordering of sibling directives.
"""

from importlib.metadata import version

from caddytree.config import DEFAULT_OPTIONS, FormatOptions
from caddytree.core import (
    UNORDERED,
    Block,
    Directive,
    compare_directives,
    create_block,
    create_directive,
    sort_block,
)
from caddytree.exceptions import CaddyTreeError, FormatOptionsError, NestingLevelError
from caddytree.serializer import marshal, marshal_string, write_block, write_directive

__version__ = version("caddytree")

__all__ = [
    "__version__",
    "Block",
    "Directive",
    "create_block",
    "create_directive",
    "compare_directives",
    "sort_block",
    "UNORDERED",
    "FormatOptions",
    "DEFAULT_OPTIONS",
    "marshal",
    "marshal_string",
    "write_block",
    "write_directive",
    "CaddyTreeError",
    "FormatOptionsError",
    "NestingLevelError",
]
