"""
Caddyfile serializer.

Writes a directive tree depth first, sorting every block immediately before
its children are written. Output is tab indented and brace delimited, with
arguments separated by single spaces and written verbatim.

Directives at level 0 never write their name: a top-level directive is a
site block (its arguments are the site addresses) or the global options
block (no arguments, sorted first). A level-0 directive with no name and no
children writes its arguments as a bare line.
"""

import io
import logging

from caddytree.config import DEFAULT_OPTIONS, FormatOptions
from caddytree.core.ordering import sort_block
from caddytree.core.tree import Block, Directive
from caddytree.core.types import TextSink
from caddytree.exceptions import NestingLevelError

logger = logging.getLogger(__name__)


def _check_level(level: int) -> None:
    if level < 0:
        raise NestingLevelError(level)


def write_block(
    block: Block,
    buffer: TextSink,
    level: int = 0,
    options: FormatOptions | None = None,
) -> None:
    """
    Sort a block for its level, then write each child.

    The sort is applied to ``block.children`` in place.

    Params:
        block: Block to write
        buffer: Text sink receiving the output
        level: Nesting level of the block's children (0 for the root)
        options: Output whitespace; defaults to tabs and LF

    Raises:
        NestingLevelError: If level is negative
    """
    _check_level(level)
    options = options or DEFAULT_OPTIONS

    sort_block(block, level)
    for directive in block.children:
        _write_directive(directive, buffer, level, options)


def write_directive(
    directive: Directive,
    buffer: TextSink,
    level: int = 0,
    options: FormatOptions | None = None,
) -> None:
    """
    Write one directive, and its sorted children, at a nesting level.

    Params:
        directive: Directive to write
        buffer: Text sink receiving the output
        level: Nesting level of the directive (0 for the root)
        options: Output whitespace; defaults to tabs and LF

    Raises:
        NestingLevelError: If level is negative
    """
    _check_level(level)
    _write_directive(directive, buffer, level, options or DEFAULT_OPTIONS)


def _write_directive(
    directive: Directive, buffer: TextSink, level: int, options: FormatOptions
) -> None:
    indent = options.indent * level
    buffer.write(indent)

    needs_whitespace = False
    if level > 0 and directive.name:
        buffer.write(directive.name)
        needs_whitespace = True

    for arg in directive.args:
        if needs_whitespace:
            buffer.write(" ")
        buffer.write(arg)
        needs_whitespace = True

    if directive.children:
        if needs_whitespace:
            buffer.write(" ")
        buffer.write("{" + options.newline)
        write_block(directive.block, buffer, level + 1, options)
        buffer.write(indent + "}")

    buffer.write(options.newline)


def marshal_string(block: Block, options: FormatOptions | None = None) -> str:
    """
    Serialize a root block into Caddyfile text.

    Params:
        block: Root block of the tree
        options: Output whitespace; defaults to tabs and LF

    Returns:
        The Caddyfile text
    """
    buffer = io.StringIO()
    write_block(block, buffer, 0, options)
    text = buffer.getvalue()
    logger.debug("Serialized %d top-level directive(s), %d chars", len(block.children), len(text))
    return text


def marshal(block: Block, options: FormatOptions | None = None) -> bytes:
    """Serialize a root block into Caddyfile bytes using ``options.encoding``."""
    options = options or DEFAULT_OPTIONS
    return marshal_string(block, options).encode(options.encoding)
