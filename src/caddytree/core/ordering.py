"""
Sibling ordering applied before a block is written.

Each nesting level is sorted independently and in place. Keys, in order:

1. At level 0 only, global directives (no arguments) come first.
2. Explicit ``order`` ascending; ``UNORDERED`` sorts last.
3. ``name`` ascending.
4. First argument ascending, when both directives have one and they differ.
5. ``discriminator`` ascending.

The sort is stable: directives tying on every key keep their current
relative order.
"""

from functools import cmp_to_key

from caddytree.core.tree import Block, Directive


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_directives(a: Directive, b: Directive, level: int) -> int:
    """
    Compare two sibling directives at a nesting level.

    Params:
        a: First directive
        b: Second directive
        level: Nesting level of the block holding both (0 for the root)

    Returns:
        Negative if ``a`` sorts first, positive if ``b`` does, 0 on a full tie
    """
    if level == 0 and a.is_global != b.is_global:
        return -1 if a.is_global else 1
    if a.order != b.order:
        return _cmp(a.order, b.order)
    if a.name != b.name:
        return _cmp(a.name, b.name)
    if a.args and b.args and a.args[0] != b.args[0]:
        return _cmp(a.args[0], b.args[0])
    return _cmp(a.discriminator, b.discriminator)


def sort_directives(directives: list[Directive], level: int) -> None:
    """Stable in-place sort of sibling directives for ``level``."""
    directives.sort(key=cmp_to_key(lambda a, b: compare_directives(a, b, level)))


def sort_block(block: Block, level: int) -> None:
    """Sort a block's children in place for ``level``."""
    sort_directives(block.children, level)
