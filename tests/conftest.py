"""
Shared test fixtures for the caddytree test suite.
"""

import pytest

from caddytree import Block, Directive


@pytest.fixture
def root() -> Block:
    """An empty root block."""
    return Block()


@pytest.fixture
def site(root: Block) -> Directive:
    """A ``:80`` site block attached to ``root``.

    Directives added to it are written at nesting level 1, where their
    names appear in the output.
    """
    return root.get_or_create_directive("site", ":80").add_args(":80")
