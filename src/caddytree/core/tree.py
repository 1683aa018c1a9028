"""
Directive tree model for caddytree.

A Caddyfile is modelled as a ``Block`` (an ordered list of child
directives) whose ``Directive`` children each own a nested ``Block`` of
their own. Ownership is strictly tree shaped: a directive appears in exactly
one block and nodes carry no back references.

Nodes are compared by identity wherever the API needs to find "this node"
(``Block.remove``). Two directives with equal fields are still distinct
nodes.
"""

import logging

from pydantic import BaseModel, Field

from caddytree.core.types import SNIPPET_PATTERN, UNORDERED, DirectiveKey, TextSink

logger = logging.getLogger(__name__)


class Block(BaseModel):
    """
    Ordered container of directives.

    The child order is the insertion order until the block is serialized;
    serialization sorts ``children`` in place.
    """

    children: list["Directive"] = Field(default_factory=list)

    def add_directive(self, directive: "Directive") -> "Directive":
        """
        Append a directive at the end of this block.

        No uniqueness check is made; appending a second directive with an
        existing (name, discriminator) pair creates a duplicate.

        Params:
            directive: Directive to append

        Returns:
            The appended directive
        """
        self.children.append(directive)
        return directive

    def get_or_create_directive(self, name: str, discriminator: str = "") -> "Directive":
        """
        Get the first child matching the key, creating it when missing.

        Repeated calls with the same key return the same node, which makes
        tree assembly idempotent.

        Params:
            name: Directive name
            discriminator: Secondary key separating directives sharing a name

        Returns:
            The existing or newly appended directive
        """
        existing = self.get_first_match(name, discriminator)
        if existing is None:
            logger.debug("Creating directive %r (discriminator %r)", name, discriminator)
            existing = self.add_directive(create_directive(name, discriminator))
        return existing

    def get_first_match(self, name: str, discriminator: str = "") -> "Directive | None":
        """
        Find the first child with exactly this name and discriminator.

        Params:
            name: Directive name
            discriminator: Discriminator to match exactly

        Returns:
            The first match in current child order, or None
        """
        for directive in self.children:
            if directive.key == (name, discriminator):
                return directive
        return None

    def get_all_by_name(self, name: str) -> list["Directive"]:
        """Return every child called ``name``, whatever its discriminator."""
        return [directive for directive in self.children if directive.name == name]

    def remove(self, directive_to_delete: "Directive") -> None:
        """
        Remove a specific child node.

        Matching is by identity, so an equal-looking but distinct directive
        is left in place. Removing a node that is not a child does nothing.

        Params:
            directive_to_delete: The node to detach
        """
        remaining = [d for d in self.children if d is not directive_to_delete]
        if len(remaining) != len(self.children):
            logger.debug("Removed directive %r", directive_to_delete.name)
        self.children = remaining

    def remove_all_matches(self, name: str, discriminator: str = "") -> None:
        """
        Remove every child with exactly this name and discriminator.

        The remaining children keep their relative order.

        Params:
            name: Directive name
            discriminator: Discriminator to match exactly
        """
        remaining = [d for d in self.children if d.key != (name, discriminator)]
        removed = len(self.children) - len(remaining)
        if removed:
            logger.debug(
                "Removed %d directive(s) %r (discriminator %r)", removed, name, discriminator
            )
        self.children = remaining

    def write(self, buffer: TextSink, level: int = 0, options=None) -> None:
        """Sort and write this block's children into ``buffer`` at ``level``."""
        from caddytree.serializer import write_block

        write_block(self, buffer, level, options)

    def marshal(self, options=None) -> bytes:
        """Serialize this block as a whole Caddyfile, encoded to bytes."""
        from caddytree.serializer import marshal

        return marshal(self, options)

    def marshal_string(self, options=None) -> str:
        """Serialize this block as a whole Caddyfile."""
        from caddytree.serializer import marshal_string

        return marshal_string(self, options)


class Directive(BaseModel):
    """
    A named Caddyfile statement with arguments and nested directives.

    Params:
        name: Directive keyword (not written at the top level)
        discriminator: Secondary lookup key for directives sharing a name
        args: Arguments, written verbatim in order
        order: Explicit sort priority; ``UNORDERED`` sorts after any set value
        block: The directive's own children
    """

    name: str
    discriminator: str = ""
    args: list[str] = Field(default_factory=list)
    order: int = UNORDERED
    block: Block = Field(default_factory=Block)

    @property
    def children(self) -> list["Directive"]:
        return self.block.children

    @property
    def key(self) -> DirectiveKey:
        return (self.name, self.discriminator)

    @property
    def is_global(self) -> bool:
        """True when the directive has no arguments."""
        return len(self.args) == 0

    @property
    def is_snippet(self) -> bool:
        """True when the name has the ``(name)`` snippet definition form."""
        return SNIPPET_PATTERN.match(self.name) is not None

    def add_args(self, *args: str) -> "Directive":
        """
        Append one or more arguments, keeping their order.

        Params:
            *args: Arguments to append; duplicates are kept

        Returns:
            This directive, for chaining
        """
        self.args.extend(args)
        return self

    # The child API is forwarded to the owned block.

    def add_directive(self, directive: "Directive") -> "Directive":
        return self.block.add_directive(directive)

    def get_or_create_directive(self, name: str, discriminator: str = "") -> "Directive":
        return self.block.get_or_create_directive(name, discriminator)

    def get_first_match(self, name: str, discriminator: str = "") -> "Directive | None":
        return self.block.get_first_match(name, discriminator)

    def get_all_by_name(self, name: str) -> list["Directive"]:
        return self.block.get_all_by_name(name)

    def remove(self, directive_to_delete: "Directive") -> None:
        self.block.remove(directive_to_delete)

    def remove_all_matches(self, name: str, discriminator: str = "") -> None:
        self.block.remove_all_matches(name, discriminator)


Block.model_rebuild()


def create_directive(name: str, discriminator: str = "") -> Directive:
    """
    Create an empty directive.

    Params:
        name: Directive name
        discriminator: Secondary lookup key

    Returns:
        A directive with no arguments, no children and ``UNORDERED`` order
    """
    return Directive(name=name, discriminator=discriminator)


def create_block() -> Block:
    """Create an empty directive container."""
    return Block()
