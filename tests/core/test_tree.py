"""
Tests for the directive tree model and its lookup/mutation API.

Focus Areas:
1. Directive construction defaults
2. Fetch-or-create idempotence
3. Lookup by key and by name
4. Identity based and key based removal
"""

import logging

from caddytree import UNORDERED, Block, Directive, create_block, create_directive


class TestDirectiveConstruction:
    """Tests for new directive defaults."""

    def test_create_directive_defaults(self):
        """A new directive is unordered, argument-less and childless."""
        directive = create_directive("reverse_proxy", "api")

        assert directive.name == "reverse_proxy"
        assert directive.discriminator == "api"
        assert directive.order == UNORDERED
        assert directive.args == []
        assert directive.children == []

    def test_discriminator_defaults_to_empty(self):
        """The discriminator is optional."""
        assert create_directive("encode").discriminator == ""

    def test_create_block_is_empty(self):
        """A new block has no children."""
        assert create_block().children == []

    def test_directives_do_not_share_children(self):
        """Each directive owns a distinct block."""
        first = create_directive("handle")
        second = create_directive("handle")

        first.get_or_create_directive("respond")

        assert first.block is not second.block
        assert second.children == []

    def test_add_args_appends_in_order(self):
        """Arguments are appended in call order without deduplication."""
        directive = create_directive("header")
        directive.add_args("X-Frame-Options")
        directive.add_args("DENY", "DENY")

        assert directive.args == ["X-Frame-Options", "DENY", "DENY"]

    def test_add_args_returns_directive(self):
        """add_args supports chaining."""
        directive = create_directive("tls")
        assert directive.add_args("internal") is directive

    def test_is_global(self):
        """Only directives without arguments are global."""
        assert create_directive("email").is_global
        assert not create_directive("tls").add_args("internal").is_global

    def test_is_snippet(self):
        """Snippet definitions are recognized by their parenthesized name."""
        assert Directive(name="(common)").is_snippet
        assert Directive(name="()").is_snippet
        assert not Directive(name="common").is_snippet
        assert not Directive(name="(common").is_snippet
        assert not Directive(name="import").add_args("(common)").is_snippet

    def test_key(self):
        """The lookup key is the (name, discriminator) pair."""
        assert create_directive("handle", "/api/*").key == ("handle", "/api/*")


class TestGetOrCreate:
    """Tests for fetch-or-create assembly."""

    def test_same_key_returns_same_instance(self, root: Block):
        """Repeated calls with one key yield one node."""
        first = root.get_or_create_directive("handle", "/api/*")
        second = root.get_or_create_directive("handle", "/api/*")

        assert first is second
        assert len(root.children) == 1

    def test_different_discriminator_creates_new_node(self, root: Block):
        """The discriminator separates directives sharing a name."""
        api = root.get_or_create_directive("handle", "/api/*")
        static = root.get_or_create_directive("handle", "/static/*")

        assert api is not static
        assert root.children == [api, static]

    def test_returns_existing_appended_directive(self, root: Block):
        """Directives added directly are found by fetch-or-create."""
        added = root.add_directive(create_directive("encode", "gzip"))

        assert root.get_or_create_directive("encode", "gzip") is added

    def test_works_on_directive_children(self):
        """A directive forwards fetch-or-create to its own block."""
        handle = create_directive("handle", "/api/*")
        proxy = handle.get_or_create_directive("reverse_proxy")

        assert handle.children == [proxy]
        assert handle.get_or_create_directive("reverse_proxy") is proxy

    def test_creation_is_logged(self, root: Block, caplog):
        """New directives are reported at debug level."""
        caplog.set_level(logging.DEBUG, logger="caddytree.core.tree")

        root.get_or_create_directive("handle", "/api/*")

        assert "Creating directive 'handle'" in caplog.text


class TestLookup:
    """Tests for first-match and by-name lookups."""

    def test_get_first_match_requires_exact_key(self, root: Block):
        """Both name and discriminator must match."""
        root.get_or_create_directive("handle", "/api/*")

        assert root.get_first_match("handle") is None
        assert root.get_first_match("handle", "/api") is None
        assert root.get_first_match("route", "/api/*") is None

    def test_get_first_match_returns_first_duplicate(self, root: Block):
        """Direct appends may duplicate a key; the first one wins."""
        first = root.add_directive(create_directive("respond"))
        root.add_directive(create_directive("respond"))

        assert root.get_first_match("respond") is first

    def test_get_all_by_name_ignores_discriminator(self, root: Block):
        """All same-named children are returned in child order."""
        api = root.get_or_create_directive("handle", "/api/*")
        root.get_or_create_directive("route", "/api/*")
        static = root.get_or_create_directive("handle", "/static/*")

        assert root.get_all_by_name("handle") == [api, static]

    def test_get_all_by_name_empty(self, root: Block):
        """No match gives an empty list."""
        assert root.get_all_by_name("handle") == []


class TestRemoval:
    """Tests for removing children."""

    def test_remove_by_identity(self, root: Block):
        """An equal but distinct directive is not removed."""
        kept = root.add_directive(create_directive("respond", "ok"))
        lookalike = create_directive("respond", "ok")

        assert kept == lookalike
        root.remove(lookalike)

        assert root.children == [kept]
        assert root.children[0] is kept

    def test_remove_detaches_node(self, root: Block):
        """Removing a child keeps the other children in order."""
        first = root.get_or_create_directive("a")
        second = root.get_or_create_directive("b")
        third = root.get_or_create_directive("c")

        root.remove(second)

        assert root.children == [first, third]

    def test_remove_missing_is_noop(self, root: Block):
        """Removing a non-child does nothing."""
        child = root.get_or_create_directive("a")

        root.remove(create_directive("b"))

        assert root.children == [child]

    def test_remove_only_first_level(self, site: Directive, root: Block):
        """Removal does not search nested blocks."""
        nested = site.get_or_create_directive("tls")

        root.remove(nested)

        assert site.children == [nested]

    def test_remove_all_matches(self, root: Block):
        """Exactly the children with the key pair go; the rest keep order."""
        a = root.get_or_create_directive("header", "a")
        root.add_directive(create_directive("header", "b"))
        c = root.get_or_create_directive("respond", "b")
        root.add_directive(create_directive("header", "b"))
        e = root.get_or_create_directive("header", "")

        root.remove_all_matches("header", "b")

        assert root.children == [a, c, e]
        assert [d.key for d in root.children] == [
            ("header", "a"),
            ("respond", "b"),
            ("header", ""),
        ]

    def test_remove_all_matches_on_directive(self, site: Directive):
        """A directive forwards key based removal to its own block."""
        site.get_or_create_directive("tls")
        proxy = site.get_or_create_directive("reverse_proxy")

        site.remove_all_matches("tls")

        assert site.children == [proxy]
