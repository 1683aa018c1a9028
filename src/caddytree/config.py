"""
Serializer output configuration.

``FormatOptions`` controls the whitespace and encoding the serializer
emits. It never affects the ordering of directives.
"""

import codecs

from attrs import field, frozen

from caddytree.exceptions import FormatOptionsError

NEWLINES = ("\n", "\r\n")


def _check_indent(instance: "FormatOptions", attribute, value: str) -> None:
    if not isinstance(value, str) or not value:
        raise FormatOptionsError(attribute.name, value, "must be a non-empty string")
    if value.strip():
        raise FormatOptionsError(attribute.name, value, "must contain only whitespace")


def _check_newline(instance: "FormatOptions", attribute, value: str) -> None:
    if value not in NEWLINES:
        raise FormatOptionsError(attribute.name, value, f"must be one of {NEWLINES!r}")


def _check_encoding(instance: "FormatOptions", attribute, value: str) -> None:
    try:
        codecs.lookup(value)
    except (LookupError, TypeError) as e:
        raise FormatOptionsError(attribute.name, value, "unknown encoding") from e


@frozen
class FormatOptions:
    """Whitespace and encoding used when writing a Caddyfile.

    Params:
        indent: One indentation unit, repeated once per nesting level.
        newline: Line terminator written after every directive.
        encoding: Codec used by ``marshal`` to produce bytes.

    Raises:
        FormatOptionsError: If any value is unusable.
    """

    indent: str = field(default="\t", validator=_check_indent)
    newline: str = field(default="\n", validator=_check_newline)
    encoding: str = field(default="utf-8", validator=_check_encoding)


DEFAULT_OPTIONS = FormatOptions()
