# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""JSON pointers (RFC 6901) into json-like documents.

A pointer is passed around in its wire form, a string which is either
empty (the whole document) or a sequence of '/'-prefixed reference
tokens. Within a token, '~' is written as '~0' and '/' as '~1'. Any
other use of '~' makes the pointer malformed.

Tokens are only interpreted as array indices when the value they are
applied to is a list, so '/0' addresses the key "0" of a dict and the
first item of a list alike.
"""

import re


__all__ = [
    "PointerError", "ROOT", "APPEND",
    "escape_token", "unescape_token",
    "parse_pointer", "format_pointer", "join_pointer", "split_pointer",
    "parse_index", "resolve_pointer", "is_descendant_pointer",
    ]


class PointerError(ValueError):
    """Pointer is malformed or does not address a value in the document."""
    pass


# Pointer to the whole document
ROOT = ""

# Final token of an add/move/copy target meaning 'after the last item'
APPEND = "-"

# RFC 6901 prohibits leading zeroes in array indices
_r_index = re.compile(r"0|[1-9][0-9]*")


def escape_token(token):
    "Escape a reference token for use in a pointer string."
    return token.replace("~", "~0").replace("/", "~1")


_r_bad_escape = re.compile(r"~(?![01])")


def unescape_token(segment):
    "Decode an escaped pointer segment back into a reference token."
    if _r_bad_escape.search(segment):
        raise PointerError("invalid escape in pointer token %r" % (segment,))
    return segment.replace("~1", "/").replace("~0", "~")


def parse_pointer(pointer):
    """Split a pointer string on the form '/foo/b~1r' into ('foo', 'b/r').

    The empty string is the root pointer and parses to ().
    """
    if not isinstance(pointer, str):
        raise PointerError("pointer must be a string, not %r" % (pointer,))
    if pointer == ROOT:
        return ()
    if not pointer.startswith("/"):
        raise PointerError(
            "pointer must be empty or start with '/': %r" % (pointer,))
    return tuple(unescape_token(s) for s in pointer[1:].split("/"))


def format_pointer(tokens):
    "Join tokens on the form ['foo', 'b/r', 0] into '/foo/b~1r/0'."
    return "".join("/" + escape_token(str(t)) for t in tokens)


def join_pointer(base, token):
    "Extend pointer string base with a single (unescaped) token."
    return base + "/" + escape_token(str(token))


def split_pointer(pointer):
    """Split pointer into its parent pointer string and its last token.

    The last token is returned unescaped. The root pointer has no parent
    and is rejected.
    """
    if not isinstance(pointer, str):
        raise PointerError("pointer must be a string, not %r" % (pointer,))
    idx = pointer.rfind("/")
    if idx < 0:
        raise PointerError("pointer %r has no parent" % (pointer,))
    return pointer[:idx], unescape_token(pointer[idx+1:])


def parse_index(token, length):
    """Parse an array index token, requiring 0 <= index < length.

    Pass len(sequence) for read access and len(sequence) + 1 when
    inserting.
    """
    if not _r_index.fullmatch(token):
        raise PointerError("invalid array index %r" % (token,))
    index = int(token)
    if index >= length:
        raise PointerError(
            "array index %d out of range for length %d" % (index, length))
    return index


def _child(obj, token):
    if isinstance(obj, dict):
        try:
            return obj[token]
        except KeyError:
            raise PointerError("missing key %r" % (token,)) from None
    elif isinstance(obj, list):
        return obj[parse_index(token, len(obj))]
    raise PointerError(
        "cannot look up %r in %s value" % (token, type(obj).__name__))


def resolve_pointer(doc, pointer):
    "Return the value in doc addressed by pointer."
    obj = doc
    for token in parse_pointer(pointer):
        obj = _child(obj, token)
    return obj


def is_descendant_pointer(ancestor, pointer):
    """Check whether pointer addresses a value strictly below ancestor.

    This is a lexical check on the pointer strings, '/a/b' is below '/a'
    but '/ab' is not.
    """
    return (pointer.startswith(ancestor) and
            pointer[len(ancestor):].startswith("/"))
