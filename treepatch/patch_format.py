# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

from .log import PatchFormatError


# Sentinel to allow None as a value
Missing = object()


class PatchEntry(dict):
    """For internal usage in treepatch library.

    Minimal class providing attribute access to patch operation keys,
    while staying a plain dict for json serialization. Since 'from' is
    a python keyword, the source pointer is also available as `from_`.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        if name == "from_":
            name = "from"
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def __setattr__(self, name, value):
        if name == "from_":
            name = "from"
        self[name] = value

    def __str__(self):
        return json.dumps(self, separators=(",", ":"))


class PatchOp:
    "Collection of valid values for the op field in patch entries."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"

    ALL = (ADD, REMOVE, REPLACE, MOVE, COPY, TEST)

    # Ops carrying a value, and ops carrying a source pointer
    WITH_VALUE = (ADD, REPLACE, TEST)
    WITH_FROM = (MOVE, COPY)


class PatchErrorKind:
    "Collection of the ways applying a single patch operation can fail."
    TEST_FAILED = "TestFailed"
    INVALID_POINTER = "InvalidPointer"
    INVALID_FROM_POINTER = "InvalidFromPointer"
    CANNOT_MOVE_INSIDE_ITSELF = "CannotMoveInsideItself"

    descriptions = {
        TEST_FAILED: "test failed",
        INVALID_POINTER: "invalid pointer",
        INVALID_FROM_POINTER: "\"from\" path is invalid",
        CANNOT_MOVE_INSIDE_ITSELF: "cannot move the value inside itself",
    }


class PatchError(Exception):
    """Applying a patch failed at a given operation.

    Attributes
    ----------
    kind : str
        One of the PatchErrorKind values.
    index : int
        Zero-based index of the failing operation in the patch.
    path : str
        The 'path' pointer of the failing operation.
    document : json-like value
        Set when raised by patch or patch_unsafe: the document as left
        by the call. That is the reverted document for patch, and the
        partially patched one for patch_unsafe. Survives pickling.
    """
    def __init__(self, kind, index, path, reason=None):
        self.kind = kind
        self.index = index
        self.path = path
        self.reason = reason
        super(PatchError, self).__init__(str(self))

    def __str__(self):
        msg = "operation '/%d' failed at path '%s': %s" % (
            self.index, self.path, PatchErrorKind.descriptions[self.kind])
        if self.reason:
            msg += " (%s)" % (self.reason,)
        return msg

    def __reduce__(self):
        # Instance attributes such as document are restored as state
        return (PatchError, (self.kind, self.index, self.path, self.reason),
                self.__dict__)


def op_add(path, value):
    "Create a patch entry to add value at path."
    return PatchEntry(op=PatchOp.ADD, path=path, value=value)

def op_remove(path):
    "Create a patch entry to remove the value at path."
    return PatchEntry(op=PatchOp.REMOVE, path=path)

def op_replace(path, value):
    "Create a patch entry to replace the value at path with given value."
    return PatchEntry(op=PatchOp.REPLACE, path=path, value=value)

def op_move(from_path, path):
    "Create a patch entry to move the value at from_path to path."
    return PatchEntry(op=PatchOp.MOVE, path=path, **{"from": from_path})

def op_copy(from_path, path):
    "Create a patch entry to copy the value at from_path to path."
    return PatchEntry(op=PatchOp.COPY, path=path, **{"from": from_path})

def op_test(path, value):
    "Create a patch entry checking that the value at path equals value."
    return PatchEntry(op=PatchOp.TEST, path=path, value=value)


def is_valid_patch(entries):
    """Checks whether a patch (list of patch entries) is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(entries)
    except PatchFormatError:
        return False
    return True


def validate_patch(entries):
    """Check whether a patch (list of patch entries) is well formed.

    Raises a PatchFormatError if not well formed.
    """
    if not isinstance(entries, list):
        raise PatchFormatError("Patch must be a list, not %r." % (type(entries).__name__,))
    for i, e in enumerate(entries):
        validate_patch_entry(e, index=i)


def validate_patch_entry(e, index=None):
    """Check that e is a well formed patch entry.

    Only the shape is checked here. Pointers that are malformed or
    that do not resolve are reported when the patch is applied.

    Raises a PatchFormatError if not well formed.
    """
    where = "" if index is None else " at index %d" % index
    if not isinstance(e, dict):
        raise PatchFormatError("Patch entry '{}'{} is not an object.".format(e, where))

    op = e.get("op", Missing)
    if op is Missing:
        raise PatchFormatError("Patch entry{} has no 'op' field.".format(where))
    if op not in PatchOp.ALL:
        raise PatchFormatError("Unknown patch op '{}'{}.".format(op, where))

    if not isinstance(e.get("path"), str):
        raise PatchFormatError(
            "'{}' entry{} needs a string 'path', not '{}'.".format(op, where, e.get("path")))
    if op in PatchOp.WITH_FROM and not isinstance(e.get("from"), str):
        raise PatchFormatError(
            "'{}' entry{} needs a string 'from', not '{}'.".format(op, where, e.get("from")))
    if op in PatchOp.WITH_VALUE and "value" not in e:
        raise PatchFormatError("'{}' entry{} needs a 'value'.".format(op, where))


def to_patch_entries(obj):
    """Convert a decoded json patch (list of dicts) to PatchEntry objects.

    Values are left untouched, only the operation objects are converted.
    """
    validate_patch(obj)
    return [PatchEntry(e) for e in obj]
