# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from . import log
from .log import PatchFormatError
from .patch_format import (
    PatchOp, PatchError, PatchErrorKind, Missing, validate_patch,
    op_add, op_remove, op_replace, op_move)
from .pointer import (
    PointerError, ROOT, APPEND,
    split_pointer, parse_index, resolve_pointer, is_descendant_pointer)
from .utils import json_equal


__all__ = ["patch", "patch_unsafe"]


def _resolve_parent(doc, path):
    parent, last = split_pointer(path)
    return resolve_pointer(doc, parent), last


def add_value(doc, path, value):
    """Add value at path in doc.

    Returns the resulting document and the value that was overwritten,
    which is Missing unless an existing dict item or the whole document
    was replaced.
    """
    if path == ROOT:
        return value, doc
    obj, last = _resolve_parent(doc, path)
    if isinstance(obj, dict):
        prev = obj.get(last, Missing)
        obj[last] = value
        return doc, prev
    elif isinstance(obj, list):
        if last == APPEND:
            obj.append(value)
        else:
            obj.insert(parse_index(last, len(obj) + 1), value)
        return doc, Missing
    raise PointerError("cannot add to %s value" % type(obj).__name__)


def remove_value(doc, path, allow_last=False):
    """Remove the value at path in doc.

    Returns the resulting document and the removed value. With allow_last,
    a final '-' token removes the last item of a list.
    """
    obj, last = _resolve_parent(doc, path)
    if isinstance(obj, dict):
        try:
            return doc, obj.pop(last)
        except KeyError:
            raise PointerError("missing key %r" % (last,)) from None
    elif isinstance(obj, list):
        if allow_last and last == APPEND and obj:
            return doc, obj.pop()
        return doc, obj.pop(parse_index(last, len(obj)))
    raise PointerError("cannot remove from %s value" % type(obj).__name__)


def replace_value(doc, path, value):
    """Replace the existing value at path in doc.

    Returns the resulting document and the replaced value.
    """
    if path == ROOT:
        return value, doc
    obj, last = _resolve_parent(doc, path)
    if isinstance(obj, dict):
        if last not in obj:
            raise PointerError("missing key %r" % (last,))
        prev = obj[last]
        obj[last] = value
        return doc, prev
    elif isinstance(obj, list):
        index = parse_index(last, len(obj))
        prev = obj[index]
        obj[index] = value
        return doc, prev
    raise PointerError("cannot replace in %s value" % type(obj).__name__)


def _undo_add(path, prev):
    "Inverse of adding a value at path which overwrote prev."
    if path == ROOT:
        return op_replace(ROOT, prev)
    elif prev is Missing:
        # Removes the inserted list item, or the '-' appended one
        return op_remove(path)
    else:
        return op_add(path, prev)


def _undo_move(from_path, path, prev):
    """Inverse of moving a value from from_path to path which overwrote prev.

    The overwritten value, if any, rides along as the entry's 'value'
    and is put back at path before the moved value returns to from_path.
    """
    e = op_move(path, from_path)
    if prev is not Missing:
        e.value = prev
    return e


def apply_patch_entry(doc, e, index=0):
    """Apply a single patch entry to doc.

    Returns the resulting document and the entry undoing the change
    (None for 'test'). Failures are raised as PatchError, and always
    leave doc unchanged.
    """
    op = e["op"]
    path = e["path"]

    if op == PatchOp.ADD:
        try:
            doc, prev = add_value(doc, path, copy.deepcopy(e["value"]))
        except PointerError as err:
            raise PatchError(PatchErrorKind.INVALID_POINTER, index, path, str(err)) from err
        return doc, _undo_add(path, prev)

    elif op == PatchOp.REMOVE:
        try:
            doc, prev = remove_value(doc, path)
        except PointerError as err:
            raise PatchError(PatchErrorKind.INVALID_POINTER, index, path, str(err)) from err
        return doc, op_add(path, prev)

    elif op == PatchOp.REPLACE:
        try:
            doc, prev = replace_value(doc, path, copy.deepcopy(e["value"]))
        except PointerError as err:
            raise PatchError(PatchErrorKind.INVALID_POINTER, index, path, str(err)) from err
        return doc, op_replace(path, prev)

    elif op == PatchOp.MOVE:
        from_path = e["from"]
        if is_descendant_pointer(from_path, path):
            raise PatchError(PatchErrorKind.CANNOT_MOVE_INSIDE_ITSELF, index, path)
        try:
            doc, value = remove_value(doc, from_path)
        except PointerError as err:
            raise PatchError(PatchErrorKind.INVALID_FROM_POINTER, index, path, str(err)) from err
        try:
            doc, prev = add_value(doc, path, value)
        except PointerError as err:
            # Put the value back where it came from
            doc, _ = add_value(doc, from_path, value)
            raise PatchError(PatchErrorKind.INVALID_POINTER, index, path, str(err)) from err
        return doc, _undo_move(from_path, path, prev)

    elif op == PatchOp.COPY:
        try:
            value = copy.deepcopy(resolve_pointer(doc, e["from"]))
        except PointerError as err:
            raise PatchError(PatchErrorKind.INVALID_FROM_POINTER, index, path, str(err)) from err
        try:
            doc, prev = add_value(doc, path, value)
        except PointerError as err:
            raise PatchError(PatchErrorKind.INVALID_POINTER, index, path, str(err)) from err
        return doc, _undo_add(path, prev)

    elif op == PatchOp.TEST:
        try:
            actual = resolve_pointer(doc, path)
        except PointerError as err:
            raise PatchError(PatchErrorKind.INVALID_POINTER, index, path, str(err)) from err
        if not json_equal(actual, e["value"]):
            raise PatchError(PatchErrorKind.TEST_FAILED, index, path)
        return doc, None

    raise PatchFormatError("Invalid op {}.".format(op))


def _apply_inverse(doc, e):
    "Apply an undo entry recorded by apply_patch_entry."
    op = e.op
    if op == PatchOp.ADD:
        return add_value(doc, e.path, e.value)
    elif op == PatchOp.REMOVE:
        return remove_value(doc, e.path, allow_last=True)
    elif op == PatchOp.REPLACE:
        return replace_value(doc, e.path, e.value)
    elif op == PatchOp.MOVE:
        if e.from_ == ROOT:
            # Undoing a move to the root: the moved value is the whole
            # document and the overwritten document is always recorded
            doc, value = e.value, doc
        else:
            doc, value = remove_value(doc, e.from_, allow_last=True)
            if "value" in e:
                doc, _ = add_value(doc, e.from_, e.value)
        return add_value(doc, e.path, value)
    raise RuntimeError("Invalid undo op {}.".format(op))


def _revert(doc, undo):
    "Replay undo entries in reverse order, restoring doc."
    for e in reversed(undo):
        try:
            doc, _ = _apply_inverse(doc, e)
        except PointerError as err:
            # Undo entries come from operations that succeeded,
            # so this is a bug and not a problem with the patch
            raise RuntimeError(
                "Sanity check failed: could not revert with {}: {}".format(e, err)) from err
    return doc


def patch(doc, entries):
    """Apply a json patch (list of patch entries) to doc, all or nothing.

    Dicts and lists in doc are modified in place. An operation on the
    root path replaces the document, so the return value is the patched
    document and should be used instead of doc.

    If any operation fails, the operations already applied are reverted
    so that doc compares equal to what it was before the call, and a
    PatchError for the failing operation is raised.
    """
    validate_patch(entries)
    undo = []
    for index, e in enumerate(entries):
        try:
            doc, inverse = apply_patch_entry(doc, e, index)
        except PatchError as err:
            log.debug("Patch operation %d failed, reverting %d applied operations",
                      index, len(undo))
            err.document = _revert(doc, undo)
            raise
        if inverse is not None:
            undo.append(inverse)
        log.debug("Applied patch operation %d: %s", index, e)
    return doc


def patch_unsafe(doc, entries):
    """Apply a json patch (list of patch entries) to doc, best effort.

    Like patch, but without keeping track of how to revert. If an
    operation fails, the operations before it stay applied. The
    document as left by those is available as the `document` attribute
    of the raised PatchError.
    """
    validate_patch(entries)
    for index, e in enumerate(entries):
        try:
            doc, _ = apply_patch_entry(doc, e, index)
        except PatchError as err:
            err.document = doc
            raise
    return doc
