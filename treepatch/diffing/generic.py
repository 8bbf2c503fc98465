# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..patch_format import op_add, op_remove, op_replace, validate_patch
from ..pointer import ROOT, join_pointer
from ..utils import json_equal

__all__ = ["diff"]


def diff(a, b, path=ROOT):
    """Compute the json patch turning a into b.

    The patch only contains add, remove and replace operations, with
    paths relative to the document at path (by default the whole
    document). Values in the patch are not copied from b.
    """
    if isinstance(a, dict) and isinstance(b, dict):
        d = diff_dicts(a, b, path=path)
    elif isinstance(a, list) and isinstance(b, list):
        d = diff_lists(a, b, path=path)
    elif json_equal(a, b):
        d = []
    else:
        # Different kinds of values or different scalars,
        # no point in looking any further
        d = [op_replace(path, b)]

    # We can turn this off for performance after the library has been well tested:
    if path == ROOT:
        validate_patch(d)

    return d


def diff_lists(a, b, path=ROOT):
    """Compute the patch of two lists, comparing items position by position.

    Items at the same index are diffed recursively. Trailing items of a
    are removed and trailing items of b are appended.
    """
    di = []
    # Removals of trailing items are emitted in increasing index order,
    # and every one applied moves the items after it down by one
    shift = 0
    for index in range(max(len(a), len(b))):
        if index < len(a) and index < len(b):
            di.extend(diff(a[index], b[index], path=join_pointer(path, index)))
        elif index < len(a):
            di.append(op_remove(join_pointer(path, index - shift)))
            shift += 1
        else:
            di.append(op_add(join_pointer(path, index), b[index]))
    return di


def diff_dicts(a, b, path=ROOT):
    """Compute the patch of two dicts.

    Keys in b are visited first in the order of b, recursing into
    values present in both and adding the others. Keys only found in a
    are removed afterwards, in the order of a.
    """
    if not isinstance(a, dict) or not isinstance(b, dict):
        raise TypeError('Arguments to diff_dicts need to be dicts, got %r and %r' % (a, b))

    di = []
    for key, bvalue in b.items():
        subpath = join_pointer(path, key)
        if key in a:
            di.extend(diff(a[key], bvalue, path=subpath))
        else:
            di.append(op_add(subpath, bvalue))

    for key in a:
        if key not in b:
            di.append(op_remove(join_pointer(path, key)))

    return di
