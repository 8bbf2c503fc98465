# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

__all__ = ["merge"]


def merge(doc, overlay):
    """Apply a json merge patch (RFC 7396) to doc.

    A dict overlay is merged recursively into doc, where a None value
    deletes the key and any other value is merged into the existing
    value at that key. Any other overlay (list, scalar or None)
    replaces the document altogether.

    Dicts in doc are updated in place. The result can still be a new
    object, e.g. when doc is not a dict, so use the return value.
    """
    if not isinstance(overlay, dict):
        return copy.deepcopy(overlay)

    if not isinstance(doc, dict):
        # Prior non-dict content is discarded
        doc = {}

    for key, value in overlay.items():
        if value is None:
            doc.pop(key, None)
        else:
            doc[key] = merge(doc.get(key), value)
    return doc
