# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff
from .merging import merge
from .patching import patch, patch_unsafe
from .patch_format import PatchError, PatchErrorKind, PatchEntry, to_patch_entries
from .log import PatchFormatError
from .pointer import PointerError


__all__ = [
    "__version__",
    "diff", "merge",
    "patch", "patch_unsafe",
    "PatchEntry", "to_patch_entries",
    "PatchError", "PatchErrorKind", "PatchFormatError", "PointerError",
    ]
