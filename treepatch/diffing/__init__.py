# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .generic import diff, diff_dicts, diff_lists

__all__ = ["diff", "diff_dicts", "diff_lists"]
