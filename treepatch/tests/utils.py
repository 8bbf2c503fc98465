# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import random

from treepatch import patch, diff
from treepatch.patch_format import is_valid_patch
from treepatch.utils import json_equal


def check_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b."
    d = diff(a, b)
    assert is_valid_patch(d)
    assert json_equal(patch(copy.deepcopy(a), copy.deepcopy(d)), b)


def check_symmetric_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)


_keys = ["a", "b", "c", "~", "/", "a/b", "m~n", ""]


def random_scalar(rng):
    kind = rng.randrange(5)
    if kind == 0:
        return None
    elif kind == 1:
        return rng.choice([True, False])
    elif kind == 2:
        return rng.randint(-3, 3)
    elif kind == 3:
        return rng.choice([0.5, -1.25, 3.0])
    return rng.choice(["", "x", "foo", "bar"])


def random_document(rng, depth=3):
    """Generate a random json-like value of limited depth.

    Keys are drawn from a small set including ones that need
    escaping in pointers.
    """
    if depth <= 0:
        return random_scalar(rng)
    kind = rng.randrange(3)
    if kind == 0:
        return random_scalar(rng)
    elif kind == 1:
        return [random_document(rng, depth - 1) for _ in range(rng.randrange(5))]
    return {rng.choice(_keys): random_document(rng, depth - 1)
            for _ in range(rng.randrange(5))}


def random_pair(seed, depth=3):
    rng = random.Random(seed)
    return random_document(rng, depth), random_document(rng, depth)
