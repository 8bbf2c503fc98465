# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os
import shutil

from jsonschema import Draft4Validator as Validator
from pytest import fixture, skip


pjoin = os.path.join

schema_dir = os.path.abspath(pjoin(os.path.dirname(__file__), ".."))


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def tempfiles(tmpdir, filespath):
    """Fixture for copying test files into a temporary directory"""
    dest = tmpdir.join('testfiles')
    shutil.copytree(filespath, str(dest))
    return str(dest)


@fixture
def reset_log():
    # clear root logger handlers before test and reset afterwards
    handlers = list(logging.getLogger().handlers)
    logging.getLogger().handlers[:] = []
    yield
    logging.getLogger().handlers[:] = handlers


@fixture
def json_schema_patch(request):
    schema_path = os.path.join(schema_dir, 'patch_format.schema.json')
    with io.open(schema_path, encoding="utf8") as f:
        schema_json = json.load(f)
    return schema_json


@fixture
def patch_validator(request, json_schema_patch):
    return Validator(json_schema_patch)


def _load_cases(filespath, name):
    with io.open(os.path.join(filespath, name), encoding="utf8") as f:
        return json.load(f)


@fixture(scope='session')
def rfc6902_cases(filespath):
    "Test cases of RFC 6902 appendix A, as (comment, case) pairs."
    return [(c.get("comment", ""), c) for c in _load_cases(filespath, "rfc6902_tests.json")]


@fixture(scope='session')
def rfc7396_cases(filespath):
    "Test cases of RFC 7396 appendix A."
    return _load_cases(filespath, "rfc7396_tests.json")
