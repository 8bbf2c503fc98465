# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import json
import locale
import os
import sys

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'

# Filename meaning the document is read from stdin
STDIN_FILE = '-'


def json_equal(a, b):
    """Structural equality of json-like values.

    Unlike ==, booleans never compare equal to numbers, so that
    True and 1 (or [False] and [0]) are different documents.
    Numbers compare by value, so 1 and 1.0 are equal.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, dict):
        if not isinstance(b, dict) or len(a) != len(b):
            return False
        for k, v in a.items():
            if k not in b or not json_equal(v, b[k]):
                return False
        return True
    if isinstance(a, list):
        if not isinstance(b, list) or len(a) != len(b):
            return False
        return all(json_equal(x, y) for x, y in zip(a, b))
    if isinstance(b, (dict, list)):
        return False
    return a == b


def _iter_json_values(text):
    "Decode a stream of whitespace separated json values."
    decoder = json.JSONDecoder()
    pos = 0
    n = len(text)
    while True:
        while pos < n and text[pos].isspace():
            pos += 1
        if pos == n:
            return
        value, pos = decoder.raw_decode(text, pos)
        yield value


def read_document(f):
    """Read and return a json document

    Parameters:
        f:  The filename to read from, "-" for stdin or the null filename
            ("/dev/null" on *nix, "nul" on Windows), which reads as the
            null document. Alternatively a file-like object can be passed.
    """
    if f == EXPLICIT_MISSING_FILE:
        return None
    elif f == STDIN_FILE:
        return json.load(sys.stdin)
    elif isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            return json.load(fo)
    return json.load(f)


def read_document_pair(afn, bfn):
    """Read the two input documents of a command.

    When both filenames are "-", stdin is expected to hold precisely
    two json values, the first one being the original document.
    """
    if afn == STDIN_FILE and bfn == STDIN_FILE:
        values = list(_iter_json_values(sys.stdin.read()))
        if len(values) != 2:
            raise ValueError(
                "Expected precisely two json values on stdin, got %d" % len(values))
        return values[0], values[1]
    return read_document(afn), read_document(bfn)


def write_document(obj, filename=None, indent=2, sort_keys=False):
    """Write obj as json to filename, or print it if no filename is given."""
    text = json.dumps(obj, indent=indent, sort_keys=sort_keys)
    if filename:
        with io.open(filename, "w", encoding="utf-8") as f:
            f.write(text + "\n")
    else:
        # Printing rather than sys.stdout.write keeps capsys working
        print(text)


def missing_files(filenames):
    "Return the filenames which neither exist nor are special names."
    return [fn for fn in filenames
            if isinstance(fn, str) and not os.path.exists(fn)
            and fn not in (EXPLICIT_MISSING_FILE, STDIN_FILE)]


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        # if error-handler is strict, switch to replace
        if errors == 'strict' or errors.startswith('surrogate'):
            bin_stream = stream.buffer
            new_stream = codecs.getwriter(enc)(bin_stream, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """
    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
