# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
from io import StringIO

import colorama
import pytest

from treepatch import prettyprint as pp
from treepatch.diffing import diff
from treepatch.patch_format import (
    PatchError, op_add, op_remove, op_replace, op_move, op_copy, op_test,
)


def TestConfig(use_color=True):
    return pp.PrettyPrintConfig(out=StringIO(), use_color=use_color)


def test_pretty_print_dict_complex():
    d = {
        'a': 5,
        'b': [1, 2, 3],
        'c': {
            'x': 'y',
        },
        'd': 10,
        'short': 'text',
        'long': 'long\ntext',
    }
    prefix = '-'

    config = TestConfig()
    pp.pretty_print_dict(d, {'d'}, prefix, config)
    text = config.out.getvalue()

    for key in d:
        if key != 'd':
            mark = '-%s:' % key
            assert mark in text
    assert "short: text" in text
    assert 'long:\n' in text
    assert 'd:' not in text


def test_pretty_print_long_list():
    li = ["item number %d" % i for i in range(10)]
    config = TestConfig()
    pp.pretty_print_value(li, '+', config)
    text = config.out.getvalue()
    assert '+item[0]: item number 0\n' in text
    assert '+item[9]: item number 9\n' in text


def test_pretty_print_scalars():
    for value, expected in [(None, 'null'), (True, 'true'), (1.5, '1.5'),
                            ('text', 'text'), ([], '[]'), ({}, '{}')]:
        config = TestConfig()
        pp.pretty_print_value(value, '', config)
        assert config.out.getvalue() == expected + '\n'


def test_json_type_name():
    assert pp.json_type_name(None) == 'null'
    assert pp.json_type_name(False) == 'boolean'
    assert pp.json_type_name(0) == 'number'
    assert pp.json_type_name(0.5) == 'number'
    assert pp.json_type_name('') == 'string'
    assert pp.json_type_name([]) == 'array'
    assert pp.json_type_name({}) == 'object'


def test_pretty_print_patch_all_ops():
    doc = {'a': 1, 'b': [1, 2], 'c': 'x'}
    before = copy.deepcopy(doc)
    entries = [
        op_add('/d', 4),
        op_remove('/a'),
        op_replace('/c', 3),
        op_move('/b', '/e'),
        op_copy('/e', '/f'),
        op_test('/f', [1, 2]),
    ]
    config = TestConfig(use_color=False)
    result = pp.pretty_print_patch(doc, entries, config)
    text = config.out.getvalue()

    assert result == {'d': 4, 'c': 3, 'e': [1, 2], 'f': [1, 2]}
    # Printing works on a copy
    assert doc == before

    assert text == (
        '## added /d:\n'
        '+  4\n'
        '\n'
        '## removed /a:\n'
        '-  1\n'
        '\n'
        '## replaced (type changed from string to number) /c:\n'
        '-  x\n'
        '+  3\n'
        '\n'
        '## moved /b to /e:\n'
        '   [1, 2]\n'
        '\n'
        '## copied /e to /f:\n'
        '+  [1, 2]\n'
        '\n'
        '## tested /f:\n'
        '   [1, 2]\n'
        '\n'
    )


def test_pretty_print_patch_colors():
    config = TestConfig(use_color=True)
    pp.pretty_print_patch({'a': 1}, [op_replace('/a', 2)], config)
    text = config.out.getvalue()
    assert colorama.Fore.RED + '-  1' in text
    assert colorama.Fore.GREEN + '+  2' in text
    assert text.endswith(colorama.Style.RESET_ALL)


def test_pretty_print_patch_root():
    config = TestConfig(use_color=False)
    result = pp.pretty_print_patch({'a': 1}, [op_replace('', [1])], config)
    assert result == [1]
    text = config.out.getvalue()
    assert text.startswith('## replaced (type changed from object to array) /:\n')


def test_pretty_print_patch_failing_entry():
    config = TestConfig(use_color=False)
    with pytest.raises(PatchError):
        pp.pretty_print_patch({'a': 1}, [op_add('/b', 2), op_remove('/c')], config)
    assert '## added /b:' in config.out.getvalue()


def test_pretty_print_document_patch(tmpdir):
    afn = tmpdir.join('a.json')
    afn.write_text(u'{}', encoding='utf-8')
    a = {'x': {'y': [1, 2, 3]}}
    b = {'x': {'y': [1]}}
    config = TestConfig(use_color=False)
    pp.pretty_print_document_patch(str(afn), 'b.json', a, diff(a, b), config)
    text = config.out.getvalue()
    lines = text.splitlines()
    assert lines[0] == 'tpdiff %s b.json' % afn
    assert lines[1].startswith('--- %s  ' % afn)
    assert lines[2] == '+++ b.json  (no timestamp)'
    assert '## removed /x/y/1:\n-  2\n' in text
    assert '## removed /x/y/1:\n-  3\n' in text
    # The original document is not modified
    assert a == {'x': {'y': [1, 2, 3]}}


def test_pretty_print_document_patch_empty():
    config = TestConfig()
    pp.pretty_print_document_patch('a.json', 'b.json', {}, [], config)
    assert config.out.getvalue() == ''
