# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import logging

import pytest

from traitlets import Enum

import treepatch
from treepatch.args import ConfigBackedParser, LogLevelAction
from treepatch.config import (
    entrypoint_configurables, build_config, recursive_update, Global,
)
from treepatch import diffapp, patchapp, mergeapp


class FixtureConfig(Global):
    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'WARN',
    ).tag(config=True)


@pytest.fixture
def entrypoint_config():
    entrypoint_configurables['test-prog'] = FixtureConfig
    yield
    del entrypoint_configurables['test-prog']


def test_config_parser(entrypoint_config, reset_log):
    parser = ConfigBackedParser('test-prog')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
        action=LogLevelAction,
    )

    # Check that log level default is taken from FixtureConfig
    arguments = parser.parse_args([])
    assert arguments.log_level == 'WARN'

    arguments = parser.parse_args(['--log-level', 'ERROR'])
    assert arguments.log_level == 'ERROR'
    assert treepatch.log.logger.level == logging.ERROR


def test_config_parser_unknown_entrypoint():
    # Parsers without a configurable use their own defaults
    parser = ConfigBackedParser('not-an-entrypoint')
    parser.add_argument('--indent', type=int, default=7)
    assert parser.parse_args([]).indent == 7


def test_build_config_defaults():
    assert build_config('tpdiff') == {
        'log_level': 'INFO', 'indent': 2, 'sort_keys': False, 'use_color': True,
    }
    assert build_config('tppatch') == {
        'log_level': 'INFO', 'indent': 2, 'sort_keys': False, 'atomic': True,
    }
    assert build_config('tpmerge') == {'log_level': 'INFO', 'indent': 2, 'sort_keys': False}
    with pytest.raises(ValueError):
        build_config('nbdiff')


def test_config_file_overrides_defaults(tmpdir, reset_log):
    tmpdir.join('treepatch_config.json').write_text(
        json.dumps({
            'Global': {'log_level': 'ERROR'},
            '_Output': {'indent': 4, 'sort_keys': True},
            'Patch': {'atomic': False},
            'Diff': {'use_color': False},
        }),
        encoding='utf-8'
    )
    with tmpdir.as_cwd():
        args = patchapp._build_arg_parser().parse_args(['a.json', 'p.json'])
        assert args.atomic is False
        assert args.indent == 4
        assert args.sort_keys is True
        assert args.log_level == 'ERROR'

        args = diffapp._build_arg_parser().parse_args(['a.json', 'b.json'])
        assert args.use_color is False
        assert args.indent == 4

        # Command line arguments win over config
        args = mergeapp._build_arg_parser().parse_args(['a.json', 'b.json', '--indent', '1'])
        assert args.indent == 1


def test_config_inherit(tmpdir):
    tmpdir.join('treepatch_config.json').write_text(
        json.dumps({
            'Global': {'log_level': 'DEBUG'},
            'Merge': {'log_level': 'CRITICAL'},
        }),
        encoding='utf-8'
    )
    with tmpdir.as_cwd():
        assert build_config('tpdiff')['log_level'] == 'DEBUG'
        assert build_config('tpmerge')['log_level'] == 'CRITICAL'


def test_patch_unsafe_flag(reset_log):
    args = patchapp._build_arg_parser().parse_args(['a.json', 'p.json'])
    assert args.atomic is True
    args = patchapp._build_arg_parser().parse_args(['a.json', 'p.json', '--unsafe'])
    assert args.atomic is False


def test_config_help_action(capsys, reset_log):
    with pytest.raises(SystemExit) as exc:
        diffapp._build_arg_parser().parse_args(['--config'])
    assert exc.value.code == 1
    out, err = capsys.readouterr()
    assert 'Diff:' in err
    assert 'use_color: true' in err
    assert 'indent: 2' in err


def test_recursive_update():
    target = {'a': {'b': 1, 'c': 2}, 'd': 3}
    recursive_update(target, {'a': {'b': None, 'e': 4}, 'd': None}, False)
    assert target == {'a': {'c': 2, 'e': 4}}

    target = {}
    recursive_update(target, {'a': None, 'b': {}}, True)
    assert target == {'a': None, 'b': {}}
