# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import logging
import sys

from ._version import __version__
from .config import get_defaults_for_argparse, format_config
from .log import LOG_LEVELS, init_logging, set_treepatch_log_level


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser taking its defaults from the treepatch config.

    The configurable is looked up by the first word of the parser's
    prog, so 'tpdiff' uses the Diff config. Parsers with an unknown
    prog keep the defaults of their arguments.
    """

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            self.set_defaults(**get_defaults_for_argparse(entrypoint))
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_treepatch_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_treepatch_log_level(values, True)


class ConfigHelpAction(argparse.Action):
    "Print the effective config of the parser's command, and exit."
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        pretty_print_dict(
            format_config(parser.prog.split(' ')[0]),
            config=PrettyPrintConfig(out=sys.stderr)
        )
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all treepatch commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=LOG_LEVELS,
        help="set the log level by name.",
        action=LogLevelAction,
    )


filename_help = {
    "original": "The original json document, '-' to read it from stdin.",
    "changed": "The changed json document, '-' to read it from stdin.",
    "patch": "The json patch (RFC 6902) to apply, '-' to read it from stdin.",
    "overlay": "The json merge patch (RFC 7396) to apply, '-' to read it from stdin.",
}


def add_filename_args(parser, names):
    "Add a positional document argument for each name, in order."
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_output_args(parser, what="result"):
    """Adds the arguments controlling where and how json is written.

    The parsed values can be passed on with `output_kwargs`.
    """
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the %s is written to this file as json. "
             "Otherwise it is printed to the terminal." % what)
    parser.add_argument(
        '--indent',
        type=int,
        default=2,
        help="number of spaces to indent json output with.")
    parser.add_argument(
        '--sort-keys',
        dest='sort_keys',
        action='store_true',
        default=False,
        help="sort object keys in json output.")


def output_kwargs(args):
    "Keyword arguments for write_document from parsed output arguments."
    return dict(indent=args.indent, sort_keys=args.sort_keys)


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--json',
        dest='as_json',
        action="store_true",
        default=False,
        help="print the patch as json instead of pretty-printing it."
    )
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help="prevent use of ANSI color code escapes for text output."
    )
