# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from . import log
from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args,
    add_output_args, add_prettyprint_args, output_kwargs,
)
from .diffing import diff
from .prettyprint import pretty_print_document_patch, PrettyPrintConfig
from .utils import missing_files, read_document_pair, write_document, setup_std_streams


_description = "Compute the json patch (RFC 6902) between two json documents."


def main_diff(args):
    """Main handler of diff CLI"""
    afn = args.original
    bfn = args.changed
    output = args.output

    for fn in missing_files([afn, bfn]):
        print("Missing file {}".format(fn))
        return 1

    try:
        a, b = read_document_pair(afn, bfn)
    except ValueError as e:
        log.error("Could not read json input: %s", e)
        return 1

    d = diff(a, b)

    if output or args.as_json:
        write_document(d, output, **output_kwargs(args))
    else:
        # This printer is to keep the unit tests passing,
        # some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")

        config = PrettyPrintConfig(out=Printer(), use_color=args.use_color)
        pretty_print_document_patch(afn, bfn, a, d, config)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the tpdiff command."""
    parser = ConfigBackedParser(
        prog=prog or 'tpdiff',
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["original", "changed"])
    add_output_args(parser, "patch")
    add_prettyprint_args(parser)
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
