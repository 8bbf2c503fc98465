# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from . import log
from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args,
    add_output_args, output_kwargs,
)
from .merging import merge
from .utils import missing_files, read_document_pair, write_document, setup_std_streams


_description = "Apply a json merge patch (RFC 7396) to a json document."


def main_merge(args):
    base_filename = args.original
    overlay_filename = args.overlay

    for fn in missing_files([base_filename, overlay_filename]):
        print("Missing file {}".format(fn))
        return 1

    try:
        doc, overlay = read_document_pair(base_filename, overlay_filename)
    except ValueError as e:
        log.error("Could not read json input: %s", e)
        return 1
    merged = merge(doc, overlay)

    write_document(merged, args.output, **output_kwargs(args))
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the tpmerge command."""
    parser = ConfigBackedParser(
        prog=prog or 'tpmerge',
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["original", "overlay"])
    add_output_args(parser, "merged document")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_merge(arguments)


if __name__ == "__main__":
    sys.exit(main())
