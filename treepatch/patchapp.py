# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from . import log
from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args,
    add_output_args, output_kwargs,
)
from .log import PatchFormatError
from .patch_format import PatchError, to_patch_entries
from .patching import patch, patch_unsafe
from .utils import missing_files, read_document_pair, write_document, setup_std_streams


_description = "Apply a json patch (RFC 6902) to a json document."


def main_patch(args):
    base_filename = args.original
    patch_filename = args.patch
    output_filename = args.output

    for fn in missing_files([base_filename, patch_filename]):
        print("Missing file {}".format(fn))
        return 1

    try:
        before, entries = read_document_pair(base_filename, patch_filename)
    except ValueError as e:
        log.error("Could not read json input: %s", e)
        return 1
    try:
        entries = to_patch_entries(entries)
    except PatchFormatError as e:
        log.error("Not a valid json patch: %s", e)
        return 2

    apply = patch if args.atomic else patch_unsafe
    try:
        after = apply(before, entries)
    except PatchError as e:
        log.error("Patch did not apply: %s", e)
        return 1

    write_document(after, output_filename, **output_kwargs(args))
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the tppatch command."""
    parser = ConfigBackedParser(
        prog=prog or 'tppatch',
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["original", "patch"])
    add_output_args(parser, "patched document")
    parser.add_argument(
        '--unsafe',
        dest='atomic',
        action='store_false',
        default=True,
        help="keep the operations before a failing one applied, instead "
             "of reverting the whole patch.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
