# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from ._version import __version__

COMMANDS = ["diff", "patch", "merge"]
HELP_MESSAGE_VERBOSE = ("Usage: treepatch [OPTIONS]\n\n"
                       "OPTIONS: -h, --version, --config, COMMANDS{%s}\n\n"
                       "Examples: treepatch --version\n"
                       "          treepatch diff -h\n"
                       "          treepatch diff original.json changed.json\n"
                       "          treepatch patch original.json patch.json\n"
                       "          treepatch merge original.json overlay.json\n" % ", ".join(COMMANDS))


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if len(args) < 1:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd = args[0]
    args = args[1:]

    if cmd == "diff":
        from treepatch.diffapp import main
    elif cmd == "patch":
        from treepatch.patchapp import main
    elif cmd == "merge":
        from treepatch.mergeapp import main
    else:
        if cmd == '--version':
            sys.exit(__version__)
        if cmd == '-h' or cmd == '--help':
            sys.exit(HELP_MESSAGE_VERBOSE)
        if cmd == '--config':
            # List all possible config options:
            from .config import entrypoint_configurables, format_config
            from .prettyprint import pretty_print_dict, PrettyPrintConfig
            print("All available config options, and their current values:\n",
                  file=sys.stderr)
            for entrypoint in entrypoint_configurables:
                pretty_print_dict(format_config(entrypoint),
                                  config=PrettyPrintConfig(out=sys.stderr))
                print("", file=sys.stderr)
            sys.exit(1)
        else:
            sys.exit("Unrecognized command '%s'\n\n%s." %
                     (cmd, HELP_MESSAGE_VERBOSE))
    return main(args)


if __name__ == "__main__":
    # This is triggered by "python -m treepatch <args>"
    sys.exit(main_dispatch())
