# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Human readable rendering of json patches.

Each operation is shown as a header line naming the action and the
path, followed by the values involved, prefixed by markers:

    ## replaced /title:
    -  Goodbye!
    +  Hello!

Values are printed as json, except strings, which are printed as is.
Lists short enough for one line are printed inline, longer lists and
all dicts are broken into one line per item.
"""

from collections import namedtuple
import copy
import datetime
import json
import os
import sys

import colorama

from .log import PatchFormatError
from .patch_format import PatchOp, Missing
from .patching import apply_patch_entry
from .pointer import PointerError, resolve_pointer


# Indentation offset in pretty-print
IND = "  "

# Lists rendered as json longer than this are printed item by item
MAXWIDTH = 78


PATCH_ENTRY_END = '\n'

ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP='   ',
        REMOVE=colorama.Fore.RED + '-  ',
        ADD=colorama.Fore.GREEN + '+  ',
        INFO=colorama.Fore.BLUE + colorama.Style.BRIGHT + '## ',
        RESET=colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP='   ',
        REMOVE='-  ',
        ADD='+  ',
        INFO='## ',
        RESET='',
    )
}


class PrettyPrintConfig:
    """Where to print, and whether to use colors.

    The markers of ColoredConstants are available as attributes,
    e.g. config.REMOVE.
    """
    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    def __getattr__(self, name):
        if name in ColoredConstants._fields:
            return getattr(col_const[self.use_color], name)
        raise AttributeError(name)

DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if not os.path.exists(filename):
        return "(no timestamp)"
    mtime = datetime.datetime.fromtimestamp(os.path.getmtime(filename))
    return mtime.isoformat(" ")


def json_type_name(v):
    "Name of the json type of v, as used in messages."
    if v is None:
        return "null"
    elif isinstance(v, bool):
        return "boolean"
    elif isinstance(v, (int, float)):
        return "number"
    elif isinstance(v, str):
        return "string"
    elif isinstance(v, list):
        return "array"
    elif isinstance(v, dict):
        return "object"
    return type(v).__name__


def format_value(v):
    "Format simple value for printing. Strings are shown as is, the rest as json."
    if isinstance(v, str):
        return v
    return json.dumps(v)


def _write_lines(text, prefix, config):
    "Write text with every line prefixed, ending with a newline."
    for line in text.splitlines() or [""]:
        config.out.write(prefix + line + "\n")


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a possibly complex value with all lines prefixed.

    Non-empty dicts and lists are printed by pretty_print_dict and
    pretty_print_list, anything else by format_value.
    """
    if isinstance(value, dict) and value:
        pretty_print_dict(value, (), prefix, config)
    elif isinstance(value, list) and value:
        pretty_print_list(value, prefix, config)
    else:
        _write_lines(format_value(value), prefix, config)


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    "Print v under the label k."
    text = None
    if not (isinstance(v, (dict, list)) and v):
        text = format_value(v)
        if "\n" not in text:
            config.out.write("%s%s: %s\n" % (prefix, k, text))
            return
    config.out.write("%s%s:\n" % (prefix, k))
    if text is None:
        pretty_print_value(v, prefix + IND, config)
    else:
        _write_lines(text, prefix + IND, config)


def pretty_print_list(li, prefix="", config=DefaultConfig):
    inline = json.dumps(li)
    if len(prefix) + len(inline) < MAXWIDTH and "\\n" not in inline:
        config.out.write(prefix + inline + "\n")
        return
    for i, v in enumerate(li):
        pretty_print_item("item[%d]" % i, v, prefix, config)


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print the items of a dict, in the order of the dict.

    Instead of {'key': 'value', 'other': 'long\\nvalue'}, do

        key: value
        other:
          long
          value
    """
    for k, v in d.items():
        if k not in exclude_keys:
            pretty_print_item(k, v, prefix, config)


def pretty_print_patch_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path or '/', config.RESET))


def pretty_print_patch_entry(doc, e, index=0, config=DefaultConfig):
    """Pretty-print a single patch operation and apply it.

    doc is the document the operation applies to, and is modified.
    Returns the document after the operation. Raises PatchError if the
    operation does not apply.
    """
    op = e["op"]
    path = e["path"]

    # Values shown alongside the operation have to be looked up
    # before applying it
    source = e.get("from") if op in PatchOp.WITH_FROM else path
    try:
        before = resolve_pointer(doc, source)
    except PointerError:
        before = Missing

    doc, _ = apply_patch_entry(doc, e, index)

    if op == PatchOp.ADD:
        pretty_print_patch_action("added", path, config)
        pretty_print_value(e["value"], config.ADD, config)

    elif op == PatchOp.REMOVE:
        pretty_print_patch_action("removed", path, config)
        pretty_print_value(before, config.REMOVE, config)

    elif op == PatchOp.REPLACE:
        bval = e["value"]
        if json_type_name(before) != json_type_name(bval):
            typechange = " (type changed from %s to %s)" % (
                json_type_name(before), json_type_name(bval))
        else:
            typechange = ""
        pretty_print_patch_action("replaced" + typechange, path, config)
        pretty_print_value(before, config.REMOVE, config)
        pretty_print_value(bval, config.ADD, config)

    elif op == PatchOp.MOVE:
        pretty_print_patch_action("moved %s to" % (e["from"] or '/'), path, config)
        pretty_print_value(before, config.KEEP, config)

    elif op == PatchOp.COPY:
        pretty_print_patch_action("copied %s to" % (e["from"] or '/'), path, config)
        pretty_print_value(before, config.ADD, config)

    elif op == PatchOp.TEST:
        pretty_print_patch_action("tested", path, config)
        pretty_print_value(before, config.KEEP, config)

    else:
        raise PatchFormatError("Unknown patch op {}".format(op))

    config.out.write(PATCH_ENTRY_END + config.RESET)
    return doc


def pretty_print_patch(doc, entries, config=DefaultConfig):
    """Pretty-print a json patch, as applied to doc.

    doc itself is left untouched. Returns the patched document.
    """
    doc = copy.deepcopy(doc)
    for index, e in enumerate(entries):
        doc = pretty_print_patch_entry(doc, e, index, config)
    return doc


document_patch_header = """\
tpdiff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_document_patch(afn, bfn, doc, entries, config=DefaultConfig):
    """Pretty-print the patch between two documents

    Parameters
    ----------

    afn: str
        Filename of the original document
    bfn: str
        Filename of the changed document
    doc: json-like value
        The original document
    entries: list
        The patch describing the transformation from doc to the
        changed document
    config: PrettyPrintConfig
        Config object determining where and how things get printed
    """
    if entries:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(document_patch_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        pretty_print_patch(doc, entries, config)
