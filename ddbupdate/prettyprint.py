# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import pprint
import re
import sys

import colorama

from .diff_format import DiffOp, Missing
from .paths import get_path


# Indentation offset in pretty-print
IND = "  "

# Lists longer than this print one element per line
MAXWIDTH = 78


Markers = namedtuple('Markers', ('REMOVE', 'ADD', 'INFO', 'RESET'))


markers = {
    True: Markers(
        REMOVE = colorama.Fore.RED + '-  ',
        ADD    = colorama.Fore.GREEN + '+  ',
        INFO   = colorama.Fore.BLUE + colorama.Style.BRIGHT + '## ',
        RESET  = colorama.Style.RESET_ALL,
    ),
    False: Markers(
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    ),
}


class PrettyPrintConfig:
    """Where to print, and whether to color the +/-/## markers.

    The markers are read as attributes: config.ADD, config.REMOVE,
    config.INFO and config.RESET.
    """

    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    def __getattr__(self, name):
        if name in Markers._fields:
            return getattr(markers[self.use_color], name)
        raise AttributeError(name)

DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if os.path.exists(filename):
        t = os.path.getmtime(filename)
        return datetime.datetime.fromtimestamp(t).isoformat(" ")
    return "(no timestamp)"


def format_value(v):
    "Strings print bare unless they span lines, everything else as its repr."
    if isinstance(v, str) and "\n" not in v:
        return v
    return pprint.pformat(v)


def _inline(v, prefix):
    "Whether a member value fits on the line of its key."
    if isinstance(v, dict):
        return not v
    if isinstance(v, list):
        return len(pprint.pformat(v)) < MAXWIDTH - len(prefix)
    return True


def _print_member(key, v, prefix, config):
    if _inline(v, prefix):
        config.out.write("%s%s: %s\n" % (prefix, key, format_value(v)))
    else:
        config.out.write("%s%s:\n" % (prefix, key))
        pretty_print_value(v, prefix + IND, config)


def pretty_print_value(value, prefix="", config=DefaultConfig):
    """Print a document value with all lines prefixed.

    Map members go one per line as `key: value`, with nested maps and long
    lists indented below their key. Long lists list their elements as
    `[i]: value` members.
    """
    if isinstance(value, dict) and value:
        pretty_print_dict(value, (), prefix, config)
    elif isinstance(value, list) and not _inline(value, prefix):
        for i, v in enumerate(value):
            _print_member("[%d]" % i, v, prefix, config)
    else:
        config.out.write("%s%s\n" % (prefix, format_value(value)))


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          nested: value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        _print_member(k, d[k], prefix, config)


def pretty_print_diff_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path, config.RESET))


def pretty_print_diff(a, d, config=DefaultConfig):
    """Pretty-print an ADD/SET/DELETE document diff.

    a is the original document, used to show the replaced values of SET
    nodes. Nodes are printed in path order, whatever their bucket.
    """
    entries = []
    for op in (DiffOp.ADD, DiffOp.SET, DiffOp.DELETE):
        entries.extend((node.path, op, node) for node in d[op])

    for path, op, node in sorted(entries, key=lambda x: x[0]):
        if op == DiffOp.ADD:
            pretty_print_diff_action("added", path, config)
            pretty_print_value(node.value, config.ADD, config)

        elif op == DiffOp.DELETE:
            pretty_print_diff_action("deleted", path, config)
            pretty_print_value(node.value, config.REMOVE, config)

        else:
            aval = get_path(a, path) if a is not None else Missing
            bval = node.value
            if aval is not Missing and type(aval) is not type(bval):
                typechange = " (type changed from %s to %s)" % (
                    aval.__class__.__name__, bval.__class__.__name__)
            else:
                typechange = ""
            pretty_print_diff_action("replaced" + typechange, path, config)
            if aval is not Missing:
                pretty_print_value(aval, config.REMOVE, config)
            pretty_print_value(bval, config.ADD, config)

        config.out.write("\n" + config.RESET)


document_diff_header = """\
ddbdiff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_document_diff(afn, bfn, a, d, config=DefaultConfig):
    """Pretty-print a document diff

    Parameters
    ----------

    afn: str
        Filename of a, the original document
    bfn: str
        Filename of b, the modified document
    a: dict
        The original document
    d: diff
        The ADD/SET/DELETE diff describing the changes from a to b
    config: PrettyPrintConfig
        Config object determining where and how output is printed
    """
    if any(d[op] for op in d):
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(document_diff_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        pretty_print_diff(a, d, config)


def pretty_print_update_expression(expression, config=DefaultConfig):
    """Pretty-print compiled update_item arguments.

    Clauses of the update expression go on lines of their own, the
    placeholder maps are listed below them.
    """
    config.out.write("%sUpdateExpression:%s\n" % (config.INFO, config.RESET))
    for clause in _split_clauses(expression["UpdateExpression"]):
        config.out.write("%s%s\n" % (IND, clause))
    if "ConditionExpression" in expression:
        config.out.write("%sConditionExpression:%s\n" % (config.INFO, config.RESET))
        config.out.write("%s%s\n" % (IND, expression["ConditionExpression"]))
    for key in ("ExpressionAttributeNames", "ExpressionAttributeValues"):
        if key in expression:
            config.out.write("%s%s:%s\n" % (config.INFO, key, config.RESET))
            pretty_print_dict(expression[key], (), IND, config)


_clause_start = re.compile(r"(?:^| )(?=(?:SET|REMOVE|DELETE) )")

def _split_clauses(update_expression):
    return [c for c in _clause_start.split(update_expression) if c]
