# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .diff_format import Missing
from .config import get_defaults_for_argparse, build_config, entrypoint_configurables
from .locking import CONDITIONS
from .log import init_logging, set_ddbupdate_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_ddbupdate_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_ddbupdate_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        pretty_print_dict(
            {
                header: modify_config_for_print(config),
            },
            config=PrettyPrintConfig(out=sys.stderr)
        )
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all ddbupdate commands.
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
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_document_args(parser, modified_optional=False):
    """Adds the original and modified document arguments."""
    parser.add_argument(
        "original",
        help="the original document (json) filename, "
             "or the null file for an empty document.")
    parser.add_argument(
        "modified",
        nargs="?" if modified_optional else None,
        default=None,
        help="the modified document (json) filename.")
    parser.add_argument(
        '--decimal',
        action="store_true",
        default=False,
        help="parse numbers as Decimal, the way boto3 returns them.")


def add_diff_args(parser):
    """Adds a set of arguments for commands that diff documents."""
    parser.add_argument(
        '--orphans',
        action="store_true",
        default=False,
        help="list every new leaf on its own, instead of the root of each "
             "new subtree.")


def add_compile_args(parser):
    """Adds a set of arguments for commands that compile update expressions."""
    parser.add_argument(
        '--support-sets',
        dest='support_sets',
        action="store_true",
        default=False,
        help="route deleted numeric or string list elements to a DELETE "
             "clause, as elements of set attributes (best effort guess).")
    parser.add_argument(
        '--prefix',
        default=None,
        help="prefix for all placeholder aliases.")


def add_locking_args(parser):
    """Adds a set of arguments for version-locked update expressions."""
    locking = parser.add_mutually_exclusive_group()
    locking.add_argument(
        '--versioned',
        action="store_true",
        default=False,
        help="add a condition on the version attribute of the original "
             "document.")
    locking.add_argument(
        '--lock',
        action="store_true",
        default=False,
        help="only set the version of the original document, "
             "auto-incremented unless --new-version is given.")
    parser.add_argument(
        '--version-path',
        dest='version_path',
        default='$.version',
        help="path of the version attribute, e.g. '$.version'.")
    parser.add_argument(
        '--condition',
        default='=',
        choices=CONDITIONS,
        help="operator comparing the stored version with the expected one.")
    parser.add_argument(
        '--use-new',
        dest='use_current',
        action="store_false",
        default=True,
        help="compare the stored version with the new version instead "
             "of the current one.")
    parser.add_argument(
        '--new-version',
        dest='new_version',
        type=json.loads,
        default=Missing,
        help="explicit new version for --lock, as a json value.")


def add_output_args(parser):
    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the result is written to this file. "
             "Otherwise it is printed to the terminal.")


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--no-color',
        dest='color',
        action='store_false',
        default=True,
        help="prevent use of ANSI color code escapes for text output")
