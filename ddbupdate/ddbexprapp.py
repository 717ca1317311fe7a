# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

import ddbupdate.log

from .aliasing import AliasContext
from .args import (
    add_generic_args, add_document_args, add_diff_args, add_compile_args,
    add_locking_args, add_output_args, add_prettyprint_args, ConfigBackedParser,
    )
from .compiling import get_update_expression
from .locking import get_versioned_update_expression, get_version_lock_expression
from .log import ExpressionError
from .prettyprint import pretty_print_update_expression, PrettyPrintConfig
from .utils import EXPLICIT_MISSING_FILE, read_document, write_json, setup_std_streams


_description = ("Compile the changes between two JSON documents into "
                "DynamoDB update_item arguments.")


def _compile(a, b, args):
    context = AliasContext(prefix=args.prefix)
    if args.lock:
        return get_version_lock_expression(
            a,
            version_path=args.version_path,
            new_version=args.new_version,
            condition=args.condition,
            orphans=args.orphans,
            alias_context=context,
        )
    if args.versioned:
        if args.support_sets:
            ddbupdate.log.warning(
                "--support-sets is ignored for versioned update expressions")
        return get_versioned_update_expression(
            a, b,
            version_path=args.version_path,
            use_current=args.use_current,
            condition=args.condition,
            orphans=args.orphans,
            alias_context=context,
        )
    return get_update_expression(
        a, b,
        orphans=args.orphans,
        support_sets=args.support_sets,
        alias_context=context,
    )


def main_expr(args):
    """Main handler of expr CLI"""
    original = args.original
    modified = args.modified
    output = getattr(args, 'out', None)

    if modified is None and not args.lock:
        print("A modified document is required unless --lock is given")
        return 1

    filenames = [original] if modified is None else [original, modified]
    for fn in filenames:
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    a = read_document(original, on_null='empty', use_decimal=args.decimal)
    b = None
    if modified is not None:
        b = read_document(modified, on_null='empty', use_decimal=args.decimal)

    try:
        result = _compile(a, b, args)
    except ExpressionError as e:
        ddbupdate.log.error(str(e))
        return 1

    if output:
        with open(output, "w") as df:
            write_json(result, df)
    elif args.pretty:
        config = PrettyPrintConfig(out=sys.stdout, use_color=args.color)
        pretty_print_update_expression(result, config)
    else:
        write_json(result, sys.stdout)
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the ddbexpr command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'ddbexpr',
        )
    add_generic_args(parser)
    add_document_args(parser, modified_optional=True)
    add_diff_args(parser)
    add_compile_args(parser)
    add_locking_args(parser)
    add_prettyprint_args(parser)
    add_output_args(parser)
    parser.add_argument(
        '--pretty',
        action="store_true",
        default=False,
        help="print the update expression one clause per line instead of json.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_expr(arguments)


if __name__ == "__main__":
    sys.exit(main())
