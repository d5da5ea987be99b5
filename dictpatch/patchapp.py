# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging
import os
import sys

from . import log
from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args, add_patch_args)
from .log import DictPatchError, set_dictpatch_log_level
from .diff_format import validate_diff
from .patching import patch
from .utils import EXPLICIT_MISSING_FILE, read_json, write_json, setup_std_streams


_description = "Apply a diff list produced by dictdiffer to a JSON document."


def main_patch(args):
    base_filename = args.base
    patch_filename = args.patch
    output_filename = args.output

    for fn in (base_filename, patch_filename):
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    before = read_json(base_filename, on_null='empty')
    diff = read_json(patch_filename, on_null='list')

    try:
        validate_diff(diff, strict=args.strict)
        after = patch(diff, before, strict=args.strict)
    except DictPatchError as e:
        log.error("Failed to patch %s: %s", base_filename, e)
        return 1

    log.info("Applied %d diff entries to %s", len(diff), base_filename)
    if output_filename:
        write_json(after, output_filename, indent=args.indent)
    else:
        write_json(after, sys.stdout, indent=args.indent)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the patch command."""
    parser = ConfigBackedParser(
        prog=prog or "dictpatch patch",
        description=_description,
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["base", "patch"])
    add_patch_args(parser)
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    # The level may come from config rather than the command line
    set_dictpatch_log_level(getattr(logging, arguments.log_level))
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
