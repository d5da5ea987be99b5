# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import init_logging, set_dictpatch_log_level


def _entrypoint(parser):
    return parser.prog.split(' ')[0]


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        try:
            self.set_defaults(**get_defaults_for_argparse(_entrypoint(self)))
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_dictpatch_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_dictpatch_log_level(level, True)


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


def print_config(entrypoint, out=None):
    "Print the effective config of an entrypoint, one option per line."
    out = out or sys.stderr
    header = entrypoint_configurables[entrypoint].__name__
    config = modify_config_for_print(build_config(entrypoint, True))
    print('%s:' % header, file=out)
    for k in sorted(config):
        print('  %s: %s' % (k, config[k]), file=out)


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        print_config(_entrypoint(parser))
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all dictpatch commands.
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


def add_patch_args(parser):
    """Adds a set of arguments for commands that apply diffs.
    """
    parser.add_argument(
        '--strict',
        action="store_true",
        default=False,
        help="fail on diff entries with an unknown action "
             "instead of skipping them.")
    parser.add_argument(
        '--indent',
        default=None,
        type=int,
        help="indent the JSON output by this many spaces.")


filename_help = {
    "base": "the JSON document to patch, or /dev/null (nul on Windows) "
            "for an empty object.",
    "patch": "a JSON file holding the list of [action, path, changes] "
             "diff entries to apply.",
    }


def add_filename_args(parser, names):
    """Add the base and patch positional arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])
