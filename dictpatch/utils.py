# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import sys

if os.name == 'nt':
    EXPLICIT_MISSING_FILE = 'nul'
else:
    EXPLICIT_MISSING_FILE = '/dev/null'

_null_values = {
    'empty': dict,
    'list': list,
}


def read_json(f, on_null='empty'):
    """Read and return a JSON document from a filename or file-like object.

    The null filename ("/dev/null" on *nix, "nul" on Windows) reads as
    an empty dict when `on_null` is "empty", or an empty list for "list".
    """
    if f == EXPLICIT_MISSING_FILE:
        if on_null not in _null_values:
            raise ValueError(
                'Not valid value for `on_null`: %r. Valid values '
                'are %s' % (on_null, ', '.join(map(repr, sorted(_null_values)))))
        return _null_values[on_null]()
    if isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            return json.load(fo)
    return json.load(f)


def write_json(obj, f, indent=None):
    """Write obj as JSON to a filename or file-like object.

    Files are written as UTF-8, streams get ASCII with escapes so
    any console encoding can print them.
    """
    if isinstance(f, str):
        with io.open(f, 'w', encoding='utf-8') as fo:
            json.dump(obj, fo, indent=indent, ensure_ascii=False)
            fo.write('\n')
    else:
        json.dump(obj, f, indent=indent)
        f.write('\n')


def setup_std_streams():
    "Enable colorama for ANSI escapes on Windows."
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
