# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re

from .diff_format import (
    PATH_SEPARATOR, InvalidPathDescriptor, PathNotFound, IndexParseError,
    is_valid_key)


__all__ = ["split_path", "split_last", "as_index", "dot_lookup"]


r_is_index = re.compile(r"[0-9]+")


def split_path(path):
    """Normalize a path descriptor to a new list of keys.

    A string is split on ".", a list or tuple is copied, and an
    empty path (None, "" or []) gives the empty list denoting the root.
    """
    if path is None:
        return []
    if isinstance(path, str):
        if not path:
            return []
        return path.split(PATH_SEPARATOR)
    if isinstance(path, (list, tuple)):
        for key in path:
            if not is_valid_key(key):
                raise InvalidPathDescriptor(
                    "Invalid key {!r} in path {!r}.".format(key, path),
                    path=path)
        return list(path)
    raise InvalidPathDescriptor(
        "Path must be a string or a list of keys, not {!r}.".format(path),
        path=path)


def split_last(path):
    """Split a path into its parent keys and its final key, leaving path untouched.

    The final key of a string path is taken from the same "." split,
    so "" gives the key "" in the root.
    """
    if isinstance(path, str):
        keys = path.split(PATH_SEPARATOR)
    else:
        keys = split_path(path)
    if not keys:
        raise InvalidPathDescriptor(
            "The root path has no final key.", path=path)
    return keys[:-1], keys[-1]


def as_index(key):
    """Convert a path key to a list index.

    Accepts non-negative integers and strings of decimal digits.
    """
    if isinstance(key, int) and not isinstance(key, bool):
        if key >= 0:
            return key
    elif isinstance(key, str) and r_is_index.fullmatch(key):
        return int(key)
    raise IndexParseError(
        "Key {!r} is not a valid list index.".format(key))


def _child(node, key, keys):
    if isinstance(node, list):
        index = as_index(key)
        if index >= len(node):
            raise PathNotFound(
                "Index {} out of range in {!r} (length {}).".format(
                    index, keys, len(node)))
        return node[index]
    elif isinstance(node, dict):
        if key not in node:
            raise PathNotFound(
                "Key {!r} not found in {!r}.".format(key, keys))
        return node[key]
    else:
        raise PathNotFound(
            "Cannot look up key {!r} in {!r}: value of type '{}' is not "
            "a dict or list.".format(key, keys, type(node).__name__))


def dot_lookup(source, path, parent=False):
    """Return the value found in source at path.

    If parent is true, the final key is dropped and the container
    holding the value at path is returned instead. An empty path
    always resolves to source itself.
    """
    keys = split_path(path)
    if parent:
        keys = keys[:-1]
    node = source
    for key in keys:
        node = _child(node, key, keys)
    return node
