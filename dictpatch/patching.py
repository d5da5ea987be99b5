# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from . import log
from .log import DictPatchError
from .diff_format import (
    ACTIONS, DiffAction, DiffFormatError, PathNotFound, UnsupportedOperator,
    is_valid_key, sequence_types, unpack_entry)
from .lookup import as_index, dot_lookup, split_last


__all__ = ["patch", "patch_add", "patch_change", "patch_remove"]


def _pairs(changes):
    if not isinstance(changes, sequence_types):
        raise DiffFormatError(
            "Expected a list of [key, value] pairs, not {!r}.".format(changes))
    for pair in changes:
        if not isinstance(pair, sequence_types) or len(pair) != 2:
            raise DiffFormatError(
                "Expected a [key, value] pair, not {!r}.".format(pair))
        if not is_valid_key(pair[0]):
            raise DiffFormatError(
                "Invalid key {!r} in changes.".format(pair[0]))
        yield pair[0], pair[1]


def _not_a_container(path, obj):
    return PathNotFound(
        "Value at {!r} of type '{}' is not a dict or list.".format(
            path, type(obj).__name__))


def patch_add(destination, path, changes):
    "Insert or set each (key, value) of changes in the container at path."
    for key, value in _pairs(changes):
        dest = dot_lookup(destination, path)
        if isinstance(dest, list):
            index = as_index(key)
            if index > len(dest):
                raise PathNotFound(
                    "Cannot insert at index {} in list of length {}.".format(
                        index, len(dest)))
            dest.insert(index, value)
        elif isinstance(dest, dict):
            dest[key] = value
        else:
            raise _not_a_container(path, dest)


def patch_change(destination, path, changes):
    """Replace the value at path with the new value of changes.

    changes is an (old, new) pair, only new is used.
    """
    if not isinstance(changes, sequence_types) or not changes:
        raise DiffFormatError(
            "change expects an [old, new] value pair, not {!r}.".format(changes))
    value = changes[-1]
    parent_keys, key = split_last(path)
    dest = dot_lookup(destination, parent_keys)
    if isinstance(dest, list):
        index = as_index(key)
        if index >= len(dest):
            raise PathNotFound(
                "Index {} out of range in list of length {}.".format(
                    index, len(dest)))
        dest[index] = value
    elif isinstance(dest, dict):
        dest[key] = value
    else:
        raise _not_a_container(parent_keys, dest)


def patch_remove(destination, path, changes):
    """Remove each key of changes from the container at path.

    List indices must be valid after each previous removal, i.e.
    usually given in descending order. The values are ignored.
    """
    for key, _ in _pairs(changes):
        dest = dot_lookup(destination, path)
        if isinstance(dest, list):
            index = as_index(key)
            if index >= len(dest):
                raise PathNotFound(
                    "Index {} out of range in list of length {}.".format(
                        index, len(dest)))
            del dest[index]
        elif isinstance(dest, dict):
            if key in dest:
                del dest[key]
            else:
                log.debug("Key %r already absent from %r", key, path)
        else:
            raise _not_a_container(path, dest)


_operators = {
    DiffAction.ADD: patch_add,
    DiffAction.CHANGE: patch_change,
    DiffAction.REMOVE: patch_remove,
}


def patch(diff, destination, strict=False, in_place=True):
    """Apply a list of diff entries to destination.

    Each entry is an [action, path, changes] triple as produced by
    dictdiffer.diff(), with action one of "add", "change" or "remove".
    Entries are applied strictly in order, each one against the state
    left by the entries before it.

    Unknown actions are skipped unless `strict` is true, in which case
    an UnsupportedOperator is raised.

    Applying a diff is not transactional: if an entry fails, the
    entries before it remain applied to destination and the error
    (a DictPatchError, annotated with the entry index and path) is
    raised. Pass `in_place=False` to patch and return a deep copy
    instead, leaving destination untouched whether or not the
    patch succeeds.

    Returns the patched object, which is destination itself when
    patching in place.
    """
    if not in_place:
        destination = copy.deepcopy(destination)

    for i, e in enumerate(diff):
        path = None
        try:
            action, path, changes = unpack_entry(e)
            if action not in ACTIONS:
                if strict:
                    raise UnsupportedOperator(
                        "Unknown diff action {!r}.".format(action))
                log.debug("Skipping diff entry %d with unknown action %r", i, action)
                continue
            log.debug("Applying diff entry %d: %s %r", i, action, path)
            _operators[action](destination, path, changes)
        except DictPatchError as err:
            err.entry_index = i
            err.path = path
            raise

    return destination
