# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import DictPatchError


class DiffFormatError(DictPatchError):
    "A diff entry does not have the shape its action requires."


class InvalidPathDescriptor(DiffFormatError):
    "A path is neither a dot separated string nor a sequence of keys."


class UnsupportedOperator(DiffFormatError):
    "A diff entry names an action other than add, change or remove."


class PathNotFound(DictPatchError, LookupError):
    "A path token does not resolve to an existing key or index."


class IndexParseError(DictPatchError):
    "A path token used against a list is not a non-negative integer."


class DiffAction:
    "Collection of valid values for the action field in diff entries."
    ADD = "add"
    CHANGE = "change"
    REMOVE = "remove"


ACTIONS = (
    DiffAction.ADD,
    DiffAction.CHANGE,
    DiffAction.REMOVE,
    )

# Separator of keys in string paths
PATH_SEPARATOR = "."

path_types = (str, list, tuple)
sequence_types = (list, tuple)


def is_valid_key(key):
    "Whether key can address a dict entry, i.e. is hashable."
    try:
        hash(key)
    except TypeError:
        return False
    return True


def op_add(path, pairs):
    "Create a diff entry adding each (key, value) pair to the container at path."
    return [DiffAction.ADD, path, [list(p) for p in pairs]]

def op_change(path, old, new):
    "Create a diff entry replacing the value at path."
    return [DiffAction.CHANGE, path, [old, new]]

def op_remove(path, pairs):
    "Create a diff entry removing each (key, value) pair from the container at path."
    return [DiffAction.REMOVE, path, [list(p) for p in pairs]]


def unpack_entry(e):
    """Split a diff entry into its (action, path, changes) fields.

    Raises a DiffFormatError if e is not a 3 item sequence.
    """
    if not isinstance(e, sequence_types) or len(e) != 3:
        raise DiffFormatError(
            "Diff entry must be an [action, path, changes] triple, not {!r}.".format(e))
    return tuple(e)


def is_valid_diff(diff, strict=False):
    """Checks whether a diff (list of diff entries) is well formed.

    Returns a boolean indicating the well-formedness of the diff.
    """
    try:
        validate_diff(diff, strict=strict)
    except DiffFormatError:
        return False
    return True


def validate_diff(diff, strict=False):
    """Check whether a diff (list of diff entries) is well formed.

    Raises a DiffFormatError if not well formed. Entries with an unknown
    action are only rejected if `strict` is true.
    """
    if not isinstance(diff, sequence_types):
        raise DiffFormatError("Diff must be a list.")
    for i, e in enumerate(diff):
        try:
            validate_diff_entry(e, strict=strict)
        except DiffFormatError as err:
            err.entry_index = i
            raise


def validate_diff_entry(e, strict=False):
    """Check that e is a well formed diff entry.

    Raises a DiffFormatError if not well formed.
    """
    action, path, changes = unpack_entry(e)

    if path is not None and not isinstance(path, path_types):
        raise InvalidPathDescriptor(
            "Invalid path {!r} of type '{}'. Expecting str or list.".format(
                path, type(path).__name__), path=path)
    if isinstance(path, sequence_types):
        for key in path:
            if not is_valid_key(key):
                raise InvalidPathDescriptor(
                    "Invalid key {!r} in path.".format(key), path=path)
    if not isinstance(changes, sequence_types):
        raise DiffFormatError(
            "{} expects a list of changes, not {!r}.".format(action, changes),
            path=path)

    if action == DiffAction.CHANGE:
        if len(changes) != 2:
            raise DiffFormatError(
                "change expects an [old, new] value pair, not {!r}.".format(changes),
                path=path)
    elif action in (DiffAction.ADD, DiffAction.REMOVE):
        for pair in changes:
            if not isinstance(pair, sequence_types) or len(pair) != 2:
                raise DiffFormatError(
                    "{} expects [key, value] pairs, not {!r}.".format(action, pair),
                    path=path)
            if not is_valid_key(pair[0]):
                raise DiffFormatError(
                    "Invalid key {!r} in {} entry.".format(pair[0], action),
                    path=path)
    elif strict:
        raise UnsupportedOperator(
            "Unknown diff action {!r}.".format(action), path=path)

    # Note that values are not checked in any way, as they
    # can in principle be arbitrary json objects
