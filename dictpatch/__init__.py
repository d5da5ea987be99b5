# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .lookup import dot_lookup
from .patching import patch, patch_add, patch_change, patch_remove
from .log import DictPatchError
from .diff_format import (
    DiffFormatError, InvalidPathDescriptor, UnsupportedOperator,
    PathNotFound, IndexParseError)


__all__ = [
    "__version__",
    "patch", "patch_add", "patch_change", "patch_remove",
    "dot_lookup",
    "DictPatchError", "DiffFormatError", "InvalidPathDescriptor",
    "UnsupportedOperator", "PathNotFound", "IndexParseError",
    ]
