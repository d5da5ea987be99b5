# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class DictPatchError(ValueError):
    """Base class of all errors raised while applying a diff.

    When raised from inside the patch loop, `entry_index` and `path`
    identify the diff entry that failed.
    """

    def __init__(self, message, entry_index=None, path=None):
        super(DictPatchError, self).__init__(message)
        self.message = message
        self.entry_index = entry_index
        self.path = path

    def __str__(self):
        if self.entry_index is None:
            return self.message
        return "{} (diff entry {}, path {!r})".format(
            self.message, self.entry_index, self.path)


def init_logging(level=logging.INFO):
    """Sets up logging for dictpatch entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all dictpatch loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_dictpatch_log_level(level, set_main=True):
    """Set a log level for dictpatch loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('dictpatch')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
