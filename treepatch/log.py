# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


LOG_FORMAT = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'

# Level names accepted by --log-level and the Global.log_level trait
LOG_LEVELS = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')


class PatchFormatError(ValueError):
    """A patch operation object does not have the RFC 6902 shape."""
    pass


def init_logging(level=logging.INFO):
    """Sets up logging for treepatch entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all treepatch loggers to `level`,
    unless `level` is given as `None`.
    """
    logging.basicConfig(format=LOG_FORMAT, level=level)
    logging.captureWarnings(True)


def set_treepatch_log_level(level, set_main=True):
    """Set a log level for the treepatch logger, and optionally the root logger"""
    if isinstance(level, str):
        level = getattr(logging, level)
    logger.setLevel(level)
    if set_main:
        logging.getLogger().setLevel(level)


logger = logging.getLogger('treepatch')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
