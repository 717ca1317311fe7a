# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


#: Ceiling on the length of a single attribute name or placeholder
MAX_NAME_LENGTH = 255


class ExpressionError(ValueError):
    """Base class for errors raised while compiling update expressions."""
    pass


class IdentifierTooLongError(ExpressionError):
    """An attribute name exceeds the identifier length ceiling of the store.

    Not recoverable short of renaming the attribute.
    """

    def __init__(self, name, limit=MAX_NAME_LENGTH):
        self.name = name
        self.limit = limit
        super(IdentifierTooLongError, self).__init__(
            "Attribute name: [{}] exceeds DynamoDB limit of [{}]".format(name, limit))


class AmbiguousVersionError(ExpressionError):
    """Auto-versioning was requested for a current version that is not a number."""

    def __init__(self, version):
        self.version = version
        super(AmbiguousVersionError, self).__init__(
            "Invalid arguments. Must specify [new_version] for "
            "non-numeric current version: [{!r}]".format(version))


class MissingVersionError(ExpressionError):
    """A new-version condition was requested, but no new version was given."""

    def __init__(self, version_path):
        self.version_path = version_path
        super(MissingVersionError, self).__init__(
            "No new version value found at [{}] in the modified document".format(
                version_path))


def init_logging(level=logging.INFO):
    """Sets up logging for ddbupdate entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all ddbupdate loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_ddbupdate_log_level(level, set_main=True):
    """Set a log level for ddbupdate loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('ddbupdate')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
