# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .aliasing import AliasContext, alias
from .compiling import get_update_expression
from .diff_format import Missing
from .diffing import diff, partitioned_diff, patches
from .locking import get_versioned_update_expression, get_version_lock_expression
from .log import (
    ExpressionError, IdentifierTooLongError, AmbiguousVersionError, MissingVersionError)
from .patching import patch


__all__ = [
    "__version__",
    "diff", "partitioned_diff", "patches", "patch",
    "alias", "AliasContext",
    "get_update_expression",
    "get_versioned_update_expression", "get_version_lock_expression",
    "Missing",
    "ExpressionError", "IdentifierTooLongError",
    "AmbiguousVersionError", "MissingVersionError",
    ]
