# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Conditional update expressions for optimistic locking.

A version lock pairs an update expression with a ConditionExpression on a
designated version (or marker) attribute, so the update only goes through
while the stored attribute still compares as expected:

    SET #version = :version
    ConditionExpression: #expectedVersion = :expectedVersion

When the attribute has never been written, the condition falls back to
``attribute_not_exists``, so the same call both creates the lock and,
later on, compares and swaps it.
"""

import ddbupdate.log

from .aliasing import AliasContext
from .compiling import ExpressionBuilder, compile_partitioned
from .diff_format import Missing, make_node
from .diffing import partitioned_diff
from .diffing.generic import is_number
from .log import AmbiguousVersionError, MissingVersionError
from .paths import as_path, get_path, set_path

__all__ = ["CONDITIONS", "get_versioned_update_expression", "get_version_lock_expression"]


#: Valid comparison operators for version conditions
CONDITIONS = ("=", "<", "<=", ">", ">=", "<>")

DEFAULT_VERSION_PATH = "$.version"

#: Alias prefix of the condition placeholders unless the context sets one
DEFAULT_CONDITION_PREFIX = "expected"


def validate_condition(condition):
    if condition not in CONDITIONS:
        raise ValueError("Invalid condition %r, expecting one of %s" % (
            condition, ", ".join(CONDITIONS)))


def get_versioned_update_expression(original=None, modified=None,
                                    version_path=DEFAULT_VERSION_PATH,
                                    use_current=True, current_version=Missing,
                                    condition="=", orphans=False,
                                    alias_context=None):
    """Compile an update expression guarded by a condition on version_path.

    The condition compares the stored attribute at version_path with the
    current version when use_current is true, or with the new version in
    modified otherwise. current_version defaults to the value in original.
    If there is no current version (as opposed to a None one), the
    condition is ``attribute_not_exists`` instead.

    Normal use, compare and increment:

        get_versioned_update_expression(
            original={'version': 1}, modified={'version': 2})

    Try-lock a range without reading first. Say a worker receives a
    payload with start = 1000 while the stored start is 1. Updating with

        get_versioned_update_expression(
            original={}, modified={'start': 1000}, use_current=False,
            version_path='$.start', condition='<')

    claims the range. Duplicate or late workers receiving the same payload
    fail the condition, since the stored start is no longer below 1000.
    """
    validate_condition(condition)
    version_path = as_path(version_path)
    if original is None:
        original = {}
    if modified is None:
        modified = {}
    if alias_context is None:
        alias_context = AliasContext()

    # Update placeholders go without prefix, condition ones with
    builder = ExpressionBuilder(alias_context, prefix="")
    compile_partitioned(builder, partitioned_diff(original, modified, orphans))

    if current_version is Missing:
        current_version = get_path(original, version_path)
    if current_version is Missing:
        expected = Missing
    elif use_current:
        expected = current_version
    else:
        expected = get_path(modified, version_path)
        if expected is Missing:
            raise MissingVersionError(version_path)

    prefix = alias_context.prefix
    if prefix is None:
        prefix = DEFAULT_CONDITION_PREFIX
    builder.condition(make_node(version_path, expected), condition, prefix=prefix)

    result = builder.validated()
    ddbupdate.log.debug("Version condition: %s", result["ConditionExpression"])
    return result


def next_version(current_version):
    """Derive the version following current_version.

    Returns 1 when there is no current version yet.
    """
    if current_version is Missing or current_version is None:
        return 1
    if is_number(current_version):
        return current_version + 1
    raise AmbiguousVersionError(current_version)


def get_version_lock_expression(original=None, version_path=DEFAULT_VERSION_PATH,
                                new_version=Missing, condition="=", orphans=False,
                                alias_context=None):
    """Compile an update expression that only sets the version, under lock.

    Without new_version, the new version is the current one plus one, or 1
    when original has no version yet; the condition then compares the
    stored version with the current one (or requires it to be absent).
    Raises AmbiguousVersionError if the current version is not a number.

    With new_version, the condition compares the stored version with the
    new one using condition, e.g. '<' to claim a range marker.
    """
    version_path = as_path(version_path)
    if original is None:
        # Nothing known about the stored item, assume the version is null
        current_version = None
    else:
        current_version = get_path(original, version_path)

    use_current = new_version is Missing
    if use_current:
        new_version = next_version(current_version)
        if current_version is None:
            current_version = Missing
        ddbupdate.log.debug("Auto version %r -> %r", current_version, new_version)

    before = {}
    if current_version is not Missing:
        set_path(before, version_path, current_version)
    after = set_path({}, version_path, new_version)

    return get_versioned_update_expression(
        original=before,
        modified=after,
        version_path=version_path,
        use_current=use_current,
        current_version=current_version,
        condition=condition,
        orphans=orphans,
        alias_context=alias_context,
    )
