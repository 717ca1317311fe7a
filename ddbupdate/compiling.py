# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import ddbupdate.log

from .aliasing import AliasContext, alias
from .diff_format import ClauseOp, Missing
from .diffing import partitioned_diff

__all__ = ["ExpressionBuilder", "get_update_expression"]


class ExpressionBuilder(object):
    """Collects update clauses and their placeholders.

    All clauses added to one builder share the name and value registries
    and the alias context, so placeholders never collide.
    """

    def __init__(self, context=None, prefix=None):
        if context is None:
            context = AliasContext()
        self.context = context
        self.prefix = prefix
        self.names = {}
        self.values = {}
        self._clauses = {}
        self._condition = None

    def _alias(self, node, with_value=True, prefix=None):
        if prefix is None:
            prefix = self.prefix
        return alias(node, self.names, self.values if with_value else None,
                     self.context, prefix)

    def _append(self, op, parts):
        if parts:
            self._clauses.setdefault(op, []).extend(parts)

    def set(self, nodes):
        "Add `path = :value` assignments for nodes."
        self._append(ClauseOp.SET, [
            "%s = %s" % (a.path, a.value) for a in (self._alias(n) for n in nodes)])

    def remove(self, nodes):
        """Add removals of the attributes or list elements at nodes.

        Deletions enumerate leaves, unless a whole container was nulled, so
        the parent collections stay in place as empty {} or []. Code reading
        the item back can iterate them without None checks, and later SETs
        below them still find their parent.
        """
        self._append(ClauseOp.REMOVE, [
            self._alias(n, with_value=False).path for n in nodes])

    def delete(self, nodes):
        "Add `path :value` removals of elements from set attributes."
        self._append(ClauseOp.DELETE, [
            "%s %s" % (a.path, a.value) for a in (self._alias(n) for n in nodes)])

    def condition(self, node, operator, prefix=None):
        """Set a condition comparing the attribute at node with its value.

        With node.value Missing, the condition requires the attribute to be
        absent instead, and no value placeholder is registered. A None value
        is compared like any other.
        """
        if node.value is Missing:
            aliased = self._alias(node, with_value=False, prefix=prefix)
            self._condition = "attribute_not_exists (%s)" % aliased.path
        else:
            aliased = self._alias(node, prefix=prefix)
            self._condition = "%s %s %s" % (aliased.path, operator, aliased.value)

    @property
    def update_expression(self):
        clauses = []
        for op in ClauseOp.ORDER:
            if op in self._clauses:
                clauses.append("%s %s" % (op, ", ".join(self._clauses[op])))
        return " ".join(clauses)

    def validated(self):
        """Return the collected expression as a dict of update_item arguments.

        Empty placeholder maps are left out, the store rejects unused
        placeholder declarations.
        """
        result = {"UpdateExpression": self.update_expression}
        if self.names:
            result["ExpressionAttributeNames"] = dict(self.names)
        if self.values:
            result["ExpressionAttributeValues"] = dict(self.values)
        if self._condition is not None:
            result["ConditionExpression"] = self._condition
        return result


def compile_partitioned(builder, partitioned):
    "Add the clauses of a partitioned diff to builder."
    # Aliasing order decides which names get the lower truncation suffixes
    builder.set(partitioned[ClauseOp.SET])
    builder.remove(partitioned[ClauseOp.REMOVE])
    builder.delete(partitioned[ClauseOp.DELETE])
    return builder


def get_update_expression(original=None, modified=None, orphans=False,
                          support_sets=False, alias_context=None):
    """Compile the changes from original to modified into an update expression.

    Returns a dict with the UpdateExpression and, when not empty, the
    ExpressionAttributeNames and ExpressionAttributeValues. All names are
    aliased, which sidesteps names containing '.' and the long list of
    reserved words of the store.

    See partitioned_diff for orphans and support_sets. alias_context
    carries the alias prefix and truncation counter; pass the same
    context to several calls to keep their truncated aliases distinct.
    """
    builder = ExpressionBuilder(alias_context)
    compile_partitioned(
        builder, partitioned_diff(original, modified, orphans, support_sets))
    result = builder.validated()
    ddbupdate.log.debug("Compiled update expression: %s", result["UpdateExpression"])
    return result
