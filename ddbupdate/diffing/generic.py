# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from numbers import Number

import ddbupdate.log

from ..diff_format import DiffOp, ClauseOp, Missing, validate_diff
from ..paths import INDEX, is_ancestor, parse_path, set_path
from .nodes import all_nodes, leaf_nodes, ancestor_nodes, by_path

__all__ = ["diff", "partitioned_diff", "patches"]


# NOTE: elements of a list should be removed by nullifying the value, never by
# popping the element. Popping collapses the list and shifts the meaning of
# every following index. Nulled elements turn into REMOVE clauses that hit the
# right element every time, and SET and REMOVE of list elements can then be
# mixed in one update expression without overlapping paths.


def is_number(value):
    "Numbers, but not bools."
    return isinstance(value, Number) and not isinstance(value, bool)


def nullified(a, b):
    "Original node a had a value, modified node b holds None."
    return a.value is not None and b.value is None


def emptied(a, b):
    "Original node a was not an empty string, modified node b is one."
    return not _is_empty_string(a.value) and _is_empty_string(b.value)


def _is_empty_string(value):
    return isinstance(value, str) and value == ""


def values_differ(x, y):
    "Compare two leaf values, telling apart True from 1 but not 1 from 1.0."
    if is_number(x) and is_number(y):
        return x != y
    if type(x) is not type(y):
        return True
    return x != y


def _kind(value):
    if isinstance(value, dict):
        return dict
    if isinstance(value, list):
        return list
    return None


def _is_internal(value):
    return _kind(value) is not None and len(value) > 0


def replaced_nodes(original_nodes, modified_nodes):
    """Find the paths where a container and a scalar, or a map and a list,
    swap places, with a non-empty container on at least one side.

    Leaf-level diffing cannot express those: the store rejects setting
    `#a.#b` below a scalar `#a`, and removing the leaves below `#a` never
    writes its new scalar. Each one is returned as a single node instead,
    holding the whole modified value, or the whole original value when the
    modified value was nulled or emptied (a deletion).

    Returns a (sets, deletes) pair of node lists.
    """
    original_by_path = {n.path: n for n in original_nodes}
    sets, deletes = [], []
    for b in modified_nodes:
        a = original_by_path.get(b.path)
        if a is None or _kind(a.value) is _kind(b.value):
            continue
        if not (_is_internal(a.value) or _is_internal(b.value)):
            continue
        if nullified(a, b) or emptied(a, b):
            deletes.append(a)
        else:
            sets.append(b)
    return sets, deletes


def _below(nodes, roots):
    "Drop the nodes at or below any of the root paths."
    paths = set(r.path for r in roots)
    if not paths:
        return nodes
    return [n for n in nodes
            if n.path not in paths and not any(is_ancestor(p, n.path) for p in paths)]


def diff(original, modified, orphans=False):
    """Compute the ADD/SET/DELETE diff of two documents.

    ADD holds the nodes new in modified. With orphans=False they are
    collapsed to the roots of the new subtrees, with orphans=True every new
    leaf is listed on its own, however deep (useful with a path-aware setter
    that creates the intermediate containers).

    DELETE holds the leaves of original that are gone from modified, or
    that were nulled or emptied there.

    SET holds the leaves present in both with a changed value.

    Where a non-empty container is replaced by a scalar or by a container
    of the other kind (or the other way around), the whole path is a single
    SET of the modified value, or a single DELETE of the original value if
    it was nulled or emptied, and nothing below it is listed.
    """
    if original is None:
        original = {}
    if modified is None:
        modified = {}

    original_nodes = all_nodes(original)
    modified_nodes = all_nodes(modified)

    original_leaves = leaf_nodes(original_nodes)
    modified_leaves = leaf_nodes(modified_nodes)

    if orphans:
        # New deep descendant paths are returned, even if the ancestor node is new
        known = set(n.path for n in original_leaves)
        added = [n for n in modified_leaves if n.path not in known]
    else:
        known = set(n.path for n in original_nodes)
        added = ancestor_nodes([n for n in modified_nodes if n.path not in known])

    modified_by_path = {n.path: n for n in modified_nodes}
    removed = []
    for a in original_leaves:
        b = modified_by_path.get(a.path, Missing)
        if b is Missing or nullified(a, b) or emptied(a, b):
            removed.append(a)

    original_leaves_by_path = {n.path: n for n in original_leaves}
    updated = []
    for b in modified_leaves:
        a = original_leaves_by_path.get(b.path, Missing)
        if a is Missing or nullified(a, b) or emptied(a, b):
            continue
        if values_differ(a.value, b.value):
            updated.append(b)

    replaced, replaced_removed = replaced_nodes(original_nodes, modified_nodes)
    if replaced or replaced_removed:
        roots = replaced + replaced_removed
        added = _below(added, roots)
        removed = sorted(_below(removed, roots) + replaced_removed, key=by_path)
        updated = sorted(_below(updated, roots) + replaced, key=by_path)

    d = {
        DiffOp.ADD: added,
        DiffOp.DELETE: removed,
        DiffOp.SET: updated,
    }
    ddbupdate.log.debug("Diff has %d ADD, %d SET and %d DELETE nodes (orphans=%s)",
                        len(added), len(updated), len(removed), orphans)

    # We can turn this off for performance after the library has been well tested:
    validate_diff(d)

    return d


def is_set_element(node):
    """Guess whether a deleted node is an element of a set-typed attribute.

    Best effort only: the path ends in a numeric subscript and the value is
    a number or a string. A plain list of numbers or strings looks the same,
    the store's attribute type is not checked.
    """
    segments = parse_path(node.path)
    if not segments or segments[-1].kind != INDEX:
        return False
    return is_number(node.value) or isinstance(node.value, str)


def partitioned_diff(original, modified, orphans=False, support_sets=False):
    """Diff two documents and regroup the nodes by update clause.

    SET     ADD and SET nodes of the diff, modifying or adding attributes
    REMOVE  deleted nodes, removing attributes or list elements
    DELETE  with support_sets, deleted nodes guessed to be set elements
    """
    d = diff(original, modified, orphans=orphans)
    if support_sets:
        deletes = [n for n in d[DiffOp.DELETE] if is_set_element(n)]
        removes = [n for n in d[DiffOp.DELETE] if not is_set_element(n)]
    else:
        deletes = []
        removes = d[DiffOp.DELETE]
    return {
        ClauseOp.SET: d[DiffOp.ADD] + d[DiffOp.SET],
        ClauseOp.REMOVE: removes,
        ClauseOp.DELETE: deletes,
    }


def patches(original, modified, orphans=False):
    """Materialize the diff as one partial document per bucket.

    Useful for logging and testing, and for re-applying the changes with a
    path-aware setter. The DELETE document holds the original values of
    the deleted leaves.
    """
    d = diff(original, modified, orphans=orphans)
    result = {}
    for op in (DiffOp.ADD, DiffOp.SET, DiffOp.DELETE):
        doc = {}
        for node in d[op]:
            set_path(doc, node.path, node.value)
        result[op] = doc
    return result
