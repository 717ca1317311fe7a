# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Flatten documents into sorted (path, value) node lists."""

import operator

from ..diff_format import make_node
from ..paths import ROOT, ancestor_paths, format_index, format_member

__all__ = ["all_nodes", "leaf_nodes", "ancestor_nodes"]


by_path = operator.attrgetter("path")


def _walk(value, path):
    if isinstance(value, dict):
        items = ((format_member(k), v) for k, v in value.items())
    elif isinstance(value, list):
        items = ((format_index(i), v) for i, v in enumerate(value))
    else:
        return
    for step, child in items:
        child_path = path + step
        yield make_node(child_path, child)
        for node in _walk(child, child_path):
            yield node


def all_nodes(doc):
    """List every node of doc below the root, internal and leaf, sorted by path.

    Values of internal nodes are the containers themselves, not copies.
    """
    return sorted(_walk(doc, ROOT), key=by_path)


def leaf_nodes(nodes):
    """Filter nodes down to those without descendants in the list.

    Scalars, None and empty containers are leaves. Sort order is kept.
    """
    parents = set()
    for node in nodes:
        parents.update(ancestor_paths(node.path))
    return [node for node in nodes if node.path not in parents]


def ancestor_nodes(nodes):
    """Reduce nodes to the minimal set of subtree roots.

    Drops every node with an ancestor also in the list, so a newly
    introduced branch is represented by its top node only. Example:

        ['$.a', '$.a.b', '$.a.b[0]', '$.a.c', '$.x.y', '$.x.y.z']

    reduces to

        ['$.a', '$.x.y']
    """
    paths = set(node.path for node in nodes)
    return [node for node in nodes
            if not any(p in paths for p in ancestor_paths(node.path))]
