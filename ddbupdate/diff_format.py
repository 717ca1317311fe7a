# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .paths import Missing, parse_path

__all__ = ["Missing", "Node", "make_node", "DiffOp", "ClauseOp",
           "validate_diff", "is_valid_diff"]


class Node(dict):
    """A (path, value) pair locating one value in a document.

    Minimal class providing attribute access to the node keys,
    while staying a plain dict for json conversions.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


def make_node(path, value):
    "Create a node holding value at path."
    return Node(path=path, value=value)


class DiffOp:
    "Buckets of a document diff."
    ADD = "ADD"
    DELETE = "DELETE"
    SET = "SET"


class ClauseOp:
    "Clauses of an update expression, in the order they are emitted."
    SET = "SET"
    REMOVE = "REMOVE"
    DELETE = "DELETE"

    ORDER = (SET, REMOVE, DELETE)


def validate_nodes(nodes):
    """Check that nodes is a list of well formed nodes with unique paths.

    Raises a ValueError if not well formed.
    """
    if not isinstance(nodes, list):
        raise ValueError("Node bucket must be a list, not {!r}.".format(type(nodes)))
    seen = set()
    for node in nodes:
        if not isinstance(node, Node):
            raise ValueError("Item '{}' is not a node.".format(node))
        if "path" not in node or "value" not in node:
            raise ValueError("Node '{}' needs both a path and a value.".format(node))
        # Raises on malformed paths
        parse_path(node.path)
        if node.path in seen:
            raise ValueError("Path '{}' appears twice in one bucket.".format(node.path))
        seen.add(node.path)


def validate_diff(diff, ops=(DiffOp.ADD, DiffOp.DELETE, DiffOp.SET)):
    """Check whether a diff (dict of node buckets) is well formed.

    Raises a ValueError if not well formed.
    """
    if not isinstance(diff, dict):
        raise ValueError("Diff must be a dict.")
    if set(diff) != set(ops):
        raise ValueError("Diff buckets {} do not match {}.".format(
            sorted(diff), sorted(ops)))
    for op in ops:
        validate_nodes(diff[op])


def is_valid_diff(diff, ops=(DiffOp.ADD, DiffOp.DELETE, DiffOp.SET)):
    """Checks whether a diff is well formed.

    Returns a boolean indicating the well-formedness of the diff.
    """
    try:
        validate_diff(diff, ops)
    except ValueError:
        return False
    return True
