# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from .diff_format import DiffOp, validate_diff
from .paths import remove_path, set_path

__all__ = ["patch"]


def patch(obj, diff):
    """Produce a patched copy of obj from an ADD/SET/DELETE diff.

    ADD and SET nodes are written with a path-aware setter, which creates
    missing intermediate containers. DELETE nodes remove map members, and
    null list elements so the remaining indices keep their meaning.

    obj itself is left untouched.
    """
    validate_diff(diff)
    if not isinstance(obj, (dict, list)):
        raise ValueError("Invalid object type to patch: {}".format(type(obj).__name__))

    newobj = copy.deepcopy(obj)
    for node in diff[DiffOp.DELETE]:
        remove_path(newobj, node.path)
    for op in (DiffOp.ADD, DiffOp.SET):
        for node in diff[op]:
            set_path(newobj, node.path, copy.deepcopy(node.value))
    return newobj
