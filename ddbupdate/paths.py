# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Canonical access paths into documents.

A path starts at the document root ``$`` and is followed by one segment per
step down the tree:

    .name           member with a plain identifier name
    ["odd name"]    member whose name needs quoting (JSON string literal)
    [3]             list index

e.g. ``$.pictures["left-view"]`` or ``$.relatedItems[3]``. Quoting keeps a
literal ``.`` inside a member name from being read as a separator.
"""

import json
import re
from collections import namedtuple


# Sentinel to allow None as a value
Missing = object()

ROOT = "$"

NAME = "name"
QUOTED = "quoted"
INDEX = "index"

Segment = namedtuple("Segment", ("kind", "key"))

_identifier = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

_segment = re.compile(r"""
    \.(?P<name>[A-Za-z_$][A-Za-z0-9_$]*)
  | \[(?P<index>\d+)\]
  | \[(?P<quoted>"(?:[^"\\]|\\.)*")\]
""", re.VERBOSE)


def format_member(name):
    "Format one member step, quoting names that are not plain identifiers."
    name = str(name)
    if _identifier.match(name):
        return "." + name
    return "[%s]" % json.dumps(name, ensure_ascii=False)


def format_index(index):
    "Format one list index step."
    return "[%d]" % index


def stringify(keys):
    """Join a sequence of keys into a path.

    Integer keys are list indices, anything else is a member name.
    """
    parts = [ROOT]
    for key in keys:
        if isinstance(key, int) and not isinstance(key, bool):
            parts.append(format_index(key))
        else:
            parts.append(format_member(key))
    return "".join(parts)


def parse_path(path):
    """Split a path into a list of tagged segments.

    Each segment is a ``Segment(kind, key)`` with kind one of
    NAME, QUOTED (str keys) or INDEX (int keys).
    """
    if not path.startswith(ROOT):
        raise ValueError("Path must start with %r: %r" % (ROOT, path))
    segments = []
    pos = len(ROOT)
    while pos < len(path):
        m = _segment.match(path, pos)
        if m is None:
            raise ValueError("Invalid path %r at position %d" % (path, pos))
        if m.group("name") is not None:
            segments.append(Segment(NAME, m.group("name")))
        elif m.group("index") is not None:
            segments.append(Segment(INDEX, int(m.group("index"))))
        else:
            segments.append(Segment(QUOTED, json.loads(m.group("quoted"))))
        pos = m.end()
    return segments


def as_path(path):
    """Accept a path given in canonical form, or as a bare dotted name.

    ``'version'`` and ``'parent.child'`` are read as ``'$.version'`` and
    ``'$.parent.child'``.
    """
    if path.startswith(ROOT):
        return path
    return stringify(path.split("."))


def path_keys(path):
    "Return the plain keys of a path, e.g. ['relatedItems', 3]."
    return [s.key for s in parse_path(path)]


def ancestor_paths(path):
    "Return the paths of all strict ancestors of path, root excluded."
    keys = path_keys(path)
    return [stringify(keys[:n]) for n in range(1, len(keys))]


def is_ancestor(parent, child):
    "Check whether parent is a strict ancestor of child."
    return parent in ancestor_paths(child)


def get_path(doc, path, default=Missing):
    "Return the value at path in doc, or default if any step is missing."
    obj = doc
    for key in path_keys(path):
        if isinstance(key, int):
            if not isinstance(obj, list) or key >= len(obj):
                return default
        elif not isinstance(obj, dict) or key not in obj:
            return default
        obj = obj[key]
    return obj


def _place(container, key, value):
    if isinstance(container, list):
        if key >= len(container):
            # Pad with nulls, never shift existing indices
            container.extend([None] * (key + 1 - len(container)))
    container[key] = value


def set_path(doc, path, value):
    """Set value at path in doc, creating missing intermediate containers.

    A missing container is created as a list when the next step is an
    index, and as a dict otherwise.
    """
    keys = path_keys(path)
    if not keys:
        raise ValueError("Cannot set the document root")
    obj = doc
    for key, next_key in zip(keys[:-1], keys[1:]):
        child = obj[key] if _has(obj, key) else None
        if not isinstance(child, (dict, list)):
            child = [] if isinstance(next_key, int) else {}
            _place(obj, key, child)
        obj = child
    _place(obj, keys[-1], value)
    return doc


def _has(obj, key):
    if isinstance(obj, list):
        return isinstance(key, int) and key < len(obj)
    return key in obj


def remove_path(doc, path):
    """Remove the value at path from doc.

    Members are deleted from dicts; list elements are set to None so
    the indices of their siblings stay put.
    """
    keys = path_keys(path)
    if not keys:
        raise ValueError("Cannot remove the document root")
    parent = get_path(doc, stringify(keys[:-1]))
    key = keys[-1]
    if parent is Missing or not _has(parent, key):
        return doc
    if isinstance(parent, list):
        parent[key] = None
    else:
        del parent[key]
    return doc
