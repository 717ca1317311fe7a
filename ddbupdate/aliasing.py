# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Placeholder aliases for attribute names and values.

The expression syntax of the store rejects many literal characters and a
long list of reserved words in attribute names, and caps every identifier
at 255 characters. All names and values are therefore routed through
placeholders:

    $.pictures["left-view"]  ->  #pictures.#leftView = :picturesLeftView

with ``{'#pictures': 'pictures', '#leftView': 'left-view'}`` registered as
names and ``{':picturesLeftView': <value>}`` as values.
"""

import re

import ddbupdate.log

from .diff_format import make_node
from .log import IdentifierTooLongError, MAX_NAME_LENGTH
from .paths import INDEX, format_index, parse_path

__all__ = ["AliasContext", "alias", "camel_case", "check_limit", "truncate"]


NAME_SIGIL = "#"
VALUE_SIGIL = ":"

_chunks = re.compile(r"[^\W_]+")


class AliasContext(object):
    """Alias state shared by all aliases of one compilation.

    prefix:  prepended (camel cased) to every alias, None for the default
    counter: next numeric suffix handed out by truncation and
             disambiguation, so aliases never collide

    A context may be passed to several compilations to compose their
    results, but it must not be shared between threads.
    """

    def __init__(self, prefix=None, counter=1):
        self.prefix = prefix
        self.counter = counter
        # (prefix, name) -> name alias
        self.aliases = {}

    def next_suffix(self):
        suffix = str(self.counter)
        self.counter += 1
        return suffix

    def __repr__(self):
        return "AliasContext(prefix=%r, counter=%r)" % (self.prefix, self.counter)


def split_words(text):
    """Split text into words on case changes, digit runs and punctuation.

    'relatedItems[3]' -> ['related', 'Items', '3']
    'HTMLParser'      -> ['HTML', 'Parser']
    """
    words = []
    for chunk in _chunks.findall(text):
        start = 0
        for i in range(1, len(chunk)):
            prev, cur = chunk[i-1], chunk[i]
            nxt = chunk[i+1:i+2]
            if (prev.isdigit() != cur.isdigit() or
                    (not prev.isupper() and not prev.isdigit() and cur.isupper()) or
                    (prev.isupper() and cur.isupper() and nxt.islower())):
                words.append(chunk[start:i])
                start = i
        words.append(chunk[start:])
    return words


def camel_case(*parts):
    "Camel case the words of all parts joined, e.g. ('expected', 'my-name') -> 'expectedMyName'."
    words = []
    for part in parts:
        if part is None:
            continue
        words.extend(split_words(str(part)))
    return "".join(
        w.lower() if i == 0 else w[:1].upper() + w[1:].lower()
        for i, w in enumerate(words))


def check_limit(name, limit=MAX_NAME_LENGTH):
    if len(name) > limit:
        raise IdentifierTooLongError(name, limit)


def truncate(name, max_length=MAX_NAME_LENGTH - 1, context=None):
    """Cut name down to max_length characters.

    The tail of a truncated name is replaced by the next counter suffix
    of context, so two truncated names never end up equal.
    """
    if len(name) <= max_length:
        return name
    if context is None:
        context = AliasContext()
    suffix = context.next_suffix()
    truncated = name[:max_length - len(suffix)] + suffix
    ddbupdate.log.debug("Truncated alias %r... to %r", name[:32], truncated)
    return truncated


def _disambiguate(base, is_free, context):
    "Append counter suffixes to base until is_free accepts it."
    candidate = base
    while not is_free(candidate):
        suffix = context.next_suffix()
        candidate = base[:MAX_NAME_LENGTH - len(suffix)] + suffix
    return candidate


def name_alias(name, names, context, prefix=""):
    """Register a placeholder for the attribute name in names and return it.

    One name gets one alias per prefix and context; a different name that
    camel cases to an alias already taken gets a counter suffix.
    """
    check_limit(name)
    key = (prefix, name)
    alias = context.aliases.get(key)
    if alias is None or names.get(alias, name) != name:
        base = NAME_SIGIL + truncate(camel_case(prefix, name) or "attr", context=context)
        alias = _disambiguate(base, lambda a: names.get(a, name) == name, context)
        context.aliases[key] = alias
    names[alias] = name
    return alias


def value_alias(keys, value, values, context, prefix=""):
    "Register a placeholder for value, named after the path keys, and return it."
    base = VALUE_SIGIL + truncate(camel_case(prefix, *keys) or "value", context=context)
    alias = _disambiguate(base, lambda a: a not in values, context)
    values[alias] = value
    return alias


def alias(node, names, values=None, context=None, prefix=None):
    """Alias the path, and optionally the value, of node.

    Every member name along the path is registered in names. If values
    is given, the node value is registered there too, and the returned
    node holds the value alias instead of the value. Subscripts are kept
    verbatim:

        $.relatedItems[3] = 1000  ->  #relatedItems[3] = :relatedItems3

    The prefix defaults to the one of context.
    """
    if context is None:
        context = AliasContext()
    if prefix is None:
        prefix = context.prefix or ""

    segments = parse_path(node.path)
    parts = []
    for segment in segments:
        if segment.kind == INDEX:
            if parts:
                parts[-1] += format_index(segment.key)
            else:
                parts.append(format_index(segment.key))
        else:
            parts.append(name_alias(segment.key, names, context, prefix))

    value = node.value
    if values is not None:
        value = value_alias([s.key for s in segments], value, values, context, prefix)
    return make_node(".".join(parts), value)
