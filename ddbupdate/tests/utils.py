# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from ddbupdate import patch, diff
from ddbupdate.diff_format import is_valid_diff
from ddbupdate.paths import remove_path, set_path


#: Additions to the product document, keyed by path
ADDITIONS = {
    '$.root0': 'root0',
    '$.newParent.newChild1.newGrandChild1': 'c1gc1',
    '$.newParent.newChild1.newGrandChild2': 'c1gc',
    '$.newParent.newChild2.newGrandChild1': 'c2gc1',
    '$.newParent.newChild2.newGrandChild2': 'c2gc2',
    '$.newParent.newChild3': {},
    '$.pictures.otherSideView': 'pictures.otherSideView',
    '$.color[2]': 'Blue',
    '$.relatedItems[3]': 1000,
    '$.productReview.oneStar[1]': 'Never again!',
    '$["prefix-suffix"]': 'Value for attribute name with -',
    '$["name with space"]': 'name with spaces is also okay',
    '$["1atBeginning"]': 'name starting with number is also okay',
}

UPDATES = {
    '$.title': 'root0',
    '$.pictures.rearView': 'root1.level1',
    '$.color[0]': 'Blue',
    '$.relatedItems[1]': 1000,
    '$.productReview.oneStar[0]': 'Never again!',
    '$["Safety.Warning"]': 'Value for attribute with DOT',
}

DELETES = [
    '$.title',
    '$.pictures.rearView',
    '$.color[0]',
    '$.relatedItems[1]',
    '$.productReview.fiveStar[0]',
    '$.productReview.fiveStar[1]',
    '$.productReview.oneStar[0]',
]


def apply_updates(doc, updates):
    "Return a copy of doc with the values of updates set at their paths."
    modified = copy.deepcopy(doc)
    for path, value in updates.items():
        set_path(modified, path, copy.deepcopy(value))
    return modified


def apply_deletes(doc, deletes):
    "Return a copy of doc without the values at deletes, list elements nulled."
    modified = copy.deepcopy(doc)
    for path in deletes:
        remove_path(modified, path)
    return modified


def by_path(nodes):
    return {n.path: n.value for n in nodes}


def paths_of(nodes):
    return [n.path for n in nodes]


def check_diff_and_patch(a, b, orphans=False):
    "Check that patch(a, diff(a,b)) reproduces b."
    d = diff(a, b, orphans=orphans)
    assert is_valid_diff(d)
    assert patch(a, d) == b


def check_symmetric_diff_and_patch(a, b):
    "Check that patch(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)
