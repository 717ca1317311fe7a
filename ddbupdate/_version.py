# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import re
from collections import namedtuple

VersionInfo = namedtuple("VersionInfo", ["major", "minor", "micro", "releaselevel"])

__version__ = "0.3.0"

_release_levels = {"a": "alpha", "b": "beta", "rc": "candidate", "": "final"}

_match = re.match(
    r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<micro>\d+)(?P<releaselevel>a|b|rc)?",
    __version__)

version_info = VersionInfo(
    int(_match.group("major")),
    int(_match.group("minor")),
    int(_match.group("micro")),
    _release_levels[_match.group("releaselevel") or ""],
)
