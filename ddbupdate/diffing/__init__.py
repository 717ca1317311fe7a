# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .generic import diff, partitioned_diff, patches
from .nodes import all_nodes, leaf_nodes, ancestor_nodes

__all__ = ["diff", "partitioned_diff", "patches",
           "all_nodes", "leaf_nodes", "ancestor_nodes"]
