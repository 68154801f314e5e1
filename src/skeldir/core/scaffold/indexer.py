from __future__ import annotations

"""
Sibling Order Indexing.

Prefixes every entry of a hierarchy with its 1-based position among its
siblings ("1. src", "2. README.md") so that the created folders list in
the same order as the pasted tree.
"""

from skeldir.domain.tree_models import Directory


def index_structure(root: Directory) -> Directory:
    """
    Return a renamed copy of `root`; the input hierarchy is left untouched.
    """
    indexed = Directory()
    for position, (name, child) in enumerate(root.children.items(), start=1):
        if isinstance(child, Directory):
            child = index_structure(child)
        indexed.add(f"{position}. {name}", child)
    return indexed
