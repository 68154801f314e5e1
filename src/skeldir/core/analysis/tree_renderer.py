from __future__ import annotations

"""
Tree Renderer.

Converts Directory hierarchies into the box-drawn text representation
printed by `tree`-like tools. Folders carry a trailing '/', so the output
can be fed back to the tree parser.
"""

from typing import List, Optional

from skeldir.domain.tree_models import Directory, LiteralFile

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(
        root: Directory,
        *,
        root_label: Optional[str] = None,
        sort: bool = False,
        mark_content: bool = False,
) -> List[str]:
    """
    Render a hierarchy as a list of text lines.

    Args:
        root: Hierarchy to render.
        root_label: Optional first line naming the root folder.
        sort: Order siblings alphabetically instead of by insertion.
        mark_content: Suffix literal files with their content size.

    Returns:
        List[str]: Visual lines of the tree.
    """
    lines: List[str] = []
    if root_label:
        lines.append(f"{root_label.rstrip('/')}/")
    render_tree_structure(root, lines, prefix="", sort=sort, mark_content=mark_content)
    return lines


def render_tree_structure(
        tree_structure: Directory,
        lines: List[str],
        prefix: str = "",
        sort: bool = False,
        mark_content: bool = False,
) -> None:
    """
    Recursively append the lines of `tree_structure` to `lines`.

    Uses the standard connectors (├──, └──) and a 4-character indent
    unit per nesting level.

    Args:
        tree_structure: Current Directory to process.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
        sort: Order siblings alphabetically.
        mark_content: Suffix literal files with their content size.
    """
    entries = list(tree_structure.children)
    if sort:
        entries.sort()
    total = len(entries)

    for i, entry in enumerate(entries):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        node = tree_structure.children[entry]

        if isinstance(node, Directory):
            lines.append(f"{prefix}{connector}{entry}/")
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_tree_structure(
                node, lines, prefix=new_prefix, sort=sort, mark_content=mark_content
            )
            continue

        if mark_content and isinstance(node, LiteralFile):
            lines.append(f"{prefix}{connector}{entry}  ({len(node.content)} chars)")
            continue

        lines.append(f"{prefix}{connector}{entry}")
