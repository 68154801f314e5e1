from __future__ import annotations

"""
Directory Tree Scanner.

Builds a Directory hierarchy from an existing folder on disk. Used to
report what a scaffold actually produced and to compare the result with
the pasted tree.
"""

import logging
import os

from skeldir.domain.tree_models import Directory, EmptyFile, LiteralFile

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def scan_directory(input_path: str, *, read_content: bool = False) -> Directory:
    """
    Walk `input_path` and mirror it as a hierarchy.

    Folders and files are visited in alphabetical order. Files become
    EmptyFile markers unless `read_content` is set, in which case their
    text is loaded into LiteralFile nodes.

    Args:
        input_path: Folder to scan.
        read_content: Load file contents (UTF-8, undecodable bytes replaced).

    Returns:
        Directory: Hierarchy rooted at `input_path`.
    """
    input_path = os.path.abspath(input_path)
    tree_structure = Directory()

    # In-place sort of dirs keeps the walk deterministic
    for root, dirs, files in os.walk(input_path):
        dirs.sort()
        files.sort()

        rel_root = os.path.relpath(root, input_path)
        current = tree_structure
        if rel_root != ".":
            for part in rel_root.split(os.sep):
                current = _ensure_dir(current, part)

        for dir_name in dirs:
            _ensure_dir(current, dir_name)

        for file_name in files:
            if read_content:
                with open(os.path.join(root, file_name), "r", encoding="utf-8",
                          errors="replace", newline="") as f:
                    current.add(file_name, LiteralFile(f.read()))
            else:
                current.add(file_name, EmptyFile())

    logger.debug(f"Scanned {input_path}: {sum(1 for _ in tree_structure.walk())} entries")
    return tree_structure

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _ensure_dir(parent: Directory, name: str) -> Directory:
    """Return the child folder `name`, creating it when missing."""
    child = parent.children.get(name)
    if not isinstance(child, Directory):
        child = Directory()
        parent.add(name, child)
    return child
