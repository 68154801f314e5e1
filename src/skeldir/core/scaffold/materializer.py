from __future__ import annotations

"""
Hierarchy Materializer.

Writes a Directory hierarchy onto disk below an existing, empty base
directory. The walk is depth-first and pre-order, follows each folder's
insertion order, and creates every folder immediately before its children.
The first failure aborts the walk; entries created so far stay in place.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Tuple

from skeldir.domain.errors import IOFailure, PathViolation
from skeldir.domain.tree_models import Directory, EmptyFile, LiteralFile, Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONSTANTS
# -----------------------------------------------------------------------------

DEFAULT_PLACEHOLDER = "// {name} created by skeldir\n"

_FORBIDDEN_NAMES = {"", ".", ".."}

# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass
class MaterializeReport:
    """
    Entries created by a successful materialization, in creation order.

    Attributes:
        base_path: Directory the hierarchy was written into.
        created_dirs: Absolute paths of the folders created.
        created_files: Absolute paths of the files created.
    """
    base_path: str
    created_dirs: List[str] = field(default_factory=list)
    created_files: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.created_dirs) + len(self.created_files)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def materialize(
        base_path: str,
        root: Directory,
        *,
        verbose: bool = False,
        placeholder: str = DEFAULT_PLACEHOLDER,
) -> MaterializeReport:
    """
    Create the folders and files described by `root` under `base_path`.

    `base_path` must already exist; it is neither created nor checked here.

    Args:
        base_path: Existing directory standing for the hierarchy root.
        root: Hierarchy to write.
        verbose: Report each creation at INFO level instead of DEBUG.
        placeholder: Template for empty files; '{name}' is replaced by the
                     file name.

    Returns:
        MaterializeReport: Everything that was created.

    Raises:
        PathViolation: If an entry name would leave its parent folder.
        IOFailure: On the first filesystem error. No rollback is attempted.
    """
    report = MaterializeReport(base_path=base_path)
    level = logging.INFO if verbose else logging.DEBUG

    # Pending (parent_path, name, node) entries; reversed pushes keep pre-order.
    pending: List[Tuple[str, str, Node]] = _children_of(base_path, root)

    while pending:
        parent_path, name, node = pending.pop()
        _check_name(name, parent_path)
        full_path = os.path.join(parent_path, name)

        try:
            if isinstance(node, Directory):
                os.mkdir(full_path)
                report.created_dirs.append(full_path)
                logger.log(level, f"Created folder: {full_path}")
                pending.extend(_children_of(full_path, node))
            elif isinstance(node, LiteralFile):
                _write_file(full_path, node.content)
                report.created_files.append(full_path)
                logger.log(level, f"Created file with content: {full_path}")
            elif isinstance(node, EmptyFile):
                _write_file(full_path, placeholder.replace("{name}", name))
                report.created_files.append(full_path)
                logger.log(level, f"Created file: {full_path}")
            else:
                raise TypeError(f"Unknown node type for '{name}': {type(node).__name__}")
        except (OSError, ValueError) as e:
            logger.debug(f"Creation failed for {full_path}", exc_info=True)
            raise IOFailure(full_path, e) from e

    logger.debug(
        f"Materialized {len(report.created_dirs)} folders and "
        f"{len(report.created_files)} files under {base_path}"
    )
    return report


def plan_paths(root: Directory) -> List[str]:
    """
    List the relative paths a materialization would create, in walk order.

    Folders carry a trailing '/'. Nothing is written to disk.
    """
    planned: List[str] = []
    for parts, node in root.walk():
        rel = "/".join(parts)
        planned.append(rel + "/" if isinstance(node, Directory) else rel)
    return planned

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _children_of(path: str, directory: Directory) -> List[Tuple[str, str, Node]]:
    """Build work-stack entries for a folder, last child first."""
    return [(path, name, child) for name, child in reversed(list(directory.children.items()))]


def _check_name(name: str, parent_path: str) -> None:
    """Reject names that are empty, relative references, absolute or multi-segment."""
    separators = {"/", "\\", os.sep}
    if os.altsep:
        separators.add(os.altsep)

    if (
            name.strip() in _FORBIDDEN_NAMES
            or "\x00" in name
            or any(sep in name for sep in separators)
            or os.path.isabs(name)
            or os.path.splitdrive(name)[0]
    ):
        raise PathViolation(name, parent_path)


def _write_file(path: str, content: str) -> None:
    """Create a new file exclusively and write `content` untouched."""
    with open(path, "x", encoding="utf-8", newline="") as f:
        f.write(content)
