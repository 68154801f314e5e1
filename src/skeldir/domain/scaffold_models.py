from __future__ import annotations

"""
Scaffold Domain Data Models.

Defines the result object and factory functions used to report a scaffold
run from the engine to the interface layers (CLI/GUI).
"""

from dataclasses import dataclass, field
from typing import List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScaffoldResult:
    """
    Outcome of a scaffold run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        project_name: Requested project folder name.
        target_dir: Absolute path of the project folder.
        mode: Template identifier, 'custom' or 'empty'.
        dry_run: True when nothing was written to disk.
        failed_path: Path whose creation failed, if any.
        input_error: True when the request itself was rejected before any write.
        created_dirs: Folders created below the target, in order.
        created_files: Files created below the target, in order.
        planned_paths: Relative paths of the hierarchy, in walk order.
        tree_lines: Rendered preview of the hierarchy.
        anomalies: Tolerated parse irregularities, as messages.
    """
    ok: bool
    error: str

    project_name: str
    target_dir: str
    mode: str
    dry_run: bool = False

    failed_path: str = ""
    input_error: bool = False
    created_dirs: List[str] = field(default_factory=list)
    created_files: List[str] = field(default_factory=list)
    planned_paths: List[str] = field(default_factory=list)
    tree_lines: List[str] = field(default_factory=list)
    anomalies: List[str] = field(default_factory=list)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        project_name: str,
        target_dir: str,
        mode: str,
        *,
        failed_path: str = "",
        input_error: bool = False,
        anomalies: Optional[List[str]] = None,
) -> ScaffoldResult:
    """
    Create a failed scaffold result.

    Args:
        error: Detailed error description.
        project_name: Requested project folder name.
        target_dir: Resolved project folder.
        mode: Requested scaffold mode.
        failed_path: Path that could not be created.
        input_error: The request was rejected before touching the disk.
        anomalies: Parse anomalies collected before the failure.

    Returns:
        ScaffoldResult: An immutable error result object.
    """
    return ScaffoldResult(
        ok=False,
        error=error,
        project_name=project_name,
        target_dir=target_dir,
        mode=mode,
        failed_path=failed_path,
        input_error=input_error,
        anomalies=anomalies or [],
    )


def create_success_result(
        project_name: str,
        target_dir: str,
        mode: str,
        *,
        dry_run: bool = False,
        created_dirs: Optional[List[str]] = None,
        created_files: Optional[List[str]] = None,
        planned_paths: Optional[List[str]] = None,
        tree_lines: Optional[List[str]] = None,
        anomalies: Optional[List[str]] = None,
) -> ScaffoldResult:
    """
    Create a successful scaffold result.

    Returns:
        ScaffoldResult: An immutable success result object.
    """
    return ScaffoldResult(
        ok=True,
        error="",
        project_name=project_name,
        target_dir=target_dir,
        mode=mode,
        dry_run=dry_run,
        created_dirs=created_dirs or [],
        created_files=created_files or [],
        planned_paths=planned_paths or [],
        tree_lines=tree_lines or [],
        anomalies=anomalies or [],
    )
