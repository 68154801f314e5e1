from __future__ import annotations

"""
Scaffold Orchestration Engine.

Coordinates a complete scaffold run:
1. Validates the project name and resolves the target folder.
2. Refuses to touch a target that already exists.
3. Builds the hierarchy from a fixed template or from pasted tree text.
4. Optionally prefixes entries with their sibling order.
5. Creates the target folder and materializes the hierarchy into it.

Failures are reported through ScaffoldResult; a partially written target
is left on disk for the user to inspect.
"""

import logging
import os
import re
from typing import List, Optional, Sequence, Tuple, Union

from skeldir.core.analysis.tree_parser import DepthStrategy, parse_tree_with_report
from skeldir.core.analysis.tree_renderer import render_tree
from skeldir.core.scaffold.indexer import index_structure
from skeldir.core.scaffold.materializer import DEFAULT_PLACEHOLDER, materialize, plan_paths
from skeldir.core.scaffold.templates import build_template
from skeldir.domain.constants import (
    ALL_MODES,
    MODE_CUSTOM,
    MODE_EMPTY,
    PROJECT_NAME_PATTERN,
)
from skeldir.domain.errors import InvalidProjectName, ScaffoldError, TargetExists
from skeldir.domain.scaffold_models import (
    ScaffoldResult,
    create_error_result,
    create_success_result,
)
from skeldir.domain.tree_models import Directory
from skeldir.infra.fs import normalize_path, safe_mkdir

logger = logging.getLogger(__name__)

_NAME_RX = re.compile(PROJECT_NAME_PATTERN)


def is_valid_project_name(name: str) -> bool:
    """Check a project name against the letters/digits/dash/underscore rule."""
    return bool(_NAME_RX.fullmatch(name or ""))


def build_hierarchy(
        mode: str,
        project_name: str,
        tree_lines: Optional[Sequence[str]] = None,
        *,
        strategy: Union[str, DepthStrategy] = DepthStrategy.GLYPH_COUNT,
        strip_annotations: bool = False,
) -> Tuple[Directory, List[str]]:
    """
    Produce the hierarchy for a scaffold mode.

    Args:
        mode: Template identifier, 'custom' or 'empty'.
        project_name: Name interpolated into template files.
        tree_lines: Pasted tree text for the custom mode.
        strategy: Depth heuristic for the custom mode.
        strip_annotations: Drop trailing remarks in the custom mode.

    Returns:
        Tuple[Directory, List[str]]: Hierarchy and parse anomaly messages.

    Raises:
        ValueError: If the mode is unknown.
    """
    if mode not in ALL_MODES:
        raise ValueError(f"Unknown scaffold mode '{mode}'. Available: {', '.join(ALL_MODES)}")

    if mode == MODE_EMPTY:
        return Directory(), []

    if mode == MODE_CUSTOM:
        report = parse_tree_with_report(
            tree_lines or [],
            strategy=DepthStrategy(strategy),
            strip_annotations=strip_annotations,
        )
        for anomaly in report.anomalies:
            logger.warning(anomaly.message)
        return report.root, [a.message for a in report.anomalies]

    return build_template(mode, project_name), []


def run_scaffold(
        project_name: str,
        *,
        mode: str = MODE_CUSTOM,
        tree_lines: Optional[Sequence[str]] = None,
        parent_dir: Optional[str] = None,
        index: bool = False,
        dry_run: bool = False,
        verbose: bool = False,
        strategy: Union[str, DepthStrategy] = DepthStrategy.GLYPH_COUNT,
        strip_annotations: bool = False,
        placeholder: str = DEFAULT_PLACEHOLDER,
) -> ScaffoldResult:
    """
    Execute a full scaffold run.

    Args:
        project_name: Folder to create under `parent_dir`.
        mode: Template identifier, 'custom' or 'empty'.
        tree_lines: Pasted tree text for the custom mode.
        parent_dir: Folder receiving the project (defaults to the CWD).
        index: Prefix entries with their sibling order.
        dry_run: Resolve and render the hierarchy without writing.
        verbose: Report each creation at INFO level.
        strategy: Depth heuristic for the custom mode.
        strip_annotations: Drop trailing remarks in the custom mode.
        placeholder: Template for the content of empty files.

    Returns:
        ScaffoldResult: Status, created paths and preview lines.
    """
    parent = normalize_path(parent_dir, os.getcwd())
    target_dir = os.path.join(parent, project_name)
    anomalies: List[str] = []

    logger.debug(f"Scaffold requested: name={project_name!r} mode={mode} parent={parent}")

    try:
        if not is_valid_project_name(project_name):
            raise InvalidProjectName(project_name)
        if os.path.lexists(target_dir):
            raise TargetExists(target_dir)

        root, anomalies = build_hierarchy(
            mode, project_name, tree_lines,
            strategy=strategy, strip_annotations=strip_annotations,
        )
        if index:
            root = index_structure(root)

        planned = plan_paths(root)
        preview = render_tree(root, root_label=project_name)

        if dry_run:
            logger.info(f"Dry run: {len(planned)} entries would be created in {target_dir}")
            return create_success_result(
                project_name, target_dir, mode,
                dry_run=True, planned_paths=planned, tree_lines=preview, anomalies=anomalies,
            )

        created, err = safe_mkdir(target_dir)
        if not created:
            msg = f"Failed to create directory {target_dir}: {err}"
            logger.debug(msg)
            return create_error_result(msg, project_name, target_dir, mode, failed_path=target_dir)
        logger.log(
            logging.INFO if verbose else logging.DEBUG,
            f"Project directory created at: {target_dir}",
        )

        report = materialize(target_dir, root, verbose=verbose, placeholder=placeholder)

    except ValueError as e:
        logger.debug(f"Scaffold rejected: {e}")
        return create_error_result(str(e), project_name, target_dir, mode, input_error=True)
    except (InvalidProjectName, TargetExists) as e:
        logger.debug(f"Scaffold rejected: {e}")
        return create_error_result(
            str(e), project_name, target_dir, mode,
            failed_path=e.path or "", input_error=True,
        )
    except ScaffoldError as e:
        logger.debug(f"Scaffold aborted: {e}")
        return create_error_result(
            str(e), project_name, target_dir, mode,
            failed_path=e.path or "", anomalies=anomalies,
        )

    return create_success_result(
        project_name, target_dir, mode,
        created_dirs=report.created_dirs,
        created_files=report.created_files,
        planned_paths=planned,
        tree_lines=preview,
        anomalies=anomalies,
    )
