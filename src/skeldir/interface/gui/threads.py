from __future__ import annotations

"""
Background Worker Threads for GUI Operations.

Runs scaffold jobs away from the Tk event loop so the window stays
responsive while folders and files are written. Results travel back to
the controller through a callback.
"""

import logging
from typing import Any, Callable, Dict, List

from skeldir.core.scaffold.engine import run_scaffold

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# SCAFFOLD EXECUTION WORKERS
# -----------------------------------------------------------------------------

def run_scaffold_task(
        project_name: str,
        config: Dict[str, Any],
        tree_lines: List[str],
        dry_run: bool,
        on_complete: Callable[[Any], None],
) -> None:
    """
    Execute a scaffold run in a dedicated background thread.

    Args:
        project_name: Folder to create under the configured parent.
        config: Session configuration snapshot.
        tree_lines: Pasted tree text for the custom mode.
        dry_run: Resolve the hierarchy without writing.
        on_complete: Receives the ScaffoldResult, or the exception on crash.
    """
    try:
        result = run_scaffold(
            project_name,
            mode=config["mode"],
            tree_lines=tree_lines,
            parent_dir=config.get("parent_dir"),
            index=bool(config.get("index")),
            dry_run=dry_run,
            verbose=bool(config.get("verbose")),
            strategy=config.get("depth_strategy", "glyph_count"),
            strip_annotations=bool(config.get("strip_annotations")),
        )
        on_complete(result)

    except Exception as e:
        logger.critical(f"Scaffold Thread: Critical failure detected: {e}", exc_info=True)
        on_complete(e)
