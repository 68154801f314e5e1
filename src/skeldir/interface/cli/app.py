from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, persisted preferences and command-line overrides), collection
of the pasted tree, scaffold execution and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Callable, Dict, List, Optional, TextIO

from skeldir.core.analysis.tree_renderer import render_tree
from skeldir.core.analysis.tree_scanner import scan_directory
from skeldir.core.scaffold.engine import run_scaffold
from skeldir.core.scaffold.validator import validate_config
from skeldir.domain.config import get_default_config, load_config
from skeldir.domain.constants import MODE_CUSTOM, MODE_EMPTY
from skeldir.domain.scaffold_models import ScaffoldResult
from skeldir.infra.fs import read_text_lines
from skeldir.infra.logging import LoggingConfig, configure_logging, flush_logging, get_logger
from skeldir.interface.cli import args as cli_args

logger = get_logger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console only)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=None), force=True)
    logger.debug(f"Detected platform: {'Windows' if os.name == 'nt' else 'Unix-like'}")

    # 3. Configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config()
    overrides = cli_args.args_to_overrides(args)
    conf, warnings = validate_config(_merge_config(base_conf, overrides))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    mode = conf["mode"]

    # 4. Tree acquisition for the custom mode
    tree_lines: List[str] = []
    try:
        if args.tree_file:
            tree_lines = read_text_lines(args.tree_file)
            logger.debug(f"Read {len(tree_lines)} lines from {args.tree_file}")
        elif mode == MODE_CUSTOM:
            prompt_stream = sys.stderr if args.json_output else sys.stdout
            print("\nPaste your directory structure (end with an empty line):\n", file=prompt_stream)
            tree_lines = read_tree_lines(sys.stdin)

            if not args.yes and len(tree_lines) > conf["confirm_threshold"]:
                if not confirm_large_tree(len(tree_lines)):
                    print("Aborted by user.\n", file=prompt_stream)
                    return EXIT_OK
    except OSError as e:
        msg = f"Cannot read tree file '{args.tree_file}': {e}"
        logger.debug(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    # 5. Scaffold execution phase
    try:
        result = run_scaffold(
            args.project_name,
            mode=mode,
            tree_lines=tree_lines,
            parent_dir=conf["parent_dir"],
            index=conf["index"],
            dry_run=bool(args.dry_run),
            verbose=conf["verbose"],
            strategy=conf["depth_strategy"],
            strip_annotations=conf["strip_annotations"],
        )
    except KeyboardInterrupt:
        flush_logging()
        print("\nInterrupted. Partial output may be left in place.", file=sys.stderr)
        return EXIT_INTERRUPTED
    flush_logging()

    if result.ok and mode == MODE_EMPTY and not result.dry_run and not args.json_output:
        logger.warning("No framework/language option selected. Created empty folder.")
        flush_logging()

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, print_tree=conf["print_tree"])

    if result.ok:
        return EXIT_OK
    return EXIT_INVALID_INPUT if result.input_error else EXIT_FAILURE

# -----------------------------------------------------------------------------
# INTERACTIVE INPUT
# -----------------------------------------------------------------------------

def read_tree_lines(stream: TextIO) -> List[str]:
    """
    Collect pasted tree lines until the first blank line or end of input.

    Args:
        stream: Line-oriented text stream (usually stdin).

    Returns:
        List[str]: Lines without terminators; the blank terminator excluded.
    """
    lines: List[str] = []
    for raw in stream:
        line = raw.rstrip("\r\n")
        if not line.strip():
            break
        lines.append(line)
    return lines


def confirm_large_tree(
        line_count: int,
        ask: Optional[Callable[[str], str]] = None,
) -> bool:
    """
    Ask the user to confirm creating a large pasted structure.

    Args:
        line_count: Number of pasted lines.
        ask: Prompt function returning the user's answer (defaults to input).

    Returns:
        bool: True only for 'yes' or 'y' (case-insensitive).
    """
    question = (
        f"You pasted a large structure with {line_count} lines. "
        "Are you sure you want to create it? (yes/no): "
    )
    try:
        answer = (ask or input)(question)
    except EOFError:
        return False
    return answer.strip().lower() in ("yes", "y")

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge command-line overrides into the persisted preferences.

    The target folder and the scaffold mode always come from the command
    line; persisted values for them belong to the GUI session.
    """
    out = dict(base)
    out["mode"] = overrides.get("mode") or MODE_EMPTY
    out["parent_dir"] = overrides.get("parent_dir") or os.getcwd()

    keys_to_merge = ["depth_strategy", "strip_annotations", "index", "verbose", "print_tree"]
    for k in keys_to_merge:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: ScaffoldResult, print_tree: bool = False) -> None:
    """
    Print the scaffold outcome to the terminal.

    Args:
        result: The scaffold result to render.
        print_tree: Also print the structure that was created.
    """
    if not result.ok:
        print(f"\nERROR: {result.error}\n", file=sys.stderr)
        if not result.input_error and os.path.isdir(result.target_dir):
            print(f"Partial output left in place at {result.target_dir}", file=sys.stderr)
        return

    if result.dry_run:
        print("\nDRY RUN - nothing was written.")
        print(f"Target path: {result.target_dir}")
        print("\n".join(result.tree_lines))
        print(f"\n{len(result.planned_paths)} entries would be created.")
        return

    if print_tree:
        on_disk = scan_directory(result.target_dir)
        print()
        print("\n".join(render_tree(on_disk, root_label=result.project_name, sort=True)))

    print(
        f"\nProject '{result.project_name}' created at {result.target_dir} "
        f"({len(result.created_dirs)} folders, {len(result.created_files)} files)\n"
    )


if __name__ == "__main__":
    sys.exit(main())
