from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into session configuration overrides.
"""

import argparse
from typing import Any, Dict

from skeldir.domain.constants import APP_NAME, APP_VERSION, MODE_CUSTOM, TEMPLATE_MODES

_TEMPLATE_HELP: Dict[str, str] = {
    "flutter": "Generate Flutter folder structure",
    "java": "Generate Java project",
    "python": "Generate Python project",
    "c": "Generate C project",
    "cpp": "Generate C++ project",
    "node": "Generate Node.js project",
    "react": "Generate React project",
}

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the skeldir CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        usage="%(prog)s <project-name> [options]",
        description="CLI to scaffold projects with custom file structures",
    )
    p.add_argument("project_name", metavar="project-name", help="Name of the project folder")

    # --- Structure Source ---
    source = p.add_mutually_exclusive_group()
    for kind in TEMPLATE_MODES:
        source.add_argument(
            f"--{kind}",
            dest="mode",
            action="store_const",
            const=kind,
            help=_TEMPLATE_HELP[kind],
        )
    source.add_argument(
        "--custom",
        dest="mode",
        action="store_const",
        const=MODE_CUSTOM,
        help="Create project structure from pasted directory tree",
    )
    source.add_argument(
        "--from-file",
        dest="tree_file",
        metavar="PATH",
        default=None,
        help="Read the directory tree from a text file (implies --custom)",
    )

    # --- Tree Interpretation ---
    p.add_argument(
        "--branch-depth",
        action="store_true",
        help="Derive depth from the position of the ├──/└── markers instead of counting indentation",
    )
    p.add_argument(
        "--strip-comments",
        action="store_true",
        help="Ignore trailing '# comment' and '(note)' text after entry names",
    )
    p.add_argument(
        "--index",
        action="store_true",
        help="Prefix folders/files with their order in the tree",
    )

    # --- Target and Safety ---
    p.add_argument(
        "--parent-dir",
        dest="parent_dir",
        metavar="DIR",
        default=None,
        help="Create the project inside DIR instead of the current directory",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the structure that would be created without writing anything",
    )
    p.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Do not ask for confirmation on large pasted trees",
    )

    # --- Reporting ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the created structure when done",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON",
    )
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument("--debug", action="store_true", help="Enable debug logs (more detailed)")

    # --- Configuration ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration and use built-in defaults",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit",
    )
    p.add_argument(
        "-v", "--version",
        action="version",
        version=f"{APP_NAME} CLI version {APP_VERSION}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration overrides subset.

    Only flags that were actually given produce an override, so saved
    preferences survive when a flag is omitted.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides.
    """
    overrides: Dict[str, Any] = {}

    overrides["parent_dir"] = args.parent_dir

    if args.tree_file:
        overrides["mode"] = MODE_CUSTOM
    elif args.mode:
        overrides["mode"] = args.mode

    if args.branch_depth:
        overrides["depth_strategy"] = "branch_marker"
    if args.strip_comments:
        overrides["strip_annotations"] = True
    if args.index:
        overrides["index"] = True
    if args.verbose:
        overrides["verbose"] = True
    if args.print_tree:
        overrides["print_tree"] = True

    return overrides
