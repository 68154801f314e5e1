from __future__ import annotations

"""
Tree Text Parser.

Converts an indented, optionally box-drawn rendering of a directory tree
(as printed by `tree`-like tools or pasted from a chat assistant) into a
Directory hierarchy. The parser is a pure function over an in-memory line
sequence: it performs no I/O and never rejects input. Malformed indentation
degrades to best-effort attachment and is reported as ParseAnomaly records.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Tuple

from skeldir.domain.tree_models import Directory, EmptyFile, Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONSTANTS
# -----------------------------------------------------------------------------

# Space, vertical bar, tee, elbow, horizontal bar and the no-break space
# that chat clients commonly substitute for plain spaces.
INDENT_GLYPHS = " │├└─\u00a0"
INDENT_UNIT = 4
FOLDER_SUFFIXES: Tuple[str, ...] = ("/", "\\")

_BRANCH_MARKER_RX = re.compile(r"├── |└── ")
_COMMENT_RX = re.compile(r"\s+#.*$")
_NOTE_RX = re.compile(r"\s+\([^()]*\)\s*$")


class DepthStrategy(str, Enum):
    """Heuristics available for turning a line prefix into a nesting depth."""

    GLYPH_COUNT = "glyph_count"
    BRANCH_MARKER = "branch_marker"


# -----------------------------------------------------------------------------
# PARSE BOOKKEEPING
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ParseFrame:
    """A Directory left open on the parse stack at a given depth."""
    depth: int
    node: Directory


@dataclass(frozen=True)
class ParseAnomaly:
    """
    Degenerate input tolerated by the parser.

    Attributes:
        line_number: 1-based position of the offending line.
        kind: One of 'depth_jump', 'duplicate' or 'empty_name'.
        message: Human readable description.
    """
    line_number: int
    kind: str
    message: str


@dataclass(frozen=True)
class ParseReport:
    """Parsed hierarchy together with the anomalies met along the way."""
    root: Directory
    anomalies: List[ParseAnomaly] = field(default_factory=list)

    @property
    def degenerate(self) -> bool:
        return bool(self.anomalies)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_tree(
        lines: Iterable[str],
        *,
        strategy: DepthStrategy = DepthStrategy.GLYPH_COUNT,
        strip_annotations: bool = False,
) -> Directory:
    """
    Parse tree text lines into a rooted Directory hierarchy.

    Args:
        lines: Ordered raw text lines, already terminated by the caller.
        strategy: Depth heuristic to apply to each line.
        strip_annotations: Drop trailing '# comment' and '(note)' text.

    Returns:
        Directory: The synthetic, unnamed root.
    """
    return parse_tree_with_report(
        lines, strategy=strategy, strip_annotations=strip_annotations
    ).root


def parse_tree_with_report(
        lines: Iterable[str],
        *,
        strategy: DepthStrategy = DepthStrategy.GLYPH_COUNT,
        strip_annotations: bool = False,
) -> ParseReport:
    """
    Parse tree text lines and collect every tolerated irregularity.

    A new node attaches under the nearest open Directory whose depth is
    strictly smaller than its own. Later entries with an existing name
    replace the earlier entry.

    Args:
        lines: Ordered raw text lines.
        strategy: Depth heuristic to apply to each line.
        strip_annotations: Drop trailing '# comment' and '(note)' text.

    Returns:
        ParseReport: Root hierarchy and the list of anomalies.
    """
    root = Directory()
    stack: List[ParseFrame] = [ParseFrame(depth=-1, node=root)]
    anomalies: List[ParseAnomaly] = []

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        depth = compute_depth(line, strategy)
        text = clean_name(line)
        if strip_annotations:
            text = _strip_annotations(text)

        is_dir = text.endswith(FOLDER_SUFFIXES)
        name = text[:-1].rstrip() if is_dir else text
        if not name:
            anomalies.append(ParseAnomaly(
                line_number, "empty_name", f"Line {line_number} has no entry name: {line.strip()!r}"
            ))
            continue

        node: Node = Directory() if is_dir else EmptyFile()

        while depth <= stack[-1].depth:
            stack.pop()

        parent = stack[-1]
        if depth > parent.depth + 1:
            anomalies.append(ParseAnomaly(
                line_number, "depth_jump",
                f"Line {line_number} ('{name}') is at depth {depth} but its parent "
                f"is at depth {parent.depth}; attached to the nearest ancestor."
            ))

        replaced = parent.node.add(name, node)
        if replaced is not None:
            anomalies.append(ParseAnomaly(
                line_number, "duplicate",
                f"Line {line_number} redefines '{name}'; the earlier entry was replaced."
            ))

        if isinstance(node, Directory):
            stack.append(ParseFrame(depth=depth, node=node))

    logger.debug(f"Parsed {len(root)} top-level entries ({len(anomalies)} anomalies).")
    return ParseReport(root=root, anomalies=anomalies)


def compute_depth(line: str, strategy: DepthStrategy = DepthStrategy.GLYPH_COUNT) -> int:
    """
    Compute the nesting depth of a raw tree line.

    GLYPH_COUNT counts the leading indentation glyphs (a tab counts as one
    full unit) and divides by the 4-character indent unit. BRANCH_MARKER
    locates the first tee/elbow connector instead; lines without one sit
    at depth 0 and connector lines start at depth 1.

    Args:
        line: Raw text line.
        strategy: Heuristic to apply.

    Returns:
        int: Zero-based depth.
    """
    if strategy == DepthStrategy.BRANCH_MARKER:
        match = _BRANCH_MARKER_RX.search(line)
        if match is None:
            return 0
        return match.start() // INDENT_UNIT + 1

    width = 0
    for ch in line:
        if ch == "\t":
            width += INDENT_UNIT
        elif ch in INDENT_GLYPHS:
            width += 1
        else:
            break
    return width // INDENT_UNIT


def clean_name(line: str) -> str:
    """Remove leading connectors/indentation and surrounding whitespace."""
    return line.lstrip(INDENT_GLYPHS + "\t").strip()


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _strip_annotations(text: str) -> str:
    """Drop assistant-style trailing remarks such as '# entry point' or '(optional)'."""
    stripped = _COMMENT_RX.sub("", text)
    stripped = _NOTE_RX.sub("", stripped)
    return stripped.strip() or text
