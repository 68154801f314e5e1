from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the tagged node variants exchanged between the tree parser, the
fixed templates and the hierarchy materializer. A hierarchy is rooted in an
unnamed Directory that stands for the already-created target folder.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class EmptyFile:
    """
    Leaf entry created with an auto-generated placeholder comment.

    The placeholder text embeds the file's own name, which is only known
    to the parent Directory, so the marker itself carries no data.
    """


@dataclass(frozen=True)
class LiteralFile:
    """
    Leaf entry written verbatim.

    Attributes:
        content: Exact text to store in the file.
    """
    content: str


@dataclass(frozen=True)
class Directory:
    """
    Folder entry holding named children.

    Keys are unique; inserting an existing name replaces the previous
    child (and its whole subtree when it was a Directory).

    Attributes:
        children: Mapping of child name to child node, in insertion order.
    """
    children: Dict[str, "Node"] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)

    def __contains__(self, name: object) -> bool:
        return name in self.children

    def __getitem__(self, name: str) -> "Node":
        return self.children[name]

    def add(self, name: str, node: "Node") -> Optional["Node"]:
        """
        Attach a child, returning the node it replaced (if any).
        """
        previous = self.children.get(name)
        self.children[name] = node
        return previous

    def walk(self) -> Iterator[Tuple[Tuple[str, ...], "Node"]]:
        """
        Yield (relative_parts, node) pairs in depth-first pre-order.
        """
        pending = [((name,), child) for name, child in reversed(list(self.children.items()))]
        while pending:
            parts, node = pending.pop()
            yield parts, node
            if isinstance(node, Directory):
                pending.extend(
                    (parts + (name,), child)
                    for name, child in reversed(list(node.children.items()))
                )

    def to_mapping(self) -> Dict[str, Any]:
        """
        Convert the hierarchy into the plain interchange shape.

        Returns:
            Dict[str, Any]: Nested dicts for folders, None for empty files
                            and strings for literal content.
        """
        out: Dict[str, Any] = {}
        for name, child in self.children.items():
            if isinstance(child, Directory):
                out[name] = child.to_mapping()
            elif isinstance(child, LiteralFile):
                out[name] = child.content
            else:
                out[name] = None
        return out

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Directory":
        """
        Build a hierarchy from the plain interchange shape.

        Args:
            mapping: Nested mapping; values are mappings, None or str.

        Returns:
            Directory: The equivalent typed hierarchy.

        Raises:
            TypeError: If a value is not a mapping, None or a string.
        """
        root = cls()
        for name, value in mapping.items():
            if value is None:
                root.add(name, EmptyFile())
            elif isinstance(value, str):
                root.add(name, LiteralFile(value))
            elif isinstance(value, Mapping):
                root.add(name, cls.from_mapping(value))
            else:
                raise TypeError(
                    f"Unsupported node value for '{name}': {type(value).__name__}"
                )
        return root


Node = Union[Directory, EmptyFile, LiteralFile]

