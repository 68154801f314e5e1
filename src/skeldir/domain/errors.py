from __future__ import annotations

"""
Scaffolding Error Taxonomy.

Exceptions raised by the materializer and the scaffold engine. The tree
parser never raises; degenerate input is reported through ParseAnomaly
records instead.
"""

from typing import Optional


class ScaffoldError(Exception):
    """Base class for every failure surfaced to the interface layers."""

    path: Optional[str] = None


class PathViolation(ScaffoldError):
    """A node name would escape the directory it belongs to."""

    def __init__(self, name: str, parent: str):
        self.name = name
        self.parent = parent
        self.path = parent
        super().__init__(f"Refusing unsafe entry name {name!r} under {parent}")


class IOFailure(ScaffoldError):
    """
    A filesystem operation failed while materializing a hierarchy.

    Attributes:
        path: The path whose creation failed.
        cause: The underlying OS-level exception.
    """

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"Error creating {path}: {reason}")


class InvalidProjectName(ScaffoldError):
    """Project names are restricted to letters, digits, dashes and underscores."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Invalid project name {name!r}. Use only letters, numbers, dashes, or underscores."
        )


class TargetExists(ScaffoldError):
    """The target project folder is already present on disk."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Folder already exists: {path}")
