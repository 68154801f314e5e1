from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared tree samples and hierarchies used across unit tests.
3. Isolation of the persisted config file from the real user folder.
"""

import logging
import os
import sys
from typing import Any, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def spaced_tree_lines() -> List[str]:
    """Plain 4-space indented tree with nested folders."""
    return [
        "src/",
        "    index.js",
        "    utils/",
        "        helper.js",
    ]


@pytest.fixture
def boxed_tree_lines() -> List[str]:
    """Same shape as a `tree` command prints it, with connectors."""
    return [
        "my-app/",
        "├── src/",
        "│   ├── main.py",
        "│   └── core/",
        "│       └── engine.py",
        "├── tests/",
        "│   └── test_engine.py",
        "└── README.md",
    ]


@pytest.fixture
def sample_mapping() -> Dict[str, Any]:
    """Plain interchange shape covering all node variants."""
    return {
        "src": {
            "app.py": "print('hi')\n",
            "lib": {"util.py": None},
        },
        "README.md": None,
    }


@pytest.fixture
def isolated_config(tmp_path, monkeypatch) -> str:
    """Point the persisted config file at a temporary location."""
    path = str(tmp_path / "config.json")
    monkeypatch.setattr("skeldir.domain.config.CONFIG_FILE", path)
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach the handlers and queue listener installed by configure_logging."""
    yield
    from skeldir.infra.logging.core import (
        _CONFIGURED_FLAG_ATTR,
        _remove_our_handlers,
        _stop_existing_listener,
    )
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)
