from __future__ import annotations

"""
Domain Constants.

Centralized application identity, versioning and scaffold mode catalogue.
"""

from typing import List

APP_NAME = "skeldir"
APP_VERSION = "1.1.0"
CURRENT_CONFIG_VERSION = "1.0.0"

PROJECT_NAME_PATTERN = r"^[a-zA-Z0-9_-]+$"

# Pasted trees longer than this ask for confirmation before creation
DEFAULT_CONFIRM_THRESHOLD = 20

MODE_CUSTOM = "custom"
MODE_EMPTY = "empty"
TEMPLATE_MODES: List[str] = ["flutter", "java", "python", "c", "cpp", "node", "react"]
ALL_MODES: List[str] = TEMPLATE_MODES + [MODE_CUSTOM, MODE_EMPTY]
