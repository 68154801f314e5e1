from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.

Verifies default filling, lenient coercion with warnings, and the strict
mode that raises instead.
"""

import pytest

from skeldir.core.scaffold.validator import validate_config
from skeldir.domain.config import get_default_config


def test_valid_config_passes_without_warnings() -> None:
    """TC-01: A default configuration is already normalized."""
    conf, warnings = validate_config(get_default_config())
    assert warnings == []
    assert conf["mode"] == "empty"
    assert conf["confirm_threshold"] == 20


def test_missing_keys_are_filled() -> None:
    """TC-02: Partial dictionaries get the default values."""
    conf, warnings = validate_config({"mode": "react"})
    assert conf["mode"] == "react"
    assert conf["depth_strategy"] == "glyph_count"
    assert conf["index"] is False
    assert warnings == []


def test_non_dict_falls_back_to_defaults() -> None:
    """TC-03: Garbage input yields defaults and a warning."""
    conf, warnings = validate_config(["not", "a", "dict"])
    assert conf == get_default_config()
    assert len(warnings) == 1


def test_lenient_coercion() -> None:
    """TC-04: Strings and numbers are coerced with a warning each."""
    conf, warnings = validate_config({
        "index": "yes",
        "verbose": 0,
        "confirm_threshold": "50",
        "mode": " Python ",
        "depth_strategy": "BRANCH_MARKER",
    })
    assert conf["index"] is True
    assert conf["verbose"] is False
    assert conf["confirm_threshold"] == 50
    assert conf["mode"] == "python"
    assert conf["depth_strategy"] == "branch_marker"
    assert len(warnings) == 3


def test_invalid_values_fall_back() -> None:
    """TC-05: Unknown choices and bad types revert to defaults."""
    conf, warnings = validate_config({
        "mode": "cobol",
        "depth_strategy": "guess",
        "confirm_threshold": -3,
        "print_tree": "maybe",
        "parent_dir": 42,
    })
    defaults = get_default_config()
    assert conf["mode"] == defaults["mode"]
    assert conf["depth_strategy"] == defaults["depth_strategy"]
    assert conf["confirm_threshold"] == defaults["confirm_threshold"]
    assert conf["print_tree"] is False
    assert conf["parent_dir"] == defaults["parent_dir"]
    assert len(warnings) == 5


def test_strict_mode_raises() -> None:
    """TC-06: Strict validation refuses instead of coercing."""
    with pytest.raises(ValueError):
        validate_config({"mode": "cobol"}, strict=True)
    with pytest.raises(TypeError):
        validate_config({"index": "yes"}, strict=True)
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)
