from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path normalization, cross-platform data directory resolution,
single-level folder creation and tree file reading.
"""

import os
from pathlib import Path
from unittest.mock import patch

from skeldir.infra.fs import get_user_data_dir, normalize_path, read_text_lines, safe_mkdir

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_windows() -> None:
    """TC-01: Verify resolution of %LOCALAPPDATA% on Windows systems."""
    mock_appdata = "C:/Users/Test/AppData/Local"
    with patch("os.name", "nt"):
        with patch.dict(os.environ, {"LOCALAPPDATA": mock_appdata}):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert "skeldir" in path
                assert path.lower().startswith(os.path.abspath(mock_appdata).lower())


def test_get_user_data_dir_unix() -> None:
    """TC-02: Verify resolution of ~/.skeldir on Unix-like systems."""
    mock_home = "/home/testuser"
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value=mock_home):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert path.replace("\\", "/").endswith("/home/testuser/.skeldir")


def test_normalize_path_expansion() -> None:
    """TC-03: Environment variables and home shortcuts are expanded."""
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path("$TEST_VAR/sub", fallback=".")
        assert path.lower().endswith(os.path.join("my_folder", "sub").lower())


def test_normalize_path_fallback(tmp_path: Path) -> None:
    """TC-04: Blank input resolves to the absolute fallback."""
    assert normalize_path("  ", fallback=str(tmp_path)) == str(tmp_path)
    assert normalize_path(None, fallback=str(tmp_path)) == str(tmp_path)

# -----------------------------------------------------------------------------
# FILESYSTEM OPERATIONS TESTS
# -----------------------------------------------------------------------------

def test_safe_mkdir_creates_single_level(tmp_path: Path) -> None:
    """TC-05: One level is created; existing or missing parents fail."""
    ok, err = safe_mkdir(str(tmp_path / "new"))
    assert ok and err is None

    ok, err = safe_mkdir(str(tmp_path / "new"))
    assert not ok and err

    ok, err = safe_mkdir(str(tmp_path / "missing" / "child"))
    assert not ok
    assert not (tmp_path / "missing").exists()


def test_read_text_lines(tmp_path: Path) -> None:
    """TC-06: Lines come back without terminators and without a BOM."""
    f = tmp_path / "tree.txt"
    f.write_bytes("\ufeffsrc/\r\n    main.py\n\n".encode("utf-8"))
    assert read_text_lines(str(f)) == ["src/", "    main.py", ""]
