from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Drives `main()` in-process with a fake stdin and checks exit codes,
console output and the folders left on disk.
"""

import io
import json
import os
from pathlib import Path
from typing import List
from unittest.mock import patch

import pytest

from skeldir.core.scaffold import materializer
from skeldir.interface.cli.app import (
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_INVALID_INPUT,
    EXIT_OK,
    confirm_large_tree,
    main,
    read_tree_lines,
)


@pytest.fixture(autouse=True)
def _no_saved_config(isolated_config):
    """Keep the user's persisted preferences out of every run."""
    yield


def _run(monkeypatch, argv: List[str], stdin_text: str = "") -> int:
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    return main(argv)

# -----------------------------------------------------------------------------
# INPUT HELPERS
# -----------------------------------------------------------------------------

def test_read_tree_lines_stops_at_blank_line() -> None:
    """TC-01: Reading ends at the first blank line; terminators are dropped."""
    stream = io.StringIO("a/\r\n    b.txt\n   \nafter.txt\n")
    assert read_tree_lines(stream) == ["a/", "    b.txt"]


def test_read_tree_lines_until_eof() -> None:
    """TC-02: Without a blank line, everything up to EOF is read."""
    assert read_tree_lines(io.StringIO("x.txt\ny.txt")) == ["x.txt", "y.txt"]


@pytest.mark.parametrize("answer, expected", [
    ("yes", True), ("Y", True), (" y ", True), ("no", False), ("", False), ("sure", False),
])
def test_confirm_large_tree(answer: str, expected: bool) -> None:
    """TC-03: Only yes/y (any case) confirm."""
    assert confirm_large_tree(30, ask=lambda _prompt: answer) is expected


def test_confirm_large_tree_eof_declines() -> None:
    """TC-04: A closed input stream counts as a refusal."""
    def closed(_prompt: str) -> str:
        raise EOFError
    assert confirm_large_tree(30, ask=closed) is False

# -----------------------------------------------------------------------------
# SCAFFOLD RUNS
# -----------------------------------------------------------------------------

def test_custom_tree_from_stdin(monkeypatch, tmp_path: Path, capsys) -> None:
    """TC-05: Pasted lines up to the blank line are created."""
    code = _run(
        monkeypatch,
        ["demo", "--custom", "--parent-dir", str(tmp_path)],
        "src/\n    index.js\n\nignored.txt\n",
    )

    assert code == EXIT_OK
    assert (tmp_path / "demo" / "src" / "index.js").is_file()
    assert not (tmp_path / "demo" / "ignored.txt").exists()
    out = capsys.readouterr().out
    assert "Paste your directory structure" in out
    assert "Project 'demo' created at" in out


def test_large_paste_declined(monkeypatch, tmp_path: Path, capsys) -> None:
    """TC-06: Declining the confirmation aborts cleanly without writing."""
    monkeypatch.setattr("builtins.input", lambda _prompt: "no")
    lines = "".join(f"file{i}.txt\n" for i in range(21))

    code = _run(monkeypatch, ["demo", "--custom", "--parent-dir", str(tmp_path)], lines)

    assert code == EXIT_OK
    assert "Aborted by user." in capsys.readouterr().out
    assert not (tmp_path / "demo").exists()


def test_large_paste_confirmed(monkeypatch, tmp_path: Path) -> None:
    """TC-07: Answering 'y' proceeds with creation."""
    monkeypatch.setattr("builtins.input", lambda _prompt: "y")
    lines = "".join(f"file{i}.txt\n" for i in range(25))

    code = _run(monkeypatch, ["demo", "--custom", "--parent-dir", str(tmp_path)], lines)

    assert code == EXIT_OK
    assert len(os.listdir(tmp_path / "demo")) == 25


def test_yes_flag_skips_confirmation(monkeypatch, tmp_path: Path) -> None:
    """TC-08: --yes never prompts, whatever the size."""
    def unexpected(_prompt: str) -> str:
        raise AssertionError("confirmation should not be asked")
    monkeypatch.setattr("builtins.input", unexpected)
    lines = "".join(f"file{i}.txt\n" for i in range(40))

    code = _run(monkeypatch, ["demo", "--custom", "-y", "--parent-dir", str(tmp_path)], lines)

    assert code == EXIT_OK
    assert len(os.listdir(tmp_path / "demo")) == 40


def test_small_paste_needs_no_confirmation(monkeypatch, tmp_path: Path) -> None:
    """TC-09: Up to the threshold, nothing is asked."""
    def unexpected(_prompt: str) -> str:
        raise AssertionError("confirmation should not be asked")
    monkeypatch.setattr("builtins.input", unexpected)
    lines = "".join(f"file{i}.txt\n" for i in range(20))

    assert _run(monkeypatch, ["demo", "--custom", "--parent-dir", str(tmp_path)], lines) == EXIT_OK


def test_template_run(monkeypatch, tmp_path: Path) -> None:
    """TC-10: Template flags need no stdin."""
    code = _run(monkeypatch, ["web", "--node", "--parent-dir", str(tmp_path)])
    assert code == EXIT_OK
    manifest = json.loads((tmp_path / "web" / "package.json").read_text(encoding="utf-8"))
    assert manifest["name"] == "web"


def test_no_flag_creates_empty_folder_with_warning(monkeypatch, tmp_path: Path, capsys) -> None:
    """TC-11: Without a mode the project folder is created empty."""
    code = _run(monkeypatch, ["bare", "--parent-dir", str(tmp_path)])

    assert code == EXIT_OK
    assert os.listdir(tmp_path / "bare") == []
    assert "No framework/language option selected" in capsys.readouterr().err


def test_from_file(monkeypatch, tmp_path: Path) -> None:
    """TC-12: Tree files are read whole; a byte order mark is ignored."""
    tree_file = tmp_path / "tree.txt"
    tree_file.write_text("\ufeffapp/\n    main.py\n\n    late.py\n", encoding="utf-8")
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    code = _run(monkeypatch, ["demo", "--from-file", str(tree_file), "--parent-dir", str(out_dir)])

    assert code == EXIT_OK
    assert sorted(os.listdir(out_dir / "demo" / "app")) == ["late.py", "main.py"]


def test_dry_run_prints_preview(monkeypatch, tmp_path: Path, capsys) -> None:
    """TC-13: Dry runs show the tree and write nothing."""
    code = _run(
        monkeypatch,
        ["demo", "--custom", "--dry-run", "--parent-dir", str(tmp_path)],
        "src/\n    main.py\n\n",
    )

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "DRY RUN" in out
    assert "└── src/" in out
    assert "2 entries would be created." in out
    assert os.listdir(tmp_path) == []


def test_print_tree_shows_created_structure(monkeypatch, tmp_path: Path, capsys) -> None:
    """TC-14: --print-tree renders what is on disk."""
    code = _run(
        monkeypatch,
        ["demo", "--custom", "--print-tree", "--parent-dir", str(tmp_path)],
        "b.txt\na/\n\n",
    )

    out = capsys.readouterr().out
    assert code == EXIT_OK
    assert "demo/\n├── a/\n└── b.txt" in out


def test_json_output(monkeypatch, tmp_path: Path, capsys) -> None:
    """TC-15: --json prints only the serialized result on stdout."""
    code = _run(
        monkeypatch,
        ["demo", "--custom", "--json", "--parent-dir", str(tmp_path)],
        "x.txt\n\n",
    )

    captured = capsys.readouterr()
    payload = json.loads(captured.out)
    assert code == EXIT_OK
    assert payload["ok"] is True
    assert payload["planned_paths"] == ["x.txt"]
    assert "Paste your directory structure" in captured.err

# -----------------------------------------------------------------------------
# FAILURES
# -----------------------------------------------------------------------------

def test_invalid_name(monkeypatch, tmp_path: Path, capsys) -> None:
    """TC-16: Bad project names exit with 2 and a clear message."""
    code = _run(monkeypatch, ["bad name!", "--python", "--parent-dir", str(tmp_path)])
    assert code == EXIT_INVALID_INPUT
    assert "Invalid project name" in capsys.readouterr().err
    assert os.listdir(tmp_path) == []


def test_existing_target(monkeypatch, tmp_path: Path, capsys) -> None:
    """TC-17: An existing folder is never reused."""
    (tmp_path / "demo").mkdir()
    code = _run(monkeypatch, ["demo", "--python", "--parent-dir", str(tmp_path)])
    assert code == EXIT_INVALID_INPUT
    assert "Folder already exists" in capsys.readouterr().err


def test_missing_tree_file(monkeypatch, tmp_path: Path, capsys) -> None:
    """TC-18: Unreadable tree files are input errors."""
    code = _run(monkeypatch, ["demo", "--from-file", str(tmp_path / "nope.txt")])
    assert code == EXIT_INVALID_INPUT
    assert "Cannot read tree file" in capsys.readouterr().err


def test_materialize_failure_exit_code(monkeypatch, tmp_path: Path, capsys) -> None:
    """TC-19: A write failure exits with 1 and names the failing path."""
    def denied(path: str, content: str) -> None:
        raise PermissionError(13, "Permission denied")

    with patch.object(materializer, "_write_file", side_effect=denied):
        code = _run(
            monkeypatch,
            ["demo", "--custom", "--parent-dir", str(tmp_path)],
            "x.txt\n\n",
        )

    err = capsys.readouterr().err
    assert code == EXIT_FAILURE
    assert "x.txt" in err and "Permission denied" in err
    assert "Partial output left in place" in err


def test_interrupt_while_pasting(monkeypatch, tmp_path: Path) -> None:
    """TC-20: Ctrl+C during input exits with 130."""
    class InterruptingStdin(io.StringIO):
        def __iter__(self):
            raise KeyboardInterrupt

    monkeypatch.setattr("sys.stdin", InterruptingStdin())
    assert main(["demo", "--custom", "--parent-dir", str(tmp_path)]) == EXIT_INTERRUPTED
    assert not (tmp_path / "demo").exists()


def test_dump_config(monkeypatch, capsys) -> None:
    """TC-21: --dump-config prints the effective configuration."""
    code = _run(monkeypatch, ["demo", "--react", "--index", "--dump-config"])
    conf = json.loads(capsys.readouterr().out)
    assert code == EXIT_OK
    assert conf["mode"] == "react"
    assert conf["index"] is True


def test_json_abort_keeps_stdout_clean(monkeypatch, tmp_path: Path, capsys) -> None:
    """TC-22: With --json, declining the confirmation writes nothing to stdout."""
    monkeypatch.setattr("builtins.input", lambda _prompt: "no")
    lines = "".join(f"file{i}.txt\n" for i in range(21))

    code = _run(monkeypatch, ["demo", "--custom", "--json", "--parent-dir", str(tmp_path)], lines)

    captured = capsys.readouterr()
    assert code == EXIT_OK
    assert captured.out == ""
    assert "Aborted by user." in captured.err


def test_interrupt_while_creating(monkeypatch, tmp_path: Path, capsys) -> None:
    """TC-23: Ctrl+C during creation exits with 130 instead of a traceback."""
    with patch.object(materializer, "_write_file", side_effect=KeyboardInterrupt):
        code = _run(monkeypatch, ["demo", "--python", "--parent-dir", str(tmp_path)])

    assert code == EXIT_INTERRUPTED
    assert "Interrupted" in capsys.readouterr().err
