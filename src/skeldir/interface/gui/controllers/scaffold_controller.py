from __future__ import annotations

"""
Scaffold Window Controller.

Bridges the form widgets and the scaffold engine: keeps the session
configuration in sync with the view, validates the request, hands the
job to a background thread and reports the outcome.

Dialog functions are injected so the controller never imports Tk and can
be exercised with mocks.
"""

import logging
import threading
from typing import Any, Callable, Dict, List, Optional

from skeldir.core.scaffold.engine import is_valid_project_name
from skeldir.domain import constants as const
from skeldir.domain.scaffold_models import ScaffoldResult
from skeldir.interface.gui import threads

logger = logging.getLogger(__name__)

MessageFn = Callable[[str, str], Any]


class ScaffoldController:
    """
    Central controller for the scaffold window.

    Attributes:
        app: Root window (only `after` is used, to hop back to the UI thread).
        config: Active session configuration.
        app_state: Persistent application state written on close.
    """

    def __init__(
            self,
            app: Any,
            config: Dict[str, Any],
            app_state: Dict[str, Any],
            *,
            show_error: MessageFn,
            show_info: MessageFn,
            ask_yes_no: Callable[[str, str], bool],
    ):
        self.app = app
        self.config = config
        self.app_state = app_state
        self.show_error = show_error
        self.show_info = show_info
        self.ask_yes_no = ask_yes_no

        self.form_view: Any = None
        self.logs_view: Any = None

    # -------------------------------------------------------------------------
    # VIEW REGISTRATION
    # -------------------------------------------------------------------------

    def register_views(self, form: Any, logs: Any) -> None:
        """Link the form and log console frames to the controller."""
        self.form_view = form
        self.logs_view = logs

    # -------------------------------------------------------------------------
    # CONFIGURATION SYNCHRONIZATION
    # -------------------------------------------------------------------------

    def sync_view_from_config(self) -> None:
        """Populate the form widgets from the session configuration."""
        if not self.form_view:
            return

        entry = self.form_view.entry_parent
        entry.delete(0, "end")
        entry.insert(0, str(self.config.get("parent_dir", "")))

        mode = self.config.get("mode", const.MODE_EMPTY)
        self.form_view.combo_mode.set(mode)

        for key, widget in (("index", self.form_view.sw_index), ("verbose", self.form_view.sw_verbose)):
            if self.config.get(key):
                widget.select()
            else:
                widget.deselect()

        self.on_mode_selected(mode)

    def sync_config_from_view(self) -> None:
        """Scrape the form widgets back into the session configuration."""
        if not self.form_view:
            return

        self.config["parent_dir"] = self.form_view.entry_parent.get().strip()
        self.config["mode"] = self.form_view.combo_mode.get()
        self.config["index"] = bool(self.form_view.sw_index.get())
        self.config["verbose"] = bool(self.form_view.sw_verbose.get())

    def on_mode_selected(self, mode: str) -> None:
        """The tree box only takes input in the custom mode."""
        state = "normal" if mode == const.MODE_CUSTOM else "disabled"
        self.form_view.txt_tree.configure(state=state)

    def get_tree_lines(self) -> List[str]:
        """Return the non-blank lines of the tree box."""
        raw = self.form_view.txt_tree.get("1.0", "end")
        return [line for line in raw.splitlines() if line.strip()]

    def persist_session(self) -> None:
        """Store the last parent folder and mode in the application state."""
        self.sync_config_from_view()
        session = self.app_state.setdefault("last_session", {})
        session["parent_dir"] = self.config.get("parent_dir", "")
        session["mode"] = self.config.get("mode", const.MODE_EMPTY)

    # -------------------------------------------------------------------------
    # EXECUTION
    # -------------------------------------------------------------------------

    def start_scaffold(self, dry_run: bool = False) -> bool:
        """
        Validate the request and launch the scaffold in a background thread.

        Args:
            dry_run: Only resolve and preview the hierarchy.

        Returns:
            bool: True if a background job was started.
        """
        self.sync_config_from_view()
        name = self.form_view.entry_name.get().strip()

        if not is_valid_project_name(name):
            self.show_error(
                "Invalid project name",
                "Use only letters, numbers, dashes, or underscores.",
            )
            return False

        tree_lines: List[str] = []
        if self.config["mode"] == const.MODE_CUSTOM:
            tree_lines = self.get_tree_lines()
            if not tree_lines:
                self.show_error("Empty structure", "Paste a directory tree first.")
                return False

            threshold = int(self.config.get("confirm_threshold", const.DEFAULT_CONFIRM_THRESHOLD))
            if not dry_run and len(tree_lines) > threshold:
                question = (
                    f"You pasted a large structure with {len(tree_lines)} lines. "
                    "Are you sure you want to create it?"
                )
                if not self.ask_yes_no("Confirm", question):
                    logger.info("Aborted by user.")
                    return False

        self.set_ui_state(disabled=True)
        logger.debug(f"Starting scaffold (DryRun={dry_run}). Config: {self.config}")

        threading.Thread(
            target=threads.run_scaffold_task,
            args=(name, dict(self.config), tree_lines, dry_run, self.handle_thread_callback),
            daemon=True,
        ).start()
        return True

    def handle_thread_callback(self, result: Any) -> None:
        """Marshal the worker outcome back onto the UI thread."""
        self.app.after(0, lambda: self.process_result(result))

    def process_result(self, result: Any) -> None:
        """Report a finished scaffold run to the user."""
        self.set_ui_state(disabled=False)

        if isinstance(result, Exception):
            self.show_error("Unexpected error", f"{result}\n\nSee logs for details.")
            return

        if not isinstance(result, ScaffoldResult):
            return

        if not result.ok:
            self.show_error("Scaffold failed", result.error)
            return

        if self.logs_view is not None:
            for line in result.tree_lines:
                self.logs_view.append_log(line)

        warning = self._anomaly_note(result.anomalies)
        if result.dry_run:
            self.show_info(
                "Preview",
                f"{len(result.planned_paths)} entries would be created in {result.target_dir}{warning}",
            )
        else:
            self.show_info(
                "Project created",
                f"Project '{result.project_name}' created at {result.target_dir}{warning}",
            )

    def set_ui_state(self, disabled: bool) -> None:
        """Enable or disable the action buttons while a job runs."""
        state = "disabled" if disabled else "normal"
        self.form_view.btn_create.configure(state=state)
        self.form_view.btn_preview.configure(state=state)

    @staticmethod
    def _anomaly_note(anomalies: Optional[List[str]]) -> str:
        if not anomalies:
            return ""
        return f"\n\n{len(anomalies)} line(s) were irregular; see the log console."
