from __future__ import annotations

"""
GUI Entrypoint and Application Lifecycle Orchestrator.

Initializes the CustomTkinter environment, restores the last session,
assembles the window, binds the controller and polls the log queue into
the console until the window is closed.
"""

import logging
import queue
import tkinter.messagebox as mb
from logging.handlers import QueueHandler

import customtkinter as ctk

from skeldir.domain import config as cfg
from skeldir.domain import constants as const
from skeldir.infra.logging import LoggingConfig, configure_logging, get_default_log_path
from skeldir.interface.gui.components.logs_console import LogsFrame
from skeldir.interface.gui.components.scaffold_form import ScaffoldFrame
from skeldir.interface.gui.controllers.scaffold_controller import ScaffoldController

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# MAIN APPLICATION LOOP
# -----------------------------------------------------------------------------

def main() -> None:
    """Initialize and launch the Graphical User Interface."""
    # -----------------------------------------------------------------------------
    # PHASE 1: DIAGNOSTIC INFRASTRUCTURE SETUP
    # -----------------------------------------------------------------------------
    configure_logging(LoggingConfig(level="INFO", console=True, log_file=get_default_log_path()))
    logger.info(f"GUI Lifecycle: Initializing v{const.APP_VERSION}")

    gui_log_queue: queue.Queue = queue.Queue()
    gui_log_handler = QueueHandler(gui_log_queue)
    gui_log_handler.setLevel(logging.INFO)
    logging.getLogger().addHandler(gui_log_handler)

    # -----------------------------------------------------------------------------
    # PHASE 2: PERSISTENT STATE RECOVERY
    # -----------------------------------------------------------------------------
    app_state = cfg.load_app_state()
    config = cfg.load_config()

    # -----------------------------------------------------------------------------
    # PHASE 3: VIEW CONSTRUCTION
    # -----------------------------------------------------------------------------
    ctk.set_appearance_mode(app_state["app_settings"].get("theme", "System"))
    ctk.set_default_color_theme("blue")

    app = ctk.CTk()
    app.title(f"{const.APP_NAME} - v{const.APP_VERSION}")
    app.geometry("760x720")
    app.grid_columnconfigure(0, weight=1)
    app.grid_rowconfigure(0, weight=3)
    app.grid_rowconfigure(1, weight=1)

    form = ScaffoldFrame(app, const.ALL_MODES)
    form.grid(row=0, column=0, sticky="nsew", padx=15, pady=(15, 5))
    logs = LogsFrame(app)
    logs.grid(row=1, column=0, sticky="nsew", padx=15, pady=(5, 15))

    # -----------------------------------------------------------------------------
    # PHASE 4: CONTROLLER INTEGRATION AND EVENT BINDING
    # -----------------------------------------------------------------------------
    controller = ScaffoldController(
        app, config, app_state,
        show_error=lambda title, msg: mb.showerror(title, msg, parent=app),
        show_info=lambda title, msg: mb.showinfo(title, msg, parent=app),
        ask_yes_no=lambda title, msg: mb.askyesno(title, msg, parent=app),
    )
    controller.register_views(form, logs)
    controller.sync_view_from_config()

    form.btn_create.configure(command=lambda: controller.start_scaffold(dry_run=False))
    form.btn_preview.configure(command=lambda: controller.start_scaffold(dry_run=True))
    form.combo_mode.configure(command=controller.on_mode_selected)
    form.btn_browse.configure(command=lambda: _browse_folder(app, form.entry_parent))

    # -----------------------------------------------------------------------------
    # PHASE 5: LOG POLLING
    # -----------------------------------------------------------------------------
    log_formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(message)s", "%H:%M:%S")

    def poll_log_queue() -> None:
        """Flush queued records into the console."""
        while True:
            try:
                record = gui_log_queue.get_nowait()
            except queue.Empty:
                break
            logs.append_log(log_formatter.format(record))
        app.after(100, poll_log_queue)

    # -----------------------------------------------------------------------------
    # PHASE 6: LIFECYCLE FINALIZATION
    # -----------------------------------------------------------------------------
    def on_closing() -> None:
        """Persist session state and terminate the process."""
        controller.persist_session()
        cfg.save_app_state(app_state)
        logging.getLogger().removeHandler(gui_log_handler)
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_closing)
    app.after(100, poll_log_queue)

    app.mainloop()


# -----------------------------------------------------------------------------
# PRIVATE UI HELPERS
# -----------------------------------------------------------------------------

def _browse_folder(app: ctk.CTk, entry_widget: ctk.CTkEntry) -> None:
    """Prompt for a directory and write it into the entry."""
    path = ctk.filedialog.askdirectory(parent=app, title="Select Parent Folder")
    if path:
        entry_widget.delete(0, "end")
        entry_widget.insert(0, path)


if __name__ == "__main__":
    main()
