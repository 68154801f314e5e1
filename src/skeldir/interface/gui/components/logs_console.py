from __future__ import annotations

"""
Log Console Component.

Read-only, monospaced text area that mirrors the application log and the
rendered preview of each scaffold run.
"""

from typing import Any

import customtkinter as ctk


class LogsFrame(ctk.CTkFrame):
    """Console frame fed from the GUI log queue."""

    def __init__(self, master: Any, **kwargs: Any):
        super().__init__(master, corner_radius=10, **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self.textbox = ctk.CTkTextbox(self, state="disabled", font=("Consolas", 11), height=160)
        self.textbox.grid(row=0, column=0, sticky="nsew", padx=5, pady=(5, 0))

        actions = ctk.CTkFrame(self, fg_color="transparent")
        actions.grid(row=1, column=0, sticky="e", pady=5, padx=5)

        self.btn_clear = ctk.CTkButton(actions, text="Clear", width=80, command=self.clear)
        self.btn_clear.pack(side="right", padx=(5, 0))
        self.btn_copy = ctk.CTkButton(actions, text="Copy", width=80, command=self._copy_logs)
        self.btn_copy.pack(side="right")

    def append_log(self, msg: str) -> None:
        """
        Append one line while keeping the buffer read-only for the user.

        Args:
            msg: Formatted message.
        """
        self.textbox.configure(state="normal")
        self.textbox.insert("end", msg + "\n")
        self.textbox.see("end")
        self.textbox.configure(state="disabled")

    def clear(self) -> None:
        self.textbox.configure(state="normal")
        self.textbox.delete("1.0", "end")
        self.textbox.configure(state="disabled")

    def _copy_logs(self) -> None:
        self.clipboard_clear()
        self.clipboard_append(self.textbox.get("1.0", "end"))
