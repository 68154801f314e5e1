from __future__ import annotations

"""
Scaffold Form Component.

Collects everything a scaffold run needs: project name, parent folder,
mode, pasted tree text and output options, plus the Preview and Create
triggers. Widgets are exposed as attributes for the controller.
"""

from typing import Any, List

import customtkinter as ctk


class ScaffoldFrame(ctk.CTkFrame):
    """Input form of the scaffold window."""

    def __init__(self, master: Any, modes: List[str], **kwargs: Any):
        """
        Build the form.

        Args:
            master: Parent container.
            modes: Selectable scaffold modes.
        """
        super().__init__(master, corner_radius=10, fg_color="transparent", **kwargs)
        self.grid_columnconfigure(1, weight=1)
        self.grid_rowconfigure(3, weight=1)

        # --- Target ---
        ctk.CTkLabel(self, text="Project name").grid(row=0, column=0, sticky="w", padx=10, pady=5)
        self.entry_name = ctk.CTkEntry(self, placeholder_text="my-project")
        self.entry_name.grid(row=0, column=1, columnspan=2, sticky="ew", padx=10, pady=5)

        ctk.CTkLabel(self, text="Parent folder").grid(row=1, column=0, sticky="w", padx=10, pady=5)
        self.entry_parent = ctk.CTkEntry(self)
        self.entry_parent.grid(row=1, column=1, sticky="ew", padx=(10, 5), pady=5)
        self.btn_browse = ctk.CTkButton(self, text="Browse", width=90)
        self.btn_browse.grid(row=1, column=2, padx=(0, 10), pady=5)

        # --- Source ---
        ctk.CTkLabel(self, text="Template").grid(row=2, column=0, sticky="w", padx=10, pady=5)
        self.combo_mode = ctk.CTkOptionMenu(self, values=modes)
        self.combo_mode.grid(row=2, column=1, sticky="w", padx=10, pady=5)

        self.txt_tree = ctk.CTkTextbox(self, font=("Consolas", 12), wrap="none")
        self.txt_tree.grid(row=3, column=0, columnspan=3, sticky="nsew", padx=10, pady=5)

        # --- Options ---
        options = ctk.CTkFrame(self, fg_color="transparent")
        options.grid(row=4, column=0, columnspan=3, sticky="w", padx=10, pady=5)
        self.sw_index = ctk.CTkSwitch(options, text="Prefix entries with their order")
        self.sw_index.pack(side="left", padx=(0, 20))
        self.sw_verbose = ctk.CTkSwitch(options, text="Log every created path")
        self.sw_verbose.pack(side="left")

        # --- Actions ---
        self.btn_create = ctk.CTkButton(
            self,
            text="CREATE PROJECT",
            height=44,
            font=ctk.CTkFont(size=14, weight="bold"),
            fg_color="#1F6AA5",
        )
        self.btn_create.grid(row=5, column=0, columnspan=3, sticky="ew", padx=10, pady=(10, 5))

        self.btn_preview = ctk.CTkButton(
            self,
            text="Preview",
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "#DCE4EE"),
        )
        self.btn_preview.grid(row=6, column=0, columnspan=3, sticky="ew", padx=10, pady=(0, 10))
