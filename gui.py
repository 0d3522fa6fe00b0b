import tkinter as tk
from tkinter import ttk, messagebox
from pathlib import Path
import logging, sys

def _setup_logging():
    if getattr(sys, 'frozen', False):
        log_path = Path(sys.executable).parent / "debug.log"
    else:
        log_path = Path(__file__).parent / "debug.log"
    logging.basicConfig(filename=str(log_path), level=logging.DEBUG,
                        format="%(asctime)s %(message)s", encoding="utf-8")
    logging.info("=== App started ===")
_setup_logging()

from constants import APP_NAME, APP_VERSION, API_BASE_URL
from api_client import CategoryApiClient
from category_layout import CategoryLayout
from entity_registry import CATEGORY_CONFIGS
from gui_tab_categories import CategoryTab

# ── Notifications ───────────────────────────────────────────────────

class TkNotifier:
    """Status-bar notifications; errors also pop a dialog."""

    def __init__(self, set_status):
        self._set_status = set_status

    def success(self, message):
        logging.info(f"[GUI] success: {message}")
        self._set_status(message)

    def error(self, message):
        logging.info(f"[GUI] error: {message}")
        self._set_status(f"Error: {message}")
        messagebox.showerror("Error", message)


# ── Main Application ────────────────────────────────────────────────

class CategoryAdminApp:
    def __init__(self, api=None):
        self.root = tk.Tk()
        self.root.title(f"{APP_NAME} v{APP_VERSION}")
        self.root.geometry("820x600")
        self.root.minsize(640, 460)
        self.root.resizable(True, True)

        self.api = api or CategoryApiClient()
        self._build_ui()

    def _build_ui(self):
        # Status bar first (the layout notifies during the first fetch)
        self.status_var = tk.StringVar(value=f"Backend: {API_BASE_URL}")
        status_frame = ttk.Frame(self.root)
        status_frame.pack(side=tk.BOTTOM, fill=tk.X, padx=10, pady=(2, 8))
        ttk.Label(status_frame, textvariable=self.status_var,
                  relief=tk.SUNKEN, anchor=tk.W).pack(fill=tk.X)

        self.layout = CategoryLayout(self.api, TkNotifier(self._set_status))

        # Tab bar
        tabs = ttk.Frame(self.root)
        tabs.pack(fill=tk.X, padx=10, pady=(8, 0))
        self.kind_var = tk.StringVar(value=self.layout.active_kind.value)
        for cfg in sorted(CATEGORY_CONFIGS, key=lambda c: c.sort_order):
            ttk.Radiobutton(tabs, text=f"  {cfg.tab_label}  ", value=cfg.kind.value,
                            variable=self.kind_var, style="Toolbutton",
                            command=self._on_tab).pack(side=tk.LEFT, padx=(0, 2))

        content = ttk.Frame(self.root)
        content.pack(fill=tk.BOTH, expand=True, padx=6, pady=(6, 0))
        self.tab = CategoryTab(content, self.layout, self._set_status)

        # Initial load happens once the window is mapped
        self.root.after_idle(self.layout.fetch_list)

    def _on_tab(self):
        self.layout.select_kind(self.kind_var.get())

    def _set_status(self, text):
        self.status_var.set(text)
        self.root.update_idletasks()

    def run(self):
        try:
            self.root.mainloop()
        finally:
            self.api.close()
