"""Drawer (add/edit form window) and delete confirmation dialog."""
import tkinter as tk
from tkinter import ttk


class CategoryDrawer:
    """Side window hosting the add/edit form of a CategoryLayout."""

    def __init__(self, parent, layout, set_status):
        self.layout = layout
        self.form = layout.form
        self._set_status = set_status
        self.closed = False

        self.win = tk.Toplevel(parent)
        self.win.title(layout.drawer_title())
        self.win.transient(parent.winfo_toplevel())
        self.win.resizable(False, False)
        self.win.protocol("WM_DELETE_WINDOW", self.form.cancel)
        self._place(parent)
        self._build()

    def _place(self, parent):
        top = parent.winfo_toplevel()
        top.update_idletasks()
        x = top.winfo_rootx() + max(top.winfo_width() - 380, 0)
        y = top.winfo_rooty() + 60
        self.win.geometry(f"360x230+{x}+{y}")

    def _build(self):
        f = ttk.Frame(self.win, padding=12)
        f.pack(fill=tk.BOTH, expand=True)

        ttk.Label(f, text=self.layout.drawer_title(),
                  font=("TkDefaultFont", 11, "bold")).pack(anchor=tk.W, pady=(0, 8))
        ttk.Label(f, text=f"{self.form.field_label()} *").pack(anchor=tk.W)

        self.value_var = tk.StringVar(value=self.form.value)
        self.entry = ttk.Entry(f, textvariable=self.value_var, width=40)
        self.entry.pack(fill=tk.X, pady=(2, 0))
        self.entry.bind("<Return>", lambda _: self._submit())
        self.value_var.trace_add("write", self._on_change)

        self.hint_var = tk.StringVar()
        self.hint_lbl = ttk.Label(f, textvariable=self.hint_var, foreground="#888888")
        self.hint_lbl.pack(anchor=tk.W)

        self.error_var = tk.StringVar()
        ttk.Label(f, textvariable=self.error_var, foreground="#cc0000",
                  wraplength=320).pack(anchor=tk.W, pady=(4, 0))

        bf = ttk.Frame(f)
        bf.pack(side=tk.BOTTOM, fill=tk.X)
        self.submit_btn = ttk.Button(bf, text=self.form.submit_label(), command=self._submit)
        self.submit_btn.pack(side=tk.RIGHT)
        ttk.Button(bf, text="Cancel", command=self.form.cancel).pack(side=tk.RIGHT, padx=(0, 5))

        self._refresh()
        self.entry.focus()

    def _on_change(self, *_):
        self.form.set_value(self.value_var.get())
        self._refresh()

    def _refresh(self):
        if not self.form.value:
            self.hint_var.set(self.form.placeholder())
        else:
            self.hint_var.set("")
        self.error_var.set(self.form.validation_error or self.form.form_error or "")

    def _submit(self):
        if self.form.submitting:
            return
        self.submit_btn.config(state=tk.DISABLED)
        self._set_status("Saving...")
        self.form.submit()
        # A successful submit closes (destroys) the drawer
        if not self.closed:
            self.submit_btn.config(state=tk.NORMAL)
            self._refresh()

    def destroy(self):
        self.closed = True
        self.win.destroy()


class DeleteConfirmDialog:
    """Modal yes/no prompt driven by the props from CategoryLayout.delete_prompt()."""

    def __init__(self, parent, is_open, on_close, on_confirm, is_loading, title, message):
        self.on_close = on_close
        self.on_confirm = on_confirm

        self.win = tk.Toplevel(parent)
        self.win.title(title)
        self.win.geometry("340x130")
        self.win.transient(parent.winfo_toplevel())
        self.win.resizable(False, False)
        self.win.protocol("WM_DELETE_WINDOW", self._close)

        f = ttk.Frame(self.win, padding=12)
        f.pack(fill=tk.BOTH, expand=True)
        ttk.Label(f, text=message, wraplength=300).pack(anchor=tk.W, pady=(0, 12))

        bf = ttk.Frame(f)
        bf.pack(side=tk.BOTTOM, fill=tk.X)
        self.confirm_btn = ttk.Button(bf, text="Delete", command=self._confirm)
        self.confirm_btn.pack(side=tk.RIGHT)
        self.cancel_btn = ttk.Button(bf, text="Cancel", command=self._close)
        self.cancel_btn.pack(side=tk.RIGHT, padx=(0, 5))

        self.win.grab_set()
        self.update(is_loading=is_loading)

    def update(self, is_loading=False, **_):
        state = tk.DISABLED if is_loading else tk.NORMAL
        self.confirm_btn.config(state=state, text="Deleting..." if is_loading else "Delete")
        self.cancel_btn.config(state=state)

    def _confirm(self):
        self.update(is_loading=True)
        self.on_confirm()

    def _close(self):
        self.on_close()

    def destroy(self):
        self.win.grab_release()
        self.win.destroy()
