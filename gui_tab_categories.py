"""Category list view: heading, search, card list, and drawer/prompt hosting."""
import tkinter as tk
from tkinter import ttk

from category_card import card_view
from gui_dialogs import CategoryDrawer, DeleteConfirmDialog


class CategoryTab:
    def __init__(self, parent, layout, set_status):
        self.parent = parent
        self.layout = layout
        self._set_status = set_status

        self._search_job = None
        self._was_loading = False
        self._row_items = {}       # {tree iid: item}
        self.drawer = None
        self._drawer_key = None
        self.delete_dialog = None

        self._build(parent)
        layout.subscribe(self._render)
        self._render()

    def _build(self, parent):
        # Header
        hf = ttk.Frame(parent)
        hf.pack(fill=tk.X, padx=10, pady=(8, 0))

        left = ttk.Frame(hf)
        left.pack(side=tk.LEFT, fill=tk.X, expand=True)
        self.heading_var = tk.StringVar()
        ttk.Label(left, textvariable=self.heading_var,
                  font=("TkDefaultFont", 16, "bold")).pack(anchor=tk.W)
        self.total_var = tk.StringVar()
        ttk.Label(left, textvariable=self.total_var).pack(anchor=tk.W)

        self.add_var = tk.StringVar()
        ttk.Button(hf, textvariable=self.add_var,
                   command=self.layout.open_add_form).pack(side=tk.RIGHT)

        # Search
        sf = ttk.Frame(parent)
        sf.pack(fill=tk.X, padx=10, pady=(10, 2))
        self.search_lbl = ttk.Label(sf)
        self.search_lbl.pack(side=tk.LEFT)
        self.search_var = tk.StringVar(value=self.layout.search_query)
        self.search_var.trace_add("write", self._on_search)
        ttk.Entry(sf, textvariable=self.search_var).pack(side=tk.LEFT, fill=tk.X,
                                                         expand=True, padx=5)

        # Inline loading / error message
        self.message_var = tk.StringVar()
        self.message_lbl = ttk.Label(parent, textvariable=self.message_var,
                                     foreground="#cc0000", anchor=tk.CENTER)
        self.message_lbl.pack(fill=tk.X, padx=10)

        # Cards
        lf = ttk.Frame(parent)
        lf.pack(fill=tk.BOTH, expand=True, padx=10, pady=5)

        cols = ("name", "id", "created")
        self.tree = ttk.Treeview(lf, columns=cols, show="headings", height=12,
                                 selectmode="browse")
        self.tree.heading("name", text="Name", anchor=tk.W)
        self.tree.heading("id", text="ID", anchor=tk.W)
        self.tree.heading("created", text="Created", anchor=tk.W)
        self.tree.column("name", width=320, minwidth=120)
        self.tree.column("id", width=120, minwidth=80, stretch=False)
        self.tree.column("created", width=110, minwidth=80, stretch=False)
        self.tree.pack(fill=tk.BOTH, expand=True, side=tk.LEFT)
        self.tree.bind("<<TreeviewSelect>>", self._on_select)
        self.tree.bind("<Double-1>", lambda _: self._edit_selected())

        sb = ttk.Scrollbar(lf, orient=tk.VERTICAL, command=self.tree.yview)
        self.tree.configure(yscrollcommand=sb.set)
        sb.pack(fill=tk.Y, side=tk.RIGHT)

        # Card actions
        af = ttk.Frame(parent)
        af.pack(fill=tk.X, padx=10, pady=(2, 8))
        self.edit_btn = ttk.Button(af, text="Edit", command=self._edit_selected,
                                   state=tk.DISABLED)
        self.edit_btn.pack(side=tk.LEFT, padx=(0, 5))
        self.delete_btn = ttk.Button(af, text="Delete", command=self._delete_selected,
                                     state=tk.DISABLED)
        self.delete_btn.pack(side=tk.LEFT)

    # ---- rendering ----

    def _render(self):
        layout = self.layout
        self.heading_var.set(layout.heading())
        self.total_var.set(layout.total_label())
        self.add_var.set(f"+ {layout.add_button_label()}")
        self.search_lbl.config(text=layout.search_placeholder())

        # Status only changes on load transitions so action messages stay visible
        if layout.loading != self._was_loading:
            self._was_loading = layout.loading
            self._set_status(layout.load_status())

        self.tree.delete(*self.tree.get_children())
        self._row_items = {}
        if layout.loading:
            self.message_var.set("")
        elif layout.error:
            self.message_var.set(layout.error)
        else:
            self.message_var.set("")
            for item in layout.filtered_list():
                card = card_view(item, layout.active_kind)
                iid = self.tree.insert("", tk.END,
                                       values=(card["title"], card["short_id"], card["created"]))
                self._row_items[iid] = item
        self._on_select()

        self._sync_drawer()
        self._sync_delete_dialog()

    def _sync_drawer(self):
        layout = self.layout
        key = (layout.active_kind, layout.mode, id(layout.edit_item))
        if self.drawer is not None and (not layout.is_drawer_open or key != self._drawer_key):
            self.drawer.destroy()
            self.drawer = None
        if layout.is_drawer_open and self.drawer is None:
            self._drawer_key = key
            self.drawer = CategoryDrawer(self.parent, layout, self._set_status)

    def _sync_delete_dialog(self):
        props = self.layout.delete_prompt()
        if props["is_open"]:
            if self.delete_dialog is None:
                self.delete_dialog = DeleteConfirmDialog(self.parent, **props)
            else:
                self.delete_dialog.update(**props)
        elif self.delete_dialog is not None:
            self.delete_dialog.destroy()
            self.delete_dialog = None

    # ---- search ----

    def _on_search(self, *_):
        if self._search_job:
            self.parent.after_cancel(self._search_job)
        self._search_job = self.parent.after(
            200, lambda: self.layout.set_search_query(self.search_var.get()))

    # ---- selection ----

    def _selected_item(self):
        sel = self.tree.selection()
        if not sel:
            return None
        return self._row_items.get(sel[0])

    def _on_select(self, _=None):
        state = tk.NORMAL if self._selected_item() is not None else tk.DISABLED
        self.edit_btn.config(state=state)
        self.delete_btn.config(state=state)

    def _edit_selected(self):
        item = self._selected_item()
        if item is not None:
            self.layout.open_edit_form(item)

    def _delete_selected(self):
        item = self._selected_item()
        if item is not None:
            self.layout.request_delete(item)
