"""
Root controller of the category admin screen.

Owns the active kind, one collection per kind, loading/error state, the
search query and the drawer/delete-prompt visibility. Views call the
operations below and re-render from the attributes after being notified
through subscribe().
"""
import logging

from category_form import CategoryForm, MODE_ADD, MODE_EDIT
from entity_registry import CATEGORY_CONFIGS, DEFAULT_KIND, resolve_category, to_kind
from errors import ApiError, DeleteError, FetchError


class CategoryLayout:
    def __init__(self, api, notifier, kind=DEFAULT_KIND):
        self.api = api
        self.notifier = notifier

        self.active_kind = to_kind(kind)
        self.collections = {cfg.kind: [] for cfg in CATEGORY_CONFIGS}

        self.loading = False
        self.error = None
        self.failure = None          # last FetchError/DeleteError
        self.search_query = ""

        # Delete prompt
        self.show_delete_modal = False
        self.item_to_delete = None
        self.is_deleting = False

        # Drawer
        self.is_drawer_open = False
        self.mode = MODE_ADD
        self.edit_item = None

        self.form = CategoryForm(api, notifier,
                                 on_submit_success=self.fetch_list,
                                 close_drawer=self.close_drawer)
        self.form.reset(self.active_kind)

        self._listeners = []

    # ---- observers ----

    def subscribe(self, callback):
        self._listeners.append(callback)

    def _changed(self):
        for cb in list(self._listeners):
            cb()

    # ---- kind ----

    @property
    def config(self):
        return resolve_category(self.active_kind)

    def select_kind(self, kind):
        """Switch the active kind and load its list. The search query is kept."""
        kind = to_kind(kind)
        if kind is self.active_kind:
            return
        self.active_kind = kind
        # An edit target belongs to the previous kind's collection
        self.edit_item = None
        self.mode = MODE_ADD
        self.form.reset(self.active_kind)
        logging.info(f"[Layout] Active kind -> {self.active_kind.value}")
        self.fetch_list()

    # ---- loading ----

    def fetch_list(self):
        kind = self.active_kind
        cfg = resolve_category(kind)
        self.loading = True
        self.error = None
        self._changed()
        try:
            body = self.api.get(cfg.list_endpoint)
            items = body.get(cfg.list_response_key) if isinstance(body, dict) else None
            self.collections[kind] = list(items or [])
            logging.info(f"[Layout] Loaded {len(self.collections[kind])} {kind.value} item(s)")
        except ApiError as e:
            self.error = f"Failed to load {kind.value} data"
            self.failure = FetchError(self.error, status_code=e.status_code, message=e.message)
            logging.exception(f"[Layout] Error fetching {kind.value} data")
        finally:
            self.loading = False
            self._changed()

    def current_items(self):
        return self.collections[self.active_kind]

    def load_status(self):
        """Status-bar text describing the current load state."""
        kind = self.active_kind.value
        if self.loading:
            return f"Loading {kind} data..."
        if self.error:
            return self.error
        return f"{len(self.current_items())} {kind} item(s) loaded"

    # ---- search ----

    def set_search_query(self, text):
        self.search_query = text or ""
        self._changed()

    def filtered_list(self):
        field = self.config.name_field
        q = self.search_query.lower()
        result = []
        for item in self.current_items():
            name = item.get(field)
            if isinstance(name, str) and q in name.lower():
                result.append(item)
        return result

    # ---- delete ----

    def request_delete(self, item):
        self.item_to_delete = item
        self.show_delete_modal = True
        self._changed()

    def cancel_delete(self):
        self.show_delete_modal = False
        self._changed()

    def confirm_delete(self):
        """Delete the held item. Returns True when the backend accepted it."""
        if not self.item_to_delete:
            return False

        kind = self.active_kind
        cfg = resolve_category(kind)
        item_id = self.item_to_delete["id"]

        self.is_deleting = True
        self._changed()
        try:
            response = self.api.delete(cfg.delete_endpoint(item_id))
        except ApiError as e:
            self.failure = DeleteError(f"Failed to delete {kind.value}",
                                       status_code=e.status_code, message=e.message)
            logging.exception(f"[Layout] Error deleting {kind.value} {item_id}")
            self.notifier.error(f"Failed to delete {kind.value}")
            return False
        finally:
            self.is_deleting = False
            self._changed()

        self.collections[kind] = [it for it in self.collections[kind] if it.get("id") != item_id]
        message = response.get("message") if isinstance(response, dict) else None
        self.notifier.success(message or f"Deleted {kind.value}")
        logging.info(f"[Layout] Deleted {kind.value} {item_id}")
        self.show_delete_modal = False
        self.item_to_delete = None
        self._changed()
        return True

    def delete_prompt(self):
        """Props handed to the delete confirmation dialog."""
        kind = self.active_kind.value
        return {
            "is_open": self.show_delete_modal,
            "on_close": self.cancel_delete,
            "on_confirm": self.confirm_delete,
            "is_loading": self.is_deleting,
            "title": f"Delete {kind}",
            "message": f"Are you sure you want to delete {kind}",
        }

    # ---- drawer ----

    def open_add_form(self):
        self.edit_item = None
        self.mode = MODE_ADD
        self.form.reset(self.active_kind, None, MODE_ADD)
        self.is_drawer_open = True
        self._changed()

    def open_edit_form(self, item):
        self.edit_item = item
        self.mode = MODE_EDIT
        self.form.reset(self.active_kind, item, MODE_EDIT)
        self.is_drawer_open = True
        self._changed()

    def close_drawer(self):
        self.is_drawer_open = False
        self._changed()

    # ---- labels ----

    def heading(self):
        return self.config.heading

    def total_label(self):
        return f"Total {self.config.plural}: {len(self.filtered_list())}"

    def add_button_label(self):
        return f"Add new {self.active_kind.value}"

    def search_placeholder(self):
        return f"Search {self.active_kind.value}..."

    def drawer_title(self):
        kind = self.active_kind.value
        return f"Edit {kind}" if self.mode == MODE_EDIT else f"Add New {kind}"
