"""Add/edit form state for a single category item."""
import logging

from entity_registry import resolve_category, to_kind
from errors import ApiError, SubmitError, ValidationError
from name_validator import validate_category_name

MODE_ADD = "add"
MODE_EDIT = "edit"


class CategoryForm:
    def __init__(self, api, notifier, on_submit_success, close_drawer):
        self.api = api
        self.notifier = notifier
        self.on_submit_success = on_submit_success
        self.close_drawer = close_drawer

        self.kind = None
        self.mode = MODE_ADD
        self.initial_item = None   # target item in edit mode
        self.value = ""
        self.validation_error = ""
        self.form_error = None
        self.failure = None        # last SubmitError, for diagnostics
        self.submitting = False

    # ---- state ----

    def reset(self, kind, item=None, mode=MODE_ADD):
        """Re-initialise for a new kind or target item."""
        self.kind = to_kind(kind)
        self.mode = mode
        self.initial_item = item
        if item is not None:
            name = item.get(resolve_category(self.kind).name_field)
            self.value = "" if name is None else str(name)
        else:
            self.value = ""
        self.validation_error = ""
        self.form_error = None
        self.failure = None

    def clear(self):
        self.value = ""
        self.validation_error = ""
        self.form_error = None

    def set_value(self, text):
        self.value = text
        if self.validation_error:
            self.validation_error = ""

    # ---- labels ----

    def field_label(self):
        return resolve_category(self.kind).field_label

    def placeholder(self):
        return f"Enter {self.kind.value} name"

    def submit_label(self):
        return "Update" if self.mode == MODE_EDIT else "Create"

    # ---- actions ----

    def validate(self):
        try:
            validate_category_name(self.value)
        except ValidationError as e:
            self.validation_error = str(e)
            return False
        self.validation_error = ""
        return True

    def submit(self):
        """Validate and send the form. Returns True on success."""
        if not self.validate():
            return False

        cfg = resolve_category(self.kind)
        kind = self.kind.value
        if self.mode == MODE_EDIT and self.initial_item is not None:
            send = self.api.put
            endpoint = cfg.update_endpoint(self.initial_item["id"])
        else:
            send = self.api.post
            endpoint = cfg.create_endpoint
        payload = {cfg.name_field: self.value}

        self.submitting = True
        self.form_error = None
        try:
            response = send(endpoint, json=payload)
        except ApiError as e:
            logging.exception(f"[Form] Error submitting {kind}")
            generic = f"Failed to {self.mode} {kind}"
            self.failure = SubmitError(generic, status_code=e.status_code, message=e.message)
            self.form_error = e.message or generic
            self.notifier.error(generic)
            return False
        finally:
            self.submitting = False

        logging.info(f"[Form] {self.mode} {kind} succeeded: {payload}")
        message = response.get("message") if isinstance(response, dict) else None
        self.clear()
        self.close_drawer()
        # Refetch first so the success message is the last status shown
        self.on_submit_success()
        self.notifier.success(message or f"{cfg.tab_label} saved")
        return True

    def cancel(self):
        self.clear()
        self.close_drawer()
