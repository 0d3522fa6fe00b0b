"""
Tests for the add/edit form
"""
from unittest.mock import Mock

import pytest

from category_form import CategoryForm, MODE_ADD, MODE_EDIT
from errors import ApiError, SubmitError


@pytest.fixture
def callbacks():
    return Mock(), Mock()


@pytest.fixture
def form(api, notifier, callbacks):
    on_success, close_drawer = callbacks
    f = CategoryForm(api, notifier, on_submit_success=on_success, close_drawer=close_drawer)
    f.reset("business")
    return f


def test_add_mode_starts_empty(form):
    assert form.mode == MODE_ADD
    assert form.value == ""
    assert form.submit_label() == "Create"
    assert form.field_label() == "Business Name"
    assert form.placeholder() == "Enter business name"


def test_edit_mode_prepopulates_from_name_field(form):
    form.reset("product", {"id": "p1", "products": "Widgets"}, MODE_EDIT)
    assert form.value == "Widgets"
    assert form.submit_label() == "Update"


def test_reset_clears_errors(form):
    form.set_value("ab")
    form.submit()
    form.form_error = "boom"
    form.reset("service")
    assert form.validation_error == ""
    assert form.form_error is None


def test_invalid_input_blocks_request(form, api, callbacks):
    form.set_value("ab")
    assert form.submit() is False
    assert form.validation_error == "Name must be at least 3 characters long"
    api.post.assert_not_called()
    api.put.assert_not_called()
    callbacks[1].assert_not_called()


def test_typing_clears_validation_error(form):
    form.set_value("")
    form.submit()
    assert form.validation_error
    form.set_value("A")
    assert form.validation_error == ""


@pytest.mark.parametrize("kind, endpoint, field", [
    ("business", "/category/create-business", "business"),
    ("service", "/category/create-service", "service"),
    ("product", "/category/create-product", "products"),
])
def test_create_posts_payload_keyed_by_name_field(form, api, notifier, callbacks,
                                                  kind, endpoint, field):
    on_success, close_drawer = callbacks
    form.reset(kind)
    form.set_value("Ace-5 Corp")

    assert form.submit() is True

    api.post.assert_called_once_with(endpoint, json={field: "Ace-5 Corp"})
    api.put.assert_not_called()
    notifier.success.assert_called_once_with("Created")
    close_drawer.assert_called_once()
    on_success.assert_called_once()
    assert form.value == ""
    assert form.submitting is False


def test_edit_puts_to_update_endpoint(form, api, callbacks):
    form.reset("service", {"id": "s9", "service": "Plumbing"}, MODE_EDIT)
    form.set_value("Plumbing Plus")

    assert form.submit() is True

    api.put.assert_called_once_with("/category/update-service/s9",
                                    json={"service": "Plumbing Plus"})
    api.post.assert_not_called()


def test_submit_failure_uses_server_message(form, api, notifier, callbacks):
    on_success, close_drawer = callbacks
    api.post.side_effect = ApiError("HTTP 409", status_code=409,
                                    message="Business already exists")
    form.set_value("Acme Corp")

    assert form.submit() is False

    assert form.form_error == "Business already exists"
    assert isinstance(form.failure, SubmitError)
    assert form.failure.status_code == 409
    notifier.error.assert_called_once_with("Failed to add business")
    close_drawer.assert_not_called()
    on_success.assert_not_called()
    assert form.value == "Acme Corp"
    assert form.submitting is False


def test_submit_failure_generic_message(form, api):
    form.reset("product", {"id": "p1", "products": "Widgets"}, MODE_EDIT)
    api.put.side_effect = ApiError("connection refused")
    form.set_value("Widgets Pro")

    assert form.submit() is False
    assert form.form_error == "Failed to edit product"


def test_cancel_resets_and_closes(form, api, callbacks):
    form.set_value("Something")
    form.cancel()
    assert form.value == ""
    callbacks[1].assert_called_once()
    api.post.assert_not_called()


def test_success_message_follows_refetch(api, notifier):
    events = Mock()
    notifier.success.side_effect = lambda msg: events.notified(msg)
    f = CategoryForm(api, notifier, on_submit_success=events.refetched,
                     close_drawer=events.closed)
    f.reset("business")
    f.set_value("Acme Corp")

    assert f.submit() is True
    assert [c[0] for c in events.mock_calls] == ["closed", "refetched", "notified"]


def test_non_string_name_prepopulates_as_text(form, api):
    form.reset("business", {"id": "1", "business": 12345}, MODE_EDIT)
    assert form.value == "12345"

    assert form.submit() is True
    api.put.assert_called_once_with("/category/update-business/1",
                                    json={"business": "12345"})


def test_missing_name_prepopulates_empty(form):
    form.reset("service", {"id": "s1"}, MODE_EDIT)
    assert form.value == ""
