import pytest

from client import state as form
from client.state import FormState, reduce
from models.employee import default_draft


EMPLOYEE = {
    "id": 7,
    "name": "Ada",
    "dept": "Finance",
    "active": True,
    "number": "0007",
    "email": "ada@example.com",
    "address": "London",
    "photo": "data:image/png;base64,AAA=",
}


class TestFieldChanges:
    """Field edits and their errors"""

    def test_change_merges_into_draft(self):
        state = reduce(FormState(), form.FieldChanged("name", "Ada"))
        assert state.draft['name'] == "Ada"
        assert state.draft['dept'] == "IT"

    def test_change_clears_only_that_error(self):
        state = FormState(errors={"name": "x", "email": "y"})
        state = reduce(state, form.FieldChanged("name", "Ada"))
        assert state.errors == {"email": "y"}

    def test_original_state_untouched(self):
        before = FormState()
        reduce(before, form.FieldChanged("name", "Ada"))
        assert before.draft == default_draft()


class TestPhotoEvents:
    """Photo selection transitions"""

    def test_picked_clears_photo_error(self):
        state = reduce(FormState(errors={"photo": "bad"}), form.PhotoPicked())
        assert state.errors == {}

    def test_rejected_sets_error_and_keeps_photo(self):
        state = FormState(draft={**default_draft(), "photo": "data:image/png;base64,old"})
        state = reduce(state, form.PhotoRejected("File too large (max 2MB)."))
        assert state.errors == {"photo": "File too large (max 2MB)."}
        assert state.draft['photo'] == "data:image/png;base64,old"

    def test_loaded_merges_into_current_draft(self):
        state = reduce(FormState(), form.FieldChanged("name", "Typed meanwhile"))
        state = reduce(state, form.PhotoLoaded("data:image/png;base64,new"))
        assert state.draft['photo'] == "data:image/png;base64,new"
        assert state.draft['name'] == "Typed meanwhile"


class TestSubmitEvents:
    """Status and reset handling around submission"""

    def test_success_resets_form_and_sets_status(self):
        state = reduce(FormState(), form.BeginEdit(EMPLOYEE))
        state = reduce(state, form.SubmitSucceeded("Employee updated successfully!"))
        assert state.draft == default_draft()
        assert state.editing_id is None
        assert state.status.text == "Employee updated successfully!"
        assert state.status.severity == form.SUCCESS

    def test_failure_keeps_draft(self):
        state = reduce(FormState(), form.FieldChanged("name", "Ada"))
        state = reduce(state, form.SubmitFailed("Valid email is required."))
        assert state.draft['name'] == "Ada"
        assert state.status.severity == form.ERROR

    def test_submit_started_clears_status(self):
        state = reduce(FormState(), form.SubmitFailed("boom"))
        assert reduce(state, form.SubmitStarted()).status is None

    def test_expired_status_only_clears_its_own_message(self):
        state = reduce(FormState(), form.SubmitSucceeded("first"))
        first_serial = state.status.serial
        state = reduce(state, form.SubmitFailed("second"))

        state = reduce(state, form.StatusExpired(first_serial))
        assert state.status.text == "second"

        state = reduce(state, form.StatusExpired(state.status.serial))
        assert state.status is None


class TestEditViewReset:
    """Local-only transitions"""

    def test_begin_edit_copies_record(self):
        state = reduce(FormState(errors={"name": "x"}), form.BeginEdit(EMPLOYEE))
        assert state.editing_id == 7
        assert state.is_editing
        assert state.errors == {}
        assert state.draft == {key: value for key, value in EMPLOYEE.items() if key != "id"}

    def test_reset_keeps_status_and_list(self):
        state = reduce(FormState(), form.ListLoaded([EMPLOYEE]))
        state = reduce(state, form.SubmitFailed("boom"))
        state = reduce(state, form.BeginEdit(EMPLOYEE))
        state = reduce(state, form.ResetForm())
        assert state.draft == default_draft()
        assert state.editing_id is None
        assert state.status.text == "boom"
        assert state.employees == [EMPLOYEE]

    def test_view_and_close(self):
        state = reduce(FormState(), form.ViewEmployee(EMPLOYEE))
        assert state.viewing == EMPLOYEE
        assert reduce(state, form.CloseView()).viewing is None


class TestDeleteEvents:
    """Delete confirmation transitions"""

    def test_request_then_cancel(self):
        state = reduce(FormState(), form.RequestDelete(7))
        assert state.pending_delete_id == 7
        assert reduce(state, form.CancelDelete()).pending_delete_id is None

    @pytest.mark.parametrize("event", [form.DeleteSucceeded("Employee deleted!"),
                                       form.DeleteFailed("Failed to delete employee")])
    def test_outcome_clears_pending(self, event):
        state = reduce(FormState(), form.RequestDelete(7))
        state = reduce(state, event)
        assert state.pending_delete_id is None
        assert state.status.text == event.message


def test_unknown_event_rejected():
    with pytest.raises(TypeError):
        reduce(FormState(), object())
