"""
Employee Form Controller

Owns the form state and performs its side effects:
- HTTP calls to the employee API
- Photo decoding on a worker thread
- Clearing status messages after a display window
"""

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Dict, List, Optional

import requests

from config import SUCCESS_MESSAGE_SECONDS, DELETE_MESSAGE_SECONDS
from models.validation import validate_form, validate_photo_file
from client.api_client import EmployeeApiClient
from client.photo import PhotoFile
from client import state as form


logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error. Is backend running?"
GENERIC_ERROR_MESSAGE = "Something went wrong."
CREATED_MESSAGE = "Employee created successfully!"
UPDATED_MESSAGE = "Employee updated successfully!"
DELETED_MESSAGE = "Employee deleted!"
DELETE_FAILED_MESSAGE = "Failed to delete employee"
PHOTO_READ_MESSAGE = "Could not read the selected photo."


def start_timer(delay: float, callback: Callable[[], None]):
    """Run callback once after delay seconds on a daemon timer thread"""
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class EmployeeFormController:
    """
    Drives the employee form.

    All state changes go through dispatch(), which applies the pure reducer
    in client.state and notifies listeners. The controller never blocks on
    photo decoding; the draft shows the photo once decoding completes.
    """

    def __init__(
        self,
        api: EmployeeApiClient = None,
        executor: Executor = None,
        schedule: Callable[[float, Callable[[], None]], object] = None,
        success_seconds: float = None,
        delete_seconds: float = None
    ):
        """
        Args:
            api: Employee API client
            executor: Runs photo decoding (default: one worker thread)
            schedule: schedule(delay, callback) for status clearing
            success_seconds: Display window after create/update
            delete_seconds: Display window after delete
        """
        self.api = api or EmployeeApiClient()
        self.executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="photo")
        self.schedule = schedule or start_timer
        self.success_seconds = SUCCESS_MESSAGE_SECONDS if success_seconds is None else success_seconds
        self.delete_seconds = DELETE_MESSAGE_SECONDS if delete_seconds is None else delete_seconds

        self._state = form.FormState()
        self._lock = threading.RLock()
        self._listeners: List[Callable[[form.FormState], None]] = []

    @property
    def state(self) -> form.FormState:
        return self._state

    def subscribe(self, listener: Callable[[form.FormState], None]):
        """Call listener with the new state after every change"""
        self._listeners.append(listener)

    def dispatch(self, event) -> form.FormState:
        with self._lock:
            self._state = form.reduce(self._state, event)
            new_state = self._state
        for listener in self._listeners:
            listener(new_state)
        return new_state

    # ==================== List ====================

    def refresh(self) -> bool:
        """
        Reload the employee list from the server

        Returns:
            True if the list was replaced; on failure the old list stays
        """
        try:
            employees = self.api.list_employees()
        except (requests.RequestException, ValueError) as e:
            logger.error("Failed to load employees: %s", e)
            return False
        self.dispatch(form.ListLoaded(employees))
        return True

    # ==================== Form fields ====================

    def change_field(self, name: str, value):
        self.dispatch(form.FieldChanged(name, value))

    def select_photo(self, photo: Optional[PhotoFile]) -> Optional[Future]:
        """
        Check a picked file and start decoding it into a data URL

        Returns:
            Future for the decoding, or None if nothing was decoded
        """
        if photo is None:
            return None

        self.dispatch(form.PhotoPicked())

        error = validate_photo_file(photo.content_type, photo.size)
        if error:
            self.dispatch(form.PhotoRejected(error))
            return None

        return self.executor.submit(self._load_photo, photo)

    def _load_photo(self, photo: PhotoFile) -> Optional[str]:
        """Decode on the worker; the future resolves only after the draft is updated"""
        try:
            data_url = photo.to_data_url()
        except Exception as e:
            logger.error("Failed to read photo %s: %s", photo.filename, e)
            self.dispatch(form.PhotoRejected(PHOTO_READ_MESSAGE))
            return None
        self.dispatch(form.PhotoLoaded(data_url))
        return data_url

    def reset(self):
        self.dispatch(form.ResetForm())

    # ==================== Submit ====================

    def submit(self) -> bool:
        """
        Validate the draft and create or update the employee

        Returns:
            True if the server accepted the record
        """
        self.dispatch(form.SubmitStarted())

        errors = validate_form(self._state.draft)
        self.dispatch(form.FormValidated(errors))
        if errors:
            return False

        editing_id = self._state.editing_id
        fields = dict(self._state.draft)
        try:
            if editing_id is None:
                response = self.api.create_employee(fields)
            else:
                response = self.api.update_employee(editing_id, fields)
        except requests.RequestException as e:
            logger.error("Submit failed: %s", e)
            self.dispatch(form.SubmitFailed(NETWORK_ERROR_MESSAGE))
            return False

        if not response.ok:
            self.dispatch(form.SubmitFailed(self._error_text(response)))
            return False

        message = CREATED_MESSAGE if editing_id is None else UPDATED_MESSAGE
        state = self.dispatch(form.SubmitSucceeded(message))
        self.refresh()
        self._clear_status_later(state.status_serial, self.success_seconds)
        return True

    @staticmethod
    def _error_text(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return GENERIC_ERROR_MESSAGE
        if isinstance(body, dict) and body.get('error'):
            return str(body['error'])
        return GENERIC_ERROR_MESSAGE

    # ==================== Edit / View ====================

    def begin_edit(self, employee: Dict):
        self.dispatch(form.BeginEdit(employee))

    def view(self, employee: Dict):
        self.dispatch(form.ViewEmployee(employee))

    def close_view(self):
        self.dispatch(form.CloseView())

    # ==================== Delete ====================

    def request_delete(self, employee_id: int):
        self.dispatch(form.RequestDelete(employee_id))

    def cancel_delete(self):
        self.dispatch(form.CancelDelete())

    def confirm_delete(self) -> bool:
        """
        Delete the employee awaiting confirmation

        Returns:
            True if the server deleted it
        """
        employee_id = self._state.pending_delete_id
        if employee_id is None:
            return False

        try:
            response = self.api.delete_employee(employee_id)
            deleted = response.ok
            if not deleted:
                logger.error("Delete of employee %s failed with HTTP %s", employee_id, response.status_code)
        except requests.RequestException as e:
            logger.error("Delete of employee %s failed: %s", employee_id, e)
            deleted = False

        if not deleted:
            self.dispatch(form.DeleteFailed(DELETE_FAILED_MESSAGE))
            return False

        state = self.dispatch(form.DeleteSucceeded(DELETED_MESSAGE))
        self.refresh()
        self._clear_status_later(state.status_serial, self.delete_seconds)
        return True

    def _clear_status_later(self, serial: int, delay: float):
        self.schedule(delay, lambda: self.dispatch(form.StatusExpired(serial)))

    def close(self):
        """Stop the photo worker"""
        self.executor.shutdown(wait=False)
