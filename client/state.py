"""
Employee Form State

The form's complete state and the events that move it. Every transition is
a pure function of (state, event); network calls, photo decoding and timers
live in the controller, which turns their outcomes into events.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from models.employee import EMPLOYEE_FIELDS, default_draft


SUCCESS = "success"
ERROR = "error"


@dataclass(frozen=True)
class Status:
    """Transient user-facing message"""
    text: str
    severity: str  # SUCCESS or ERROR
    serial: int    # Identifies this message for timed clearing


@dataclass(frozen=True)
class FormState:
    """
    Everything the form shows.

    editing_id is None while creating a new employee.
    """
    draft: Dict[str, Any] = field(default_factory=default_draft)
    errors: Dict[str, str] = field(default_factory=dict)
    employees: List[Dict] = field(default_factory=list)
    editing_id: Optional[int] = None
    status: Optional[Status] = None
    status_serial: int = 0
    pending_delete_id: Optional[int] = None
    viewing: Optional[Dict] = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None


# ==================== Events ====================

@dataclass(frozen=True)
class FieldChanged:
    name: str
    value: Any


@dataclass(frozen=True)
class PhotoPicked:
    """A file was chosen; any previous photo error goes away"""


@dataclass(frozen=True)
class PhotoRejected:
    message: str


@dataclass(frozen=True)
class PhotoLoaded:
    data_url: str


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class FormValidated:
    errors: Dict[str, str]


@dataclass(frozen=True)
class SubmitSucceeded:
    message: str


@dataclass(frozen=True)
class SubmitFailed:
    message: str


@dataclass(frozen=True)
class ListLoaded:
    employees: List[Dict]


@dataclass(frozen=True)
class BeginEdit:
    employee: Dict


@dataclass(frozen=True)
class RequestDelete:
    employee_id: int


@dataclass(frozen=True)
class CancelDelete:
    pass


@dataclass(frozen=True)
class DeleteSucceeded:
    message: str


@dataclass(frozen=True)
class DeleteFailed:
    message: str


@dataclass(frozen=True)
class ViewEmployee:
    employee: Dict


@dataclass(frozen=True)
class CloseView:
    pass


@dataclass(frozen=True)
class ResetForm:
    pass


@dataclass(frozen=True)
class StatusExpired:
    serial: int


# ==================== Transitions ====================

def _without_error(errors: Dict[str, str], name: str) -> Dict[str, str]:
    if name not in errors:
        return errors
    return {key: value for key, value in errors.items() if key != name}


def _with_status(state: FormState, text: str, severity: str) -> FormState:
    serial = state.status_serial + 1
    return replace(state, status=Status(text, severity, serial), status_serial=serial)


def _reset(state: FormState) -> FormState:
    return replace(state, draft=default_draft(), editing_id=None, errors={})


def reduce(state: FormState, event) -> FormState:
    """
    Apply one event to the form state

    Args:
        state: Current state (never modified)
        event: One of the event classes above

    Returns:
        The new state
    """
    if isinstance(event, FieldChanged):
        draft = {**state.draft, event.name: event.value}
        return replace(state, draft=draft, errors=_without_error(state.errors, event.name))

    if isinstance(event, PhotoPicked):
        return replace(state, errors=_without_error(state.errors, 'photo'))

    if isinstance(event, PhotoRejected):
        return replace(state, errors={**state.errors, 'photo': event.message})

    if isinstance(event, PhotoLoaded):
        return replace(state, draft={**state.draft, 'photo': event.data_url})

    if isinstance(event, SubmitStarted):
        return replace(state, status=None)

    if isinstance(event, FormValidated):
        return replace(state, errors=dict(event.errors))

    if isinstance(event, SubmitSucceeded):
        return _reset(_with_status(state, event.message, SUCCESS))

    if isinstance(event, SubmitFailed):
        return _with_status(state, event.message, ERROR)

    if isinstance(event, ListLoaded):
        return replace(state, employees=list(event.employees))

    if isinstance(event, BeginEdit):
        # Copied from the cached list snapshot, photo included
        draft = {name: event.employee.get(name) for name in EMPLOYEE_FIELDS}
        return replace(state, draft=draft, editing_id=event.employee['id'], errors={})

    if isinstance(event, RequestDelete):
        return replace(state, pending_delete_id=event.employee_id)

    if isinstance(event, CancelDelete):
        return replace(state, pending_delete_id=None)

    if isinstance(event, DeleteSucceeded):
        return replace(_with_status(state, event.message, SUCCESS), pending_delete_id=None)

    if isinstance(event, DeleteFailed):
        return replace(_with_status(state, event.message, ERROR), pending_delete_id=None)

    if isinstance(event, ViewEmployee):
        return replace(state, viewing=event.employee)

    if isinstance(event, CloseView):
        return replace(state, viewing=None)

    if isinstance(event, ResetForm):
        return _reset(state)

    if isinstance(event, StatusExpired):
        # A newer message outlives the timer of an older one
        if state.status is not None and state.status.serial == event.serial:
            return replace(state, status=None)
        return state

    raise TypeError(f"Unknown form event: {event!r}")
