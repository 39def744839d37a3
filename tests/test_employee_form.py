import threading
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from client.controller import EmployeeFormController, CREATED_MESSAGE
from client.state import StatusExpired, SubmitSucceeded
from models.store import EmployeeStore

APP_PATH = str(Path(__file__).resolve().parent.parent / "employee_form.py")


class ListOnlyApi:
    """Serves the employee list straight from a store"""

    def __init__(self):
        self.store = EmployeeStore()

    def list_employees(self):
        return self.store.list_employees()


@pytest.fixture
def app():
    controller = EmployeeFormController(api=ListOnlyApi())
    at = AppTest.from_file(APP_PATH)
    at.session_state["controller"] = controller
    at.session_state["generation"] = 0
    return at, controller


class TestStatusBanner:
    """The status banner follows the controller's status"""

    def test_status_cleared_from_another_thread_leaves_screen(self, app):
        at, controller = app
        state = controller.dispatch(SubmitSucceeded(CREATED_MESSAGE))
        at.run()
        assert [el.value for el in at.success] == [CREATED_MESSAGE]

        # Status timers fire off the script thread
        timer = threading.Thread(target=controller.dispatch, args=(StatusExpired(state.status_serial),))
        timer.start()
        timer.join()

        at.run()
        assert len(at.success) == 0

    def test_empty_list_message(self, app):
        at, _ = app
        at.run()
        assert not at.exception
        assert at.info[0].value == "No employees yet. Create one!"
