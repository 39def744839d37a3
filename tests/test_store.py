from models.store import EmployeeStore, get_employee_store


def payload(**overrides) -> dict:
    data = {
        "name": "Linus",
        "dept": "IT",
        "active": "yes",
        "number": "1",
        "email": "LINUS@Example.org ",
        "address": " Helsinki ",
        "photo": "data:image/png;base64,AAA=",
    }
    data.update(overrides)
    return data


class TestEmployeeStore:
    """Tests for the in-memory record store"""

    def test_create_assigns_increasing_ids(self):
        store = EmployeeStore()
        first = store.create_employee(payload())
        second = store.create_employee(payload())
        assert first['employee']['id'] == 1
        assert second['employee']['id'] == 2

    def test_create_normalizes(self):
        record = EmployeeStore().create_employee(payload())['employee']
        assert record['email'] == "linus@example.org"
        assert record['address'] == "Helsinki"
        assert record['active'] is True

    def test_invalid_create_reports_errors(self):
        store = EmployeeStore()
        result = store.create_employee(payload(name="L", email="nope"))
        assert result['success'] is False
        assert result['reason'] == 'invalid'
        assert result['errors'] == [
            "Name is required and must be at least 2 characters.",
            "Valid email is required.",
        ]
        assert result['message'] == " ".join(result['errors'])
        assert store.count() == 0

    def test_update_unknown_checked_before_validation(self):
        result = EmployeeStore().update_employee(5, {})
        assert result['reason'] == 'not_found'
        assert result['message'] == "Employee not found"

    def test_listed_records_are_copies(self):
        store = EmployeeStore()
        store.create_employee(payload())
        store.list_employees()[0]['name'] = "Changed"
        assert store.list_employees()[0]['name'] == "Linus"

    def test_delete(self):
        store = EmployeeStore()
        store.create_employee(payload())
        assert store.delete_employee(1)['success'] is True
        assert store.delete_employee(1)['reason'] == 'not_found'
        assert store.list_employees() == []

    def test_singleton(self):
        assert get_employee_store() is get_employee_store()
