# Models package
from .employee import Employee, Department
from .store import EmployeeStore, get_employee_store

__all__ = ["Employee", "Department", "EmployeeStore", "get_employee_store"]
