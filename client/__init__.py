# Form client package
from .controller import EmployeeFormController
from .api_client import EmployeeApiClient

__all__ = ["EmployeeFormController", "EmployeeApiClient"]
