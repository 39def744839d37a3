"""
HTTP client for the employee API
"""
from typing import Dict, List, Optional

import requests

from config import API_BASE_URL, REQUEST_TIMEOUT


class EmployeeApiClient:
    """
    Thin wrapper over the /api/employees endpoints.

    Transport failures surface as requests.RequestException; HTTP error
    statuses are returned as-is for the caller to interpret.
    """

    def __init__(self, base_url: str = None, timeout: float = None,
                 session: Optional[requests.Session] = None):
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        self.timeout = timeout or REQUEST_TIMEOUT
        self.session = session or requests.Session()

    def _url(self, employee_id: int = None) -> str:
        if employee_id is None:
            return f"{self.base_url}/employees"
        return f"{self.base_url}/employees/{employee_id}"

    def list_employees(self) -> List[Dict]:
        response = self.session.get(self._url(), timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def create_employee(self, fields: Dict) -> requests.Response:
        return self.session.post(self._url(), json=fields, timeout=self.timeout)

    def update_employee(self, employee_id: int, fields: Dict) -> requests.Response:
        return self.session.put(self._url(employee_id), json=fields, timeout=self.timeout)

    def delete_employee(self, employee_id: int) -> requests.Response:
        return self.session.delete(self._url(employee_id), timeout=self.timeout)
