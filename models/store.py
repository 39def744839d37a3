"""
Employee Record Store

Volatile, single-process storage for employee records.
"""

import logging
from collections import OrderedDict
from typing import Dict, List, Optional

from models.employee import Employee
from models.validation import validate_employee

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Employee not found"


class EmployeeStore:
    """
    In-memory store of employee records.

    Records are kept in insertion order keyed by id. Ids come from a
    monotonic counter and are never reused, even after deletions.
    """

    def __init__(self):
        self._records: "OrderedDict[int, Employee]" = OrderedDict()
        self._next_id = 1

    def list_employees(self) -> List[Dict]:
        """
        Get all employee records

        Returns:
            List of record dictionaries in insertion order
        """
        return [record.to_dict() for record in self._records.values()]

    def count(self) -> int:
        """Get total number of stored employees"""
        return len(self._records)

    def create_employee(self, data: Dict) -> Dict:
        """
        Validate and store a new employee

        Args:
            data: Employee fields (any id supplied is ignored)

        Returns:
            Dictionary with operation result; 'employee' holds the stored record
        """
        errors = validate_employee(data)
        if errors:
            logger.warning("Rejected new employee: %s", " ".join(errors))
            return self._invalid(errors)

        record = Employee.from_payload(self._next_id, data)
        self._next_id += 1
        self._records[record.id] = record

        logger.info("Created employee %d (%s)", record.id, record.name)
        return {
            'success': True,
            'message': f'Employee {record.id} created',
            'employee': record.to_dict()
        }

    def update_employee(self, employee_id: int, data: Dict) -> Dict:
        """
        Replace every field of an existing employee except its id

        Args:
            employee_id: Record identifier
            data: Full replacement fields, validated like a new record

        Returns:
            Dictionary with operation result
        """
        record = self._records.get(employee_id)
        if record is None:
            return self._not_found(employee_id)

        errors = validate_employee(data)
        if errors:
            logger.warning("Rejected update of employee %d: %s", employee_id, " ".join(errors))
            return self._invalid(errors)

        record.replace_fields(data)

        logger.info("Updated employee %d", employee_id)
        return {
            'success': True,
            'message': f'Employee {employee_id} updated',
            'employee': record.to_dict()
        }

    def delete_employee(self, employee_id: int) -> Dict:
        """
        Remove an employee

        Args:
            employee_id: Record identifier

        Returns:
            Dictionary with operation result
        """
        if self._records.pop(employee_id, None) is None:
            return self._not_found(employee_id)

        logger.info("Deleted employee %d", employee_id)
        return {
            'success': True,
            'message': f'Employee {employee_id} deleted'
        }

    def _not_found(self, employee_id: int) -> Dict:
        logger.info("Employee %s not found", employee_id)
        return {
            'success': False,
            'reason': 'not_found',
            'message': NOT_FOUND_MESSAGE
        }

    @staticmethod
    def _invalid(errors: List[str]) -> Dict:
        return {
            'success': False,
            'reason': 'invalid',
            'message': " ".join(errors),
            'errors': errors
        }


# Singleton instance for reuse
_store_instance: Optional[EmployeeStore] = None


def get_employee_store() -> EmployeeStore:
    """
    Get or create the process-wide EmployeeStore instance
    """
    global _store_instance
    if _store_instance is None:
        _store_instance = EmployeeStore()
    return _store_instance
