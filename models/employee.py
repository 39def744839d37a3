"""
Employee Record Module

The single entity of the system and its normalization rules.
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass, asdict
from enum import Enum


class Department(Enum):
    """Closed set of departments an employee can belong to"""
    IT = "IT"
    FINANCE = "Finance"
    SECURITY = "Security"


DEPARTMENTS = tuple(dept.value for dept in Department)
DEFAULT_DEPARTMENT = Department.IT.value


# Fields supplied by clients; the id is always server-assigned
EMPLOYEE_FIELDS = ("name", "dept", "active", "number", "email", "address", "photo")


@dataclass
class Employee:
    """
    A stored employee record.

    Lifecycle: created (id assigned) → updated in place (id fixed) → deleted
    """
    id: int
    name: str
    dept: str
    active: bool
    number: str
    email: str
    address: str
    photo: str

    @classmethod
    def from_payload(cls, employee_id: int, data: Dict[str, Any]) -> "Employee":
        """Build a record from a validated payload, normalizing its fields"""
        return cls(id=employee_id, **normalize_fields(data))

    def replace_fields(self, data: Dict[str, Any]):
        """Overwrite every field except the id from a validated payload"""
        for key, value in normalize_fields(data).items():
            setattr(self, key, value)

    def to_dict(self) -> Dict:
        return asdict(self)


def normalize_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalize a validated payload for storage.

    Trims name and address, trims and lower-cases email, coerces number to
    a string and active to a boolean.
    """
    return {
        'name': data['name'].strip(),
        'dept': data['dept'],
        'active': bool(data.get('active')),
        'number': str(data['number']),
        'email': data['email'].strip().lower(),
        'address': data['address'].strip(),
        'photo': data['photo'],
    }


def default_draft() -> Dict[str, Optional[Any]]:
    """Empty form values used by the client before anything is entered"""
    return {
        'name': '',
        'dept': DEFAULT_DEPARTMENT,
        'active': False,
        'number': '',
        'email': '',
        'address': '',
        'photo': None,
    }
