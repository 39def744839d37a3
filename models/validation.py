"""
Employee Validation Rules

One rule table shared by the API and the form client. Each field has an
ordered list of rules; the first failing rule decides the field's message.
The server reports an ordered list of messages, the client a mapping from
field name to message.
"""

import re
from typing import Any, Callable, Dict, List, Optional
from dataclasses import dataclass

from config import (
    MIN_NAME_LENGTH,
    MAX_NUMBER_DIGITS,
    MAX_PHOTO_BYTES,
    ALLOWED_PHOTO_TYPES,
    PHOTO_MARKER
)
from models.employee import DEPARTMENTS


CLIENT = "client"
SERVER = "server"

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
DIGITS_PATTERN = re.compile(r"[0-9]+")

PHOTO_TYPE_MESSAGE = "Only JPG or PNG images are allowed."
PHOTO_SIZE_MESSAGE = "File too large (max 2MB)."


@dataclass(frozen=True)
class Rule:
    """
    A single check on one field.

    A message of None means the rule is not applied for that audience.
    """
    check: Callable[[Any], bool]
    client_message: Optional[str]
    server_message: Optional[str]

    def message_for(self, audience: str) -> Optional[str]:
        return self.client_message if audience == CLIENT else self.server_message


def _filled(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


NAME_SERVER_MESSAGE = "Name is required and must be at least 2 characters."
EMAIL_SERVER_MESSAGE = "Valid email is required."
NUMBER_SERVER_MESSAGE = "Employee number is required and must contain only digits."
PHOTO_SERVER_MESSAGE = "Valid photo is required."

# Field order is the order messages are reported in
RULES: Dict[str, List[Rule]] = {
    'name': [
        Rule(_filled, "Employee name is required.", NAME_SERVER_MESSAGE),
        Rule(lambda v: len(v.strip()) >= MIN_NAME_LENGTH,
             "Name must be at least 2 characters.", NAME_SERVER_MESSAGE),
    ],
    'email': [
        Rule(_filled, "Email is required.", EMAIL_SERVER_MESSAGE),
        Rule(lambda v: EMAIL_PATTERN.fullmatch(v.strip()) is not None,
             "Please enter a valid email address.", EMAIL_SERVER_MESSAGE),
    ],
    'number': [
        Rule(_filled, "Employee number is required.", NUMBER_SERVER_MESSAGE),
        Rule(lambda v: DIGITS_PATTERN.fullmatch(v) is not None,
             "Employee number must contain only digits.", NUMBER_SERVER_MESSAGE),
        Rule(lambda v: len(v) <= MAX_NUMBER_DIGITS,
             "Employee number too long (max 10 digits).",
             "Employee number is too long (max 10 digits)."),
    ],
    'address': [
        Rule(_filled, "Employee address is required.", "Address is required."),
    ],
    'photo': [
        Rule(lambda v: isinstance(v, str) and v != "",
             "Employee photo is required.", PHOTO_SERVER_MESSAGE),
        # The browser only ever produces data URLs; other clients are checked here
        Rule(lambda v: v.startswith(PHOTO_MARKER), None, PHOTO_SERVER_MESSAGE),
    ],
    'dept': [
        Rule(lambda v: v in DEPARTMENTS,
             "Please choose a valid department.",
             "Department must be one of IT, Finance, Security."),
    ],
}


def evaluate(data: Dict[str, Any], audience: str) -> Dict[str, str]:
    """
    Run every field's rules for one audience.

    Args:
        data: Candidate record, possibly partial or malformed
        audience: CLIENT or SERVER

    Returns:
        Mapping of failing field -> message, in rule-table order
    """
    errors = {}
    for field_name, rules in RULES.items():
        value = data.get(field_name)
        for rule in rules:
            message = rule.message_for(audience)
            if message is None:
                continue
            if not rule.check(value):
                errors[field_name] = message
                break
    return errors


def validate_employee(data: Dict[str, Any]) -> List[str]:
    """Server-side validation: ordered list of error messages"""
    return list(evaluate(data, SERVER).values())


def validate_form(draft: Dict[str, Any]) -> Dict[str, str]:
    """Client-side validation: field name -> message"""
    return evaluate(draft, CLIENT)


def validate_photo_file(content_type: Optional[str], size: int) -> Optional[str]:
    """
    Check a file picked for upload before it is read.

    Returns:
        Error message, or None if the file is acceptable
    """
    if (content_type or "").lower() not in ALLOWED_PHOTO_TYPES:
        return PHOTO_TYPE_MESSAGE
    if size > MAX_PHOTO_BYTES:
        return PHOTO_SIZE_MESSAGE
    return None
