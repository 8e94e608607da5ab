"""
Exceptions raised by the contact relay.

Only ValidationError changes what the caller sees. DispatchError is raised by
the notification clients and is logged and swallowed by the relay.
"""

from typing import Optional


REQUIRED_FIELDS_MESSAGE = "Name, email, and message are required."
GENERIC_FAILURE_MESSAGE = "Unable to process your request. Please try again later."


class ContactError(Exception):
    """Base class for contact relay errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ContactError):
    """A required field (name, email or message) is missing or empty"""

    def __init__(self, message: str = REQUIRED_FIELDS_MESSAGE):
        super().__init__(message)


class DispatchError(ContactError):
    """An outbound notification (CRM or email) could not be delivered"""

    def __init__(self, channel: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.channel = channel
        self.status_code = status_code

    def __str__(self):
        if self.status_code is not None:
            return f"{self.channel}: {self.message} (status {self.status_code})"
        return f"{self.channel}: {self.message}"
