"""Shared exceptions module."""

from typing import Optional


class ProntoException(Exception):
    """Base exception for the Pronto client."""

    pass


class EventConstructionError(ProntoException):
    """Exception raised when an analytics event payload is malformed."""

    def __init__(self, event_name: str, message: Optional[str] = "Malformed event payload"):
        """Create a new EventConstructionError instance.

        Args:
        ----
            event_name (str): Name of the event that could not be built.
            message (str, optional): The error message. Has default message.

        """
        self.event_name = event_name
        self.message = message
        super().__init__(f"{event_name}: {message}")


class InvalidCredentialsError(ProntoException):
    """Exception raised when analytics credentials fail validation."""

    def __init__(self, message: Optional[str] = "Invalid analytics credentials"):
        """Create a new InvalidCredentialsError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)
