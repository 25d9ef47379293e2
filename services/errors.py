"""
Student Roster TUI - Errors
"""

from typing import Optional


class RosterError(Exception):
    """Base class for roster application errors."""


class NetworkError(RosterError):
    """
    Any failed exchange with the student service.

    Connection failures, non-success HTTP statuses and undecodable bodies all
    land here; callers do not distinguish between them.
    """

    def __init__(self, operation: str, message: str, status_code: Optional[int] = None):
        self.operation = operation
        self.status_code = status_code
        super().__init__(f"{operation} failed: {message}")
