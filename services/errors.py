from typing import Optional

from domain.constants import LOGIN_FAILED, SEARCH_FAILED, CREATE_FAILED


class VisitorConsoleError(Exception):
    default_message = "Request failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthError(VisitorConsoleError):
    """Login or registration rejected. The message never says why."""
    default_message = LOGIN_FAILED


class SearchError(VisitorConsoleError):
    default_message = SEARCH_FAILED


class CreateError(VisitorConsoleError):
    default_message = CREATE_FAILED


class NotAuthenticatedError(VisitorConsoleError):
    default_message = "Not authenticated"


class BackendUnavailable(VisitorConsoleError):
    """Transport failure or timeout talking to the backend."""
    default_message = "Backend unavailable"
