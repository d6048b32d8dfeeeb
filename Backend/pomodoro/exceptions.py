class PomodoroError(Exception):
    """Base for errors the API renders as ``{"error": <message>}``."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StoreUnavailable(PomodoroError):
    """The record store could not be reached or rejected a query."""


class ValidationFailure(PomodoroError):
    status_code = 400


class InvalidSessionId(PomodoroError):
    """A session id that the store cannot interpret."""
