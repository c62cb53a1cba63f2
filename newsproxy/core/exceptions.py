"""Exceptions raised by the news proxy handlers."""

from newsproxy.core.retry_config import ErrorCategory


class ClientInputError(Exception):
    """Missing or invalid request parameters; answered with 400 before any upstream call."""

    kind = ErrorCategory.CLIENT_INPUT
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
