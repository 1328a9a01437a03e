"""
Custom exceptions for the Session Auth API.
Each class maps to one HTTP status in the exception handler.
"""


class SessionAuthException(Exception):
    """Base exception for all application errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationException(SessionAuthException):
    """Raised when a request is malformed or missing fields."""
    pass


class AuthenticationException(SessionAuthException):
    """Raised when credentials or a session are rejected."""
    pass


class InternalException(SessionAuthException):
    """Raised on unexpected failures; the message is logged, never returned."""
    pass


class DynamoDBException(InternalException):
    """Raised when a user store operation fails."""
    pass
