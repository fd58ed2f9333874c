"""Exceptions for the mein-senec.de library."""


class MeinSenecError(Exception):
    """Base exception for mein-senec.de errors."""


class MeinSenecAuthenticationError(MeinSenecError):
    """Raised when the login does not yield a usable token."""


class MeinSenecConnectionError(MeinSenecError):
    """Raised when the API cannot be reached."""


class MeinSenecDataError(MeinSenecError):
    """Raised when the API answers with an unexpected status or payload."""
