"""
DesiFit API - Custom Exception Classes.

Errors raised by services and turned into JSON responses by the handler in
``main.py``.
"""

from typing import Optional


class DesiFitException(Exception):
    """
    Base for errors the API reports to clients.

    Subclasses set ``default_message`` and ``status_code``. ``detail`` holds
    diagnostic text (provider errors, schema violations) that is logged; it
    falls back to the message when not given.
    """

    default_message = "An error occurred"
    status_code = 500

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        detail: Optional[str] = None
    ):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.detail = detail or self.message
        super().__init__(self.message)


class ConfigurationError(DesiFitException):
    """No GEMINI_API_KEY configured; raised before any network call."""

    default_message = "API Key is missing."
    status_code = 503


class ProviderError(DesiFitException):
    """
    The plan provider failed.

    Covers network and API failures, an empty response body, unparseable
    JSON and responses that do not conform to the plan schema.
    """

    default_message = "Plan generation failed"
    status_code = 502


class ValidationRejection(DesiFitException):
    """
    Out-of-range weight log input.

    The weight log catches this itself and treats the request as a no-op.
    """

    default_message = "Weight out of range"
    status_code = 422
