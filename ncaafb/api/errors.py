"""Exceptions raised by the NCAA football API layer.

Transport and body-read failures are not wrapped: they surface as the
``requests`` exceptions raised by the session.
"""

from typing import Optional

import requests


class NCAAFBError(Exception):
    """Base class for errors raised by this package."""


class APIStatusError(NCAAFBError):
    """Raised when the API answers with anything other than HTTP 200."""

    def __init__(
        self,
        status_code: int,
        request: Optional[requests.PreparedRequest] = None,
        response: Optional[requests.Response] = None,
    ):
        self.status_code = status_code
        self.request = request
        self.response = response
        super().__init__(
            f"API Status Returned Code {status_code}.\n"
            f"Request: {_describe_request(request)}\n"
            f"Response: {_describe_response(response)}\n"
        )


class SchemaError(NCAAFBError, ValueError):
    """Raised when a well-formed XML body does not match the expected document."""

    def __init__(self, expected: str, actual: str, message: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        super().__init__(message or f"Expected <{expected}> document, got <{actual}>")


def _describe_request(request: Optional[requests.PreparedRequest]) -> str:
    if request is None:
        return "None"
    return f"{request.method} {request.url} headers={dict(request.headers)}"


def _describe_response(response: Optional[requests.Response]) -> str:
    if response is None:
        return "None"
    return (
        f"{response.status_code} {response.reason} url={response.url} "
        f"headers={dict(response.headers)}"
    )
