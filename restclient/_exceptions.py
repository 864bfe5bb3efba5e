from __future__ import annotations


class RestClientError(Exception):
    """Base class for errors raised by restclient itself.

    Transport failures are not raised; they come back as a ``Response``
    carrying a sentinel code.
    """


class FormError(RestClientError):
    """A multipart form field could not be added or the form was misused."""
