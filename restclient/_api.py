"""
One-shot request functions.

Each call opens its own ``Connection`` with an empty base URL, so ``url``
must be fully qualified. The connection is closed before returning and no
state is shared between calls.
"""

from __future__ import annotations

import typing

from ._connection import Connection, RequestContent

if typing.TYPE_CHECKING:
    from ._forms import PostFormInfo
    from ._models import Response

__all__ = [
    "delete",
    "get",
    "head",
    "options",
    "patch",
    "post",
    "post_form",
    "put",
]


def get(url: str) -> Response:
    """Send a ``GET`` request."""
    with Connection("") as conn:
        return conn.get(url)


def post(url: str, content_type: str, data: RequestContent) -> Response:
    """Send a ``POST`` request with ``data`` as a ``content_type`` body."""
    with Connection("") as conn:
        conn.append_header("Content-Type", content_type)
        return conn.post(url, data)


def post_form(url: str, form: PostFormInfo) -> Response:
    """Send ``form`` as a multipart ``POST``.

    The form is not released; it remains owned by the caller.
    """
    with Connection("") as conn:
        return conn.post_form(url, form)


def put(url: str, content_type: str, data: RequestContent) -> Response:
    """Send a ``PUT`` request with ``data`` as a ``content_type`` body."""
    with Connection("") as conn:
        conn.append_header("Content-Type", content_type)
        return conn.put(url, data)


def patch(url: str, content_type: str, data: RequestContent) -> Response:
    """Send a ``PATCH`` request with ``data`` as a ``content_type`` body."""
    with Connection("") as conn:
        conn.append_header("Content-Type", content_type)
        return conn.patch(url, data)


def delete(url: str) -> Response:
    """Send a ``DELETE`` request."""
    with Connection("") as conn:
        return conn.delete(url)


def head(url: str) -> Response:
    """Send a ``HEAD`` request."""
    with Connection("") as conn:
        return conn.head(url)


def options(url: str) -> Response:
    """Send an ``OPTIONS`` request."""
    with Connection("") as conn:
        return conn.options(url)
