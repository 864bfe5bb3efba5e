from __future__ import annotations

import mimetypes
import os
import typing
import weakref
from contextlib import ExitStack
from dataclasses import dataclass

from ._exceptions import FormError

if typing.TYPE_CHECKING:
    from types import TracebackType


@dataclass(frozen=True)
class FormField:
    """One multipart part: either literal ``value`` or a ``file_path`` read on submit."""

    name: str
    value: bytes | None = None
    file_path: str | None = None

    @property
    def is_file(self) -> bool:
        return self.file_path is not None


def _release(chain: list[FormField]) -> None:
    chain.clear()


class PostFormInfo:
    """Builder for a multipart/form-data body.

    Fields are submitted in the order they were appended. The builder owns
    its field chain and releases it exactly once, on ``close()``, on leaving
    a ``with`` block, or when it is garbage collected, whichever comes first.

    >>> with PostFormInfo() as form:
    ...     form.add_form_content("title", "report")
    ...     form.add_form_file("upload", "report.pdf")
    ...     response = restclient.post_form(url, form)
    """

    def __init__(self) -> None:
        self._chain: list[FormField] | None = None
        self._last: FormField | None = None
        self._finalizer: weakref.finalize | None = None
        self._released = False

    def __enter__(self) -> PostFormInfo:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None = None,
        exc_value: BaseException | None = None,
        traceback: TracebackType | None = None,
    ) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._chain) if self._chain else 0

    def __repr__(self) -> str:
        state = "released" if self._released else f"{len(self)} fields"
        return f"<PostFormInfo [{state}]>"

    @property
    def released(self) -> bool:
        return self._released

    @property
    def fields(self) -> tuple[FormField, ...]:
        return tuple(self._chain or ())

    def add_form_file(self, field_name: str, file_path: str | os.PathLike[str]) -> None:
        """Append a ``file`` input whose contents are read from ``file_path`` on submit."""
        self._check_appendable(field_name)
        path = os.fspath(file_path)
        if not os.path.isfile(path):
            raise FormError(f"form file for {field_name!r} is not a regular file: {path}")
        if not os.access(path, os.R_OK):
            raise FormError(f"form file for {field_name!r} is not readable: {path}")
        self._append(FormField(name=field_name, file_path=path))

    def add_form_content(self, field_name: str, value: str | bytes | bytearray) -> None:
        """Append a plain input (``text``, ``hidden``, ``submit``...) with a literal value."""
        self._check_appendable(field_name)
        if isinstance(value, str):
            data = value.encode("utf-8")
        elif isinstance(value, (bytes, bytearray, memoryview)):
            data = bytes(value)
        else:
            raise FormError(
                f"form content for {field_name!r} must be str or bytes, "
                f"got {type(value).__name__}"
            )
        self._append(FormField(name=field_name, value=data))

    def close(self) -> None:
        """Release the field chain. Safe to call more than once."""
        if self._released:
            return
        self._released = True
        if self._finalizer is not None:
            self._finalizer()
            self._finalizer = None
        self._chain = None
        self._last = None

    release = close

    def _check_appendable(self, field_name: str) -> None:
        if self._released:
            raise FormError("cannot add a field to a released form")
        if not field_name:
            raise FormError("form field name must not be empty")

    def _append(self, field: FormField) -> None:
        if self._chain is None:
            self._chain = []
            self._finalizer = weakref.finalize(self, _release, self._chain)
        self._chain.append(field)
        self._last = field

    def open_files(self, stack: ExitStack) -> list[tuple[str, tuple[typing.Any, ...]]]:
        """Render the chain as an ordered httpx ``files`` list.

        File handles are registered on ``stack`` so the caller closes them
        once the request has been sent.
        """
        if self._released:
            raise FormError("cannot submit a released form")

        parts: list[tuple[str, tuple[typing.Any, ...]]] = []
        for field in self._chain or ():
            if field.file_path is None:
                parts.append((field.name, (None, field.value)))
                continue
            try:
                handle = stack.enter_context(open(field.file_path, "rb"))
            except OSError as exc:
                raise FormError(
                    f"form file for {field.name!r} could not be opened: {exc}"
                ) from exc
            filename = os.path.basename(field.file_path)
            content_type = (
                mimetypes.guess_type(filename)[0] or "application/octet-stream"
            )
            parts.append((field.name, (filename, handle, content_type)))
        return parts
