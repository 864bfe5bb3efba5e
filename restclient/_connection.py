from __future__ import annotations

import logging
import time
import typing
from contextlib import ExitStack

import httpx

from ._config import get_settings
from ._global import ssl_verify
from ._models import RequestInfo, Response, ResponseHeaders
from .__version__ import __version__

if typing.TYPE_CHECKING:
    from types import TracebackType

    from ._forms import PostFormInfo

logger = logging.getLogger("restclient.connection")

TIMEOUT_CODE = 28
FAILURE_CODE = -1

_TRANSPORT_FAILURES = (httpx.RequestError, httpx.InvalidURL)

RequestContent = typing.Union[str, bytes]


class Connection:
    """A single-owner HTTP connection built on an ``httpx.Client``.

    Request URLs are ``base_url + url``; no URL joining or parsing is done
    here. Redirects are never followed. Transport failures are reported as a
    ``Response`` with ``code`` set to ``TIMEOUT_CODE`` or ``FAILURE_CODE``.
    """

    def __init__(self, base_url: str = "") -> None:
        settings = get_settings()
        self.base_url = base_url
        self._headers = httpx.Headers()
        self._timeout: float | None = settings.timeout_seconds or None
        self._user_agent = _build_user_agent(settings.user_agent)
        self._info = RequestInfo()
        self._client: httpx.Client | None = httpx.Client(
            verify=ssl_verify(),
            follow_redirects=False,
            trust_env=False,
        )

    def __enter__(self) -> Connection:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None = None,
        exc_value: BaseException | None = None,
        traceback: TracebackType | None = None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._client is None:
            return
        self._client.close()
        self._client = None

    @property
    def is_closed(self) -> bool:
        return self._client is None

    # -- configuration ------------------------------------------------------

    def append_header(self, name: str, value: str) -> None:
        """Set ``name`` for every following request, replacing any earlier value."""
        self._headers[name] = value

    def set_headers(self, headers: typing.Mapping[str, str]) -> None:
        self._headers = httpx.Headers(headers)

    def get_headers(self) -> httpx.Headers:
        return self._headers.copy()

    def set_timeout(self, seconds: float | None) -> None:
        self._timeout = seconds or None

    def set_user_agent(self, user_agent: str) -> None:
        self._user_agent = _build_user_agent(user_agent)

    def get_user_agent(self) -> str:
        return self._user_agent

    def get_info(self) -> RequestInfo:
        return self._info

    # -- requests -----------------------------------------------------------

    def get(self, url: str) -> Response:
        return self._perform("GET", url)

    def post(self, url: str, data: RequestContent) -> Response:
        return self._perform("POST", url, content=data)

    def put(self, url: str, data: RequestContent) -> Response:
        return self._perform("PUT", url, content=data)

    def patch(self, url: str, data: RequestContent) -> Response:
        return self._perform("PATCH", url, content=data)

    def delete(self, url: str) -> Response:
        return self._perform("DELETE", url)

    def head(self, url: str) -> Response:
        return self._perform("HEAD", url)

    def options(self, url: str) -> Response:
        return self._perform("OPTIONS", url)

    def post_form(self, url: str, form: PostFormInfo) -> Response:
        """POST ``form`` as multipart/form-data. ``form`` stays owned by the caller."""
        with ExitStack() as stack:
            files = form.open_files(stack)
            return self._perform("POST", url, files=files)

    def _perform(self, method: str, url: str, **kwargs: typing.Any) -> Response:
        if self._client is None:
            raise RuntimeError("Cannot send a request, as the connection has been closed.")

        target = self.base_url + url
        headers = self._headers.copy()
        headers["User-Agent"] = self._user_agent
        if "content" in kwargs and isinstance(kwargs["content"], str):
            kwargs["content"] = kwargs["content"].encode("utf-8")

        logger.debug("%s %s", method, target)
        start = time.monotonic()
        try:
            resp = self._client.request(
                method,
                target,
                headers=headers,
                timeout=httpx.Timeout(self._timeout),
                **kwargs,
            )
        except httpx.TimeoutException as exc:
            logger.warning("%s %s timed out: %s", method, target, exc)
            result = Response(code=TIMEOUT_CODE, body="Operation Timeout.")
        except _TRANSPORT_FAILURES as exc:
            logger.warning("%s %s failed: %s", method, target, exc)
            result = Response(code=FAILURE_CODE, body=_describe_failure(exc))
        else:
            result = Response(
                code=resp.status_code,
                body=resp.text,
                headers=ResponseHeaders(resp.headers),
                content=resp.content,
            )
            logger.debug("%s %s -> %d", method, target, resp.status_code)

        self._info = RequestInfo(
            effective_url=target,
            total_time=time.monotonic() - start,
            code=result.code,
        )
        return result


def _build_user_agent(prefix: str) -> str:
    base = f"restclient/{__version__}"
    return f"{prefix} {base}" if prefix else base


def _describe_failure(exc: Exception) -> str:
    detail = str(exc) or type(exc).__name__
    return f"Failed to query. {detail}"
