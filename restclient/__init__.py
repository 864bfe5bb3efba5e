# ruff: noqa: I001
from .__version__ import __description__, __title__, __version__
from ._api import delete, get, head, options, patch, post, post_form, put
from ._connection import FAILURE_CODE, TIMEOUT_CODE, Connection
from ._exceptions import FormError, RestClientError
from ._forms import FormField, PostFormInfo
from ._global import disable, init, is_initialized
from ._models import RequestInfo, Response, ResponseHeaders

try:
    from .cli import main
except ImportError:

    def main() -> None:  # type: ignore[misc]
        import sys

        print(
            'The "restclient" command requires the CLI extra. '
            'Install it with: pip install "restclient[cli]"',
            file=sys.stderr,
        )
        sys.exit(1)


_EXCLUDED_FROM_ALL = {"cli", "main"}

__all__ = sorted(
    (
        member
        for member in list(vars().keys())
        if (
            not member.startswith("_")
            or member in ["__description__", "__title__", "__version__"]
        )
        and member not in _EXCLUDED_FROM_ALL
    ),
    key=str.casefold,
)
