"""
Process-wide transport state.

``init()`` builds the TLS context shared by every ``Connection``;
``disable()`` drops it again. Call ``init()`` once before starting any
threads and ``disable()`` once after all requests have finished. Neither is
safe to call while requests are in flight.
"""

from __future__ import annotations

import logging
import ssl

import certifi

from ._config import get_settings

logger = logging.getLogger("restclient")

_ssl_context: ssl.SSLContext | None = None


def init() -> int:
    """Prepare the shared transport state. Returns ``0`` on success, ``1`` on failure."""
    global _ssl_context

    ca_bundle = get_settings().ca_bundle
    cafile = str(ca_bundle) if ca_bundle is not None else certifi.where()
    try:
        context = ssl.create_default_context(cafile=cafile)
    except (OSError, ssl.SSLError) as exc:
        logger.error("restclient: global init failed loading %s: %s", cafile, exc)
        return 1

    _ssl_context = context
    logger.info("restclient: global init done (ca bundle %s)", cafile)
    return 0


def disable() -> None:
    """Release the shared transport state."""
    global _ssl_context

    if _ssl_context is None:
        return
    _ssl_context = None
    logger.info("restclient: global state released")


def is_initialized() -> bool:
    return _ssl_context is not None


def ssl_verify() -> ssl.SSLContext | bool:
    """TLS verification setting for a new transport client."""
    if _ssl_context is None:
        return True
    return _ssl_context
