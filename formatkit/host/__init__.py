"""
Host services for formatkit.

Formatters that need translation, locale-aware numbers or dates, or HTML
transforms ask a host object. When a call does not pass `host=`, the
process-wide default host is used.

Usage:
    from formatkit.host import PlainHost, set_default_host, reset_default_host

    set_default_host(MySiteHost())   # e.g. at application start
    ...
    reset_default_host()             # back to PlainHost (tests)
"""

from __future__ import annotations

import logging
from typing import Optional

from formatkit.core.protocols import HostServicesProtocol
from formatkit.host.plain import PlainHost

logger = logging.getLogger(__name__)

_default_host: Optional[HostServicesProtocol] = None


def get_default_host() -> HostServicesProtocol:
    """Return the process-wide host, creating a PlainHost on first use."""
    global _default_host
    if _default_host is None:
        _default_host = PlainHost()
        logger.debug("Created default host %s", type(_default_host).__name__)
    return _default_host


def set_default_host(host: HostServicesProtocol) -> None:
    """
    Replace the process-wide host.

    Args:
        host: Any object implementing HostServicesProtocol

    Raises:
        TypeError: If `host` lacks part of the protocol
    """
    global _default_host
    if not isinstance(host, HostServicesProtocol):
        raise TypeError(
            f"{type(host).__name__} does not implement HostServicesProtocol"
        )
    _default_host = host


def reset_default_host() -> None:
    """Drop the custom host; the next call builds a fresh PlainHost."""
    global _default_host
    _default_host = None


__all__ = [
    "PlainHost",
    "get_default_host",
    "set_default_host",
    "reset_default_host",
]
