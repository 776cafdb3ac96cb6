"""
Repository URL guard — scheme enforcement and SSRF protection.

A repository URL is only accepted when it is HTTPS (plain HTTP is
allowed for loopback hosts, for local test repositories) and every
address its host resolves to is public.  Private, loopback, link-local
and cloud-metadata addresses are rejected.

The check happens at validation time.  Maven resolves the host again
when it connects, so a DNS-rebinding attacker controlling the zone can
still swap the answer in between; that window is accepted.
"""

from __future__ import annotations

import ipaddress
import logging
import socket
import threading
import time
from collections.abc import Callable, Iterable
from typing import Any
from urllib.parse import urlsplit

from maven_deploy.core.context import RunContext
from maven_deploy.core.errors import ResolutionError, ValidationError

logger = logging.getLogger(__name__)

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

# ── Blocked ranges ──────────────────────────────────────────────
#
# Kept as an explicit list.  Metadata endpoints for new cloud providers
# go in _CLOUD_METADATA_RANGES by hand.

_PRIVATE_RANGES = (
    "10.0.0.0/8",
    "172.16.0.0/12",
    "192.168.0.0/16",
    "127.0.0.0/8",
    "169.254.0.0/16",       # link-local
    "0.0.0.0/8",
)

_CLOUD_METADATA_RANGES = (
    "169.254.169.254/32",   # AWS / GCP / Azure instance metadata
    "fd00:ec2::254/128",    # AWS IMDS over IPv6
)

_LINK_LOCAL_MULTICAST_RANGES = (
    "224.0.0.0/24",
    "ff02::/16",
)

BLOCKED_NETWORKS: tuple[ipaddress.IPv4Network | ipaddress.IPv6Network, ...] = tuple(
    ipaddress.ip_network(cidr)
    for cidr in (*_PRIVATE_RANGES, *_CLOUD_METADATA_RANGES, *_LINK_LOCAL_MULTICAST_RANGES)
)

LOCALHOST_NAMES = frozenset({"localhost", "127.0.0.1", "::1"})

DEFAULT_RESOLVE_TIMEOUT = 5.0
_RESOLVE_POLL_INTERVAL = 0.05

Resolver = Callable[[str], Iterable[str]]


def is_private_ip(ip: str | IPAddress) -> bool:
    """Whether ``ip`` is a private, reserved or metadata address.

    IPv4-mapped IPv6 addresses (``::ffff:10.0.0.1``) are judged by the
    IPv4 address they carry.
    """
    addr = ipaddress.ip_address(ip) if isinstance(ip, str) else ip
    if isinstance(addr, ipaddress.IPv6Address) and addr.ipv4_mapped is not None:
        addr = addr.ipv4_mapped

    if any(addr in network for network in BLOCKED_NETWORKS):
        return True

    return addr.is_loopback or addr.is_link_local or addr.is_private


def resolve_host(
    host: str,
    timeout: float | None = DEFAULT_RESOLVE_TIMEOUT,
    context: RunContext | None = None,
) -> list[str]:
    """Resolve ``host`` to its addresses, giving up after ``timeout`` seconds.

    ``getaddrinfo`` has no timeout of its own, so it runs on a daemon
    thread and the caller waits in short slices.  On timeout or
    cancellation of ``context`` the thread is left behind; being a
    daemon, it never keeps the process alive at exit.

    Raises:
        ResolutionError: lookup failed, timed out or was cancelled.
    """
    if context is not None and context.cancelled:
        raise ResolutionError(f"failed to resolve hostname: lookup of {host} cancelled")

    outcome: dict[str, Any] = {}
    finished = threading.Event()

    def lookup() -> None:
        try:
            outcome["infos"] = socket.getaddrinfo(host, None, 0, socket.SOCK_STREAM)
        except (OSError, UnicodeError) as e:
            outcome["error"] = e
        finally:
            finished.set()

    threading.Thread(target=lookup, name=f"resolve-{host}", daemon=True).start()

    deadline = None if timeout is None else time.monotonic() + timeout
    while not finished.wait(_RESOLVE_POLL_INTERVAL):
        if context is not None and context.cancelled:
            raise ResolutionError(f"failed to resolve hostname: lookup of {host} cancelled")
        if deadline is not None and time.monotonic() >= deadline:
            raise ResolutionError(
                f"failed to resolve hostname: lookup of {host} timed out after {timeout}s"
            )

    if "error" in outcome:
        e = outcome["error"]
        raise ResolutionError(f"failed to resolve hostname: {e}") from e

    # Strip IPv6 zone ids ("fe80::1%eth0") before parsing
    return sorted({info[4][0].split("%", 1)[0] for info in outcome["infos"]})


def validate_repository_url(
    url: str,
    *,
    resolver: Resolver | None = None,
    context: RunContext | None = None,
) -> None:
    """Validate a Maven repository URL.

    Args:
        url: The URL to check. Empty means "not configured" and is valid.
        resolver: Hostname → addresses function. Defaults to ``resolve_host``
            bounded by the context's remaining time.
        context: Optional run context. Its deadline bounds DNS resolution
            and cancelling it aborts the lookup.

    Raises:
        ValidationError: scheme, parse or private-network failure.
        ResolutionError: the host could not be resolved.
    """
    if not url:
        return

    try:
        parsed = urlsplit(url)
        host = parsed.hostname or ""
        parsed.port  # noqa: B018  raises ValueError on a bad port
    except ValueError as e:
        raise ValidationError("repository", f"invalid URL: {e}") from e

    is_localhost = host in LOCALHOST_NAMES

    if parsed.scheme != "https" and not is_localhost:
        raise ValidationError("repository", f"only HTTPS URLs are allowed (got {parsed.scheme})")

    # Loopback traffic never leaves this machine; plain HTTP is fine
    if is_localhost:
        return

    if not host:
        raise ValidationError("repository", "invalid URL: missing host")

    if context is not None and context.cancelled:
        raise ResolutionError(f"failed to resolve hostname: lookup of {host} cancelled")

    if resolver is None:
        timeout = DEFAULT_RESOLVE_TIMEOUT
        if context is not None and context.remaining() is not None:
            timeout = min(timeout, context.remaining())
        addresses = resolve_host(host, timeout=timeout, context=context)
    else:
        try:
            addresses = list(resolver(host))
        except OSError as e:
            raise ResolutionError(f"failed to resolve hostname: {e}") from e

    for address in addresses:
        try:
            private = is_private_ip(address)
        except ValueError as e:
            raise ResolutionError(f"failed to resolve hostname: unparseable address {address!r}") from e
        if private:
            logger.warning("Repository host %s resolves to private address %s", host, address)
            raise ValidationError("repository", "URLs pointing to private networks are not allowed")

    logger.debug("Repository host %s resolved to %s", host, ", ".join(addresses))
