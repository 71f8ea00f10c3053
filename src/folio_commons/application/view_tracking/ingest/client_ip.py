"""View ingest – client IP resolution behind proxies.

Header priority: ``cf-connecting-ip``, the first public ``x-forwarded-for``
hop, ``x-real-ip``, then the socket peer address. Private, loopback and
link-local addresses never count as the client; when nothing public is found
a placeholder is stored instead.
"""
from __future__ import annotations

import dataclasses
import re
from typing import Any, Iterable, Mapping

__all__ = [
    "DEFAULT_PLACEHOLDER_IP",
    "ClientIp",
    "is_public_ip",
    "normalize_ip",
    "resolve_client_ip",
]

DEFAULT_PLACEHOLDER_IP = "0.0.0.0"

_IPV4_RE = re.compile(r"^\d{1,3}(?:\.\d{1,3}){3}$")
_IPV4_PORT_RE = re.compile(r"^(\d{1,3}(?:\.\d{1,3}){3}):\d+$")
_FOR_PREFIX_RE = re.compile(r"^for=", re.IGNORECASE)


@dataclasses.dataclass(frozen=True)
class ClientIp:
    """Outcome of :func:`resolve_client_ip`.

    ``ip_quality`` is ``"public"`` when ``public_ip`` was found, else
    ``"placeholder"``.
    """

    public_ip: str | None
    storable_ip: str
    ip_quality: str
    debug: dict[str, Any] = dataclasses.field(default_factory=dict)


def normalize_ip(raw: object) -> str | None:
    """Reduce a header or socket value to a bare address, or ``None``."""
    if not raw:
        return None
    ip = str(raw).strip()
    if not ip:
        return None

    if "," in ip:
        ip = ip.split(",")[0].strip()

    ip = _FOR_PREFIX_RE.sub("", ip)
    if ip.startswith('"'):
        ip = ip[1:]
    if ip.endswith('"'):
        ip = ip[:-1]

    if ip.startswith("[") and "]" in ip:
        ip = ip[1:ip.index("]")]

    port_match = _IPV4_PORT_RE.match(ip)
    if port_match:
        ip = port_match.group(1)

    if ip.startswith("::ffff:"):
        ip = ip[len("::ffff:"):]

    return ip or None


def _is_private_ipv4(ip: str) -> bool:
    parts = [int(p) for p in ip.split(".")]
    first, second = parts[0], parts[1]
    return (
        first == 10
        or first == 127
        or (first == 192 and second == 168)
        or (first == 172 and 16 <= second <= 31)
        or (first == 169 and second == 254)
    )


def _is_private_ipv6(ip: str) -> bool:
    lower = ip.lower()
    return lower == "::1" or lower.startswith(("fe80:", "fc", "fd"))


def is_public_ip(ip: str | None) -> bool:
    if not ip:
        return False
    if _IPV4_RE.match(ip):
        return not _is_private_ipv4(ip)
    if ":" in ip:
        return not _is_private_ipv6(ip)
    return False


def _header(headers: Mapping[str, Any], name: str) -> str:
    value = headers.get(name)
    if isinstance(value, (list, tuple)):
        value = value[0] if value else ""
    return value or ""


def _first_public(ips: Iterable[str | None]) -> str | None:
    for ip in ips:
        if is_public_ip(ip):
            return ip
    return None


def resolve_client_ip(
    headers: Mapping[str, Any],
    *,
    remote_addr: str | None = None,
    placeholder: str | None = None,
) -> ClientIp:
    """Pick the client's public address from proxy headers and the peer address."""
    lowered = {str(k).lower(): v for k, v in headers.items()}
    forwarded = [
        ip
        for ip in (normalize_ip(part) for part in _header(lowered, "x-forwarded-for").split(","))
        if ip
    ]
    cf_ip = normalize_ip(_header(lowered, "cf-connecting-ip"))
    real_ip = normalize_ip(_header(lowered, "x-real-ip"))
    peer_ip = normalize_ip(remote_addr)

    public_ip = (
        (cf_ip if is_public_ip(cf_ip) else None)
        or _first_public(forwarded)
        or (real_ip if is_public_ip(real_ip) else None)
        or (peer_ip if is_public_ip(peer_ip) else None)
    )
    storable_ip = public_ip or normalize_ip(placeholder) or DEFAULT_PLACEHOLDER_IP

    return ClientIp(
        public_ip=public_ip,
        storable_ip=storable_ip,
        ip_quality="public" if public_ip else "placeholder",
        debug={
            "forwarded_ips": forwarded,
            "cf_connecting_ip": cf_ip,
            "x_real_ip": real_ip,
            "remote_addr": peer_ip,
        },
    )
