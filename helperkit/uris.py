from __future__ import annotations

from urllib.parse import SplitResult, urlsplit, urlunsplit

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}


def _split(url: str | SplitResult) -> SplitResult:
    parts = url if isinstance(url, SplitResult) else urlsplit(str(url))
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"not an absolute URL: {url!r}")
    return parts


def _authority(parts: SplitResult) -> str:
    # Host and non-default port only; userinfo is dropped.
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    if port is None or _DEFAULT_PORTS.get(parts.scheme.lower()) == port:
        return host
    return f"{host}:{port}"


def as_friendly_name(url: str | SplitResult) -> str:
    """Host name without a leading 'www.'."""
    host = _split(url).hostname or ""
    while host.startswith("www."):
        host = host[len("www."):]
    return host


def root(url: str | SplitResult) -> str:
    """Scheme, host and port: 'https://www.mysite.com'."""
    parts = _split(url)
    return urlunsplit((parts.scheme, _authority(parts), "", "", ""))


def base(url: str | SplitResult) -> str:
    """Root plus path, without query or fragment."""
    parts = _split(url)
    return urlunsplit((parts.scheme, _authority(parts), parts.path, "", ""))
