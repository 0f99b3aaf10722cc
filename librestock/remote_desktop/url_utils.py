"""Server URL handling for the remote desktop redirector.

A user types the address of their LibreStock server once; it is normalised
to an origin and remembered so later visits redirect straight there.
"""

import re
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import urlsplit

INVALID_SAVED_URL_MESSAGE = "Saved server URL was invalid. Please enter a new one."
INVALID_URL_FORM_MESSAGE = "Enter a valid URL like http://server:8080"

_EXPLICIT_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
_HOSTNAME = re.compile(r"^[A-Za-z0-9_\-]+(\.[A-Za-z0-9_\-]+)*\.?$")
_DEFAULT_PORTS = {"http": 80, "https": 443}


class UrlStorage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


@dataclass
class StoredUrl:
    url: str | None = None
    error: str | None = None


def normalize_url(value: str | None) -> str | None:
    """Return the http(s) origin for value, or None when it is not a usable URL.

    >>> normalize_url("example.com:8080")
    'http://example.com:8080'
    """
    if value is None:
        return None

    candidate = value.strip()
    if not candidate:
        return None

    lowered = candidate.lower()
    if not (lowered.startswith("http://") or lowered.startswith("https://")):
        # Any other explicit scheme (ftp://, file://, ...) is refused
        if _EXPLICIT_SCHEME.match(candidate):
            return None
        candidate = f"http://{candidate}"

    try:
        parts = urlsplit(candidate)
        port = parts.port
    except ValueError:
        return None

    if any(char.isspace() for char in parts.netloc):
        return None

    host = parts.hostname
    if not host:
        return None

    if ":" in host:
        host = f"[{host}]"
    elif not _HOSTNAME.match(host):
        return None

    scheme = parts.scheme.lower()
    origin = f"{scheme}://{host}"
    if port is not None and port != _DEFAULT_PORTS[scheme]:
        origin = f"{origin}:{port}"

    return origin


def read_stored_url(storage: UrlStorage, key: str) -> StoredUrl:
    raw = storage.get_item(key)
    if not raw:
        return StoredUrl()

    url = normalize_url(raw)
    if url is None:
        storage.remove_item(key)
        return StoredUrl(error=INVALID_SAVED_URL_MESSAGE)

    return StoredUrl(url=url)
