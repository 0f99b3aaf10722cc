import pytest

from librestock.remote_desktop.url_utils import (
    INVALID_SAVED_URL_MESSAGE,
    StoredUrl,
    normalize_url,
    read_stored_url,
)


class MemoryStorage:
    def __init__(self, **items):
        self.items = dict(items)

    def get_item(self, key):
        return self.items.get(key)

    def set_item(self, key, value):
        self.items[key] = value

    def remove_item(self, key):
        self.items.pop(key, None)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("example.com:8080", "http://example.com:8080"),
        ("  http://server:8080/app/login  ", "http://server:8080"),
        ("HTTPS://Example.COM", "https://example.com"),
        ("https://example.com:443", "https://example.com"),
        ("192.168.1.20:3000", "http://192.168.1.20:3000"),
        ("localhost", "http://localhost"),
    ],
)
def test_normalize_valid(value, expected):
    assert normalize_url(value) == expected


@pytest.mark.parametrize(
    "value",
    ["", "   ", None, "ftp://x", "file:///etc/passwd", "not a url", "http://", "host:notaport"],
)
def test_normalize_invalid(value):
    assert normalize_url(value) is None


def test_read_stored_url_nothing_stored():
    assert read_stored_url(MemoryStorage(), "rbi_server_url") == StoredUrl()


def test_read_stored_url_empty_value_counts_as_nothing_stored():
    storage = MemoryStorage(rbi_server_url="")

    assert read_stored_url(storage, "rbi_server_url") == StoredUrl()
    assert storage.items == {"rbi_server_url": ""}


def test_read_stored_url_valid():
    storage = MemoryStorage(rbi_server_url="server:8080")

    result = read_stored_url(storage, "rbi_server_url")

    assert result.url == "http://server:8080"
    assert result.error is None
    assert storage.items == {"rbi_server_url": "server:8080"}


def test_read_stored_url_invalid_is_cleared():
    storage = MemoryStorage(rbi_server_url="ftp://x", other="keep")

    result = read_stored_url(storage, "rbi_server_url")

    assert result.url is None
    assert result.error == INVALID_SAVED_URL_MESSAGE
    assert storage.items == {"other": "keep"}
