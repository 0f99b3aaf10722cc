# librestock/remote_desktop/storage.py

from fastapi import Request, Response

# One year
COOKIE_MAX_AGE = 60 * 60 * 24 * 365


class CookieStorage:
    """Key/value storage over the request's cookies.

    Writes are collected and only reach the browser once apply() is called
    on the outgoing response.
    """

    def __init__(self, request: Request):
        self._values = dict(request.cookies)
        self._pending_set: dict[str, str] = {}
        self._pending_remove: set[str] = set()

    def get_item(self, key: str) -> str | None:
        return self._values.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._values[key] = value
        self._pending_set[key] = value
        self._pending_remove.discard(key)

    def remove_item(self, key: str) -> None:
        self._values.pop(key, None)
        self._pending_set.pop(key, None)
        self._pending_remove.add(key)

    def apply(self, response: Response) -> Response:
        for key, value in self._pending_set.items():
            response.set_cookie(
                key,
                value,
                max_age=COOKIE_MAX_AGE,
                httponly=True,
                samesite="lax",
            )
        for key in self._pending_remove:
            response.delete_cookie(key)
        return response
