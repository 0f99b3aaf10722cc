# =========================================================
# LIBRESTOCK API CLIENT
#
# Thin requests wrapper used by scripts and integrations.
# HTTP error statuses are raised as the exceptions in
# librestock.client.errors.
# =========================================================

import logging
from typing import Any, Callable

import requests

from librestock.client.errors import (
    STATUS_EXCEPTIONS,
    ApiException,
    InternalException,
    TimeoutException,
    ValidationException,
)

logger = logging.getLogger("librestock.client")

DEFAULT_TIMEOUT = 30.0

TokenGetter = Callable[[], str | None]


def _error_message(payload: Any, fallback: str) -> str:
    if isinstance(payload, dict):
        detail = payload.get("detail", payload.get("message"))
        if isinstance(detail, str):
            return detail
        if isinstance(detail, dict) and isinstance(detail.get("message"), str):
            return detail["message"]
        if isinstance(detail, list) and detail and isinstance(detail[0], dict):
            return str(detail[0].get("msg", fallback))
    return fallback


def _validation_field(payload: Any) -> str | None:
    # FastAPI: {"detail": [{"loc": ["body", "sku"], "msg": ...}]}
    if not isinstance(payload, dict):
        return None
    detail = payload.get("detail")
    if isinstance(detail, list) and detail and isinstance(detail[0], dict):
        loc = detail[0].get("loc") or []
        names = [str(part) for part in loc if part not in ("body", "query", "path")]
        return ".".join(names) or None
    return None


def raise_for_status(response: requests.Response) -> None:
    if response.status_code < 400:
        return

    try:
        payload = response.json()
    except ValueError:
        payload = None

    message = _error_message(payload, response.reason or f"HTTP {response.status_code}")

    if response.status_code == 422:
        raise ValidationException(message, field=_validation_field(payload), payload=payload)

    exception_class = STATUS_EXCEPTIONS.get(response.status_code)
    if exception_class is not None:
        raise exception_class(message, payload)

    if response.status_code >= 500:
        raise InternalException(message, payload)

    raise ApiException(message, payload)


class ApiClient:
    def __init__(
        self,
        base_url: str,
        token_getter: TokenGetter | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token_getter = token_getter
        self.timeout = timeout
        self.session = session or requests.Session()

    def _auth_headers(self) -> dict[str, str]:
        if self.token_getter is None:
            return {}

        try:
            token = self.token_getter()
        except Exception as e:
            logger.warning(f"Token getter failed, sending request without auth: {str(e)}")
            return {}

        return {"Authorization": f"Bearer {token}"} if token else {}

    def request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        headers = {**self._auth_headers(), **kwargs.pop("headers", {})}

        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                timeout=self.timeout,
                **kwargs,
            )
        except requests.Timeout as e:
            raise TimeoutException(str(e), f"{method} {path}", int(self.timeout * 1000))

        raise_for_status(response)

        if response.status_code == 204 or not response.content:
            return None

        return response.json()

    def get(self, path: str, **kwargs) -> Any:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs) -> Any:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs) -> Any:
        return self.request("PUT", path, **kwargs)

    def patch(self, path: str, **kwargs) -> Any:
        return self.request("PATCH", path, **kwargs)

    def delete(self, path: str, **kwargs) -> Any:
        return self.request("DELETE", path, **kwargs)
