# =========================================================
# REMOTE DESKTOP REDIRECTOR
#
# Remembers which LibreStock server a kiosk should open and
# redirects there on every visit.
# =========================================================

import html
import logging

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from librestock.core.config import settings
from librestock.remote_desktop.storage import CookieStorage
from librestock.remote_desktop.url_utils import (
    INVALID_URL_FORM_MESSAGE,
    normalize_url,
    read_stored_url,
)

logger = logging.getLogger("librestock")

router = APIRouter(
    prefix="/remote-desktop",
    tags=["Remote Desktop"],
)

PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Connect to LibreStock</title>
</head>
<body>
  <main>
    <h1>Connect to LibreStock</h1>
    {error}
    <form method="post" action="{action}">
      <label for="server_url">Server URL</label>
      <input id="server_url" name="server_url" type="text"
             placeholder="http://server:8080" value="{value}" required autofocus>
      <button type="submit">Connect</button>
    </form>
  </main>
</body>
</html>
"""


def render_form(error: str | None = None, value: str = "") -> str:
    error_html = f'<p role="alert">{html.escape(error)}</p>' if error else ""
    return PAGE_TEMPLATE.format(
        error=error_html,
        action=router.prefix,
        value=html.escape(value, quote=True),
    )


@router.get("", response_class=HTMLResponse)
def open_remote_desktop(request: Request):
    storage = CookieStorage(request)
    stored = read_stored_url(storage, settings.REMOTE_DESKTOP_COOKIE)

    if stored.url:
        return RedirectResponse(stored.url, status_code=status.HTTP_302_FOUND)

    if stored.error:
        logger.warning("Discarded invalid stored remote desktop URL")

    return storage.apply(HTMLResponse(render_form(stored.error)))


@router.post("", response_class=HTMLResponse)
def save_remote_desktop(request: Request, server_url: str = Form(...)):
    url = normalize_url(server_url)

    if url is None:
        return HTMLResponse(
            render_form(INVALID_URL_FORM_MESSAGE, server_url),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    storage = CookieStorage(request)
    storage.set_item(settings.REMOTE_DESKTOP_COOKIE, url)
    logger.info(f"Remote desktop server set to {url}")

    return storage.apply(RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER))


@router.post("/clear")
def clear_remote_desktop(request: Request):
    storage = CookieStorage(request)
    storage.remove_item(settings.REMOTE_DESKTOP_COOKIE)

    return storage.apply(
        RedirectResponse(router.prefix, status_code=status.HTTP_303_SEE_OTHER)
    )
