"""Minimal JSON-over-HTTP client built on :mod:`requests`."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Literal

import requests

from generic_functions.config import get_http_timeout

__all__ = ["api"]

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

_JSON_HEADERS = {"Content-Type": "application/json"}


def api(
    url: str,
    method: HttpMethod = "GET",
    headers: Mapping[str, str] | None = None,
    body: Any = None,
    timeout: float | None = None,
    session: requests.Session | None = None,
) -> Any:
    """Send a request and decode its JSON response.

    Failures never raise: a transport error, a non-2xx status or a body that is
    not JSON all give ``{"ok": False, "message": <reason>}`` and are logged as
    warnings.

    Args:
        url: The URL to call.
        method: The HTTP method.
        headers: Extra headers, merged over ``Content-Type: application/json``.
        body: Payload for non-GET requests. Strings are sent as they are; anything
            else is JSON-encoded. Ignored for GET and when falsy.
        timeout: Seconds to wait for the server. Defaults to
            `GENERIC_FUNCTIONS_HTTP_TIMEOUT` (10 seconds when unset).
        session: Session to send the request with; a one-off session is used
            when omitted.

    Returns:
        The decoded JSON document, or the failure mapping.

    Example:
        >>> api("https://api.example.com/users", method="POST", body={"name": "John"})  # doctest: +SKIP
        {'id': 1, 'name': 'John'}
    """
    request_headers = {**_JSON_HEADERS, **(headers or {})}
    data = None
    if body and method != "GET":
        data = body if isinstance(body, str) else json.dumps(body)
    if timeout is None:
        timeout = get_http_timeout()

    owned = session is None
    http = requests.Session() if owned else session
    try:
        response = http.request(
            method, url, headers=request_headers, data=data, timeout=timeout
        )
        response.raise_for_status()
        return response.json()
    except requests.HTTPError as e:
        message = f"HTTP error! status: {e.response.status_code}"
    except requests.JSONDecodeError as e:
        message = f"Invalid JSON response: {e}"
    except requests.RequestException as e:
        message = str(e) or type(e).__name__
    except ValueError as e:
        message = f"Invalid JSON response: {e}"
    finally:
        if owned:
            http.close()
    logger.warning("%s %s failed: %s", method, url, message)
    return {"ok": False, "message": message}
