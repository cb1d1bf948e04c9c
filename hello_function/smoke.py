"""Post-deploy check that a live endpoint honours the response contract."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests
from jsonschema import ValidationError

from hello_function.http import JSON_CONTENT_TYPE
from hello_function.schema import validate_body

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class SmokeCheckError(Exception):
    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


def check_endpoint(
    url: str,
    name: Optional[str] = None,
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> Dict[str, Any]:
    """GET the function, validate the body and return it."""
    params = {"name": name} if name else None
    try:
        if session is None:
            with requests.Session() as http:
                response = http.get(url, params=params, timeout=timeout)
        else:
            response = session.get(url, params=params, timeout=timeout)
    except requests.RequestException as exc:
        raise SmokeCheckError(url, f"request failed: {exc}") from exc

    if response.status_code != 200:
        raise SmokeCheckError(url, f"expected status 200, got {response.status_code}")
    content_type = response.headers.get("Content-Type", "")
    if not content_type.startswith(JSON_CONTENT_TYPE):
        raise SmokeCheckError(url, f"expected {JSON_CONTENT_TYPE}, got {content_type or 'no content type'}")

    try:
        body = response.json()
        validate_body(body)
    except ValueError as exc:
        raise SmokeCheckError(url, f"body is not JSON: {exc}") from exc
    except ValidationError as exc:
        raise SmokeCheckError(url, f"body breaks the response contract: {exc.message}") from exc

    if name and name not in body["message"]:
        raise SmokeCheckError(url, f"message does not mention {name!r}: {body['message']}")

    logger.info(f"Smoke check passed for {response.url}: {body['message']}")
    return body
