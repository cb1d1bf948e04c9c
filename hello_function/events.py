"""Translation between Lambda proxy events and the function's Request/Response."""

from __future__ import annotations

import json
import uuid
from typing import Any, Dict, Mapping, Optional

from hello_function.http import Request, Response

DIRECT_INVOKE_PATH = "/hello"
DEFAULT_STAGE = "$default"


def _string_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    if not params:
        return {}
    return {str(key): value for key, value in params.items() if isinstance(value, str)}


def _strip_stage(path: str, stage: Optional[str]) -> str:
    """HTTP API puts a named stage in front of rawPath; $default adds nothing."""
    if not stage or stage == DEFAULT_STAGE:
        return path
    prefix = f"/{stage}"
    if path == prefix or path.startswith(prefix + "/"):
        return path[len(prefix):] or "/"
    return path


def parse_event(event: Any) -> Request:
    """
    Build a Request from an API Gateway (REST or HTTP API), Function URL,
    or direct-invoke payload.
    """
    if not isinstance(event, Mapping):
        raise TypeError(f"Lambda event must be a JSON object, got {type(event).__name__}")

    # API Gateway REST (payload v1)
    if "httpMethod" in event:
        return Request(
            method=str(event["httpMethod"]).upper(),
            path=event.get("path") or "/",
            query=_string_params(event.get("queryStringParameters")),
        )

    # HTTP API / Function URL (payload v2)
    request_context = event.get("requestContext") or {}
    http_context = request_context.get("http")
    if isinstance(http_context, Mapping):
        return Request(
            method=str(http_context.get("method", "GET")).upper(),
            path=_strip_stage(
                event.get("rawPath") or http_context.get("path") or "/",
                request_context.get("stage"),
            ),
            query=_string_params(event.get("queryStringParameters")),
        )

    # Invocación directa: {"name": "..."}
    return Request(method="GET", path=DIRECT_INVOKE_PATH, query=_string_params(event))


def to_proxy_result(response: Response) -> Dict[str, Any]:
    return {
        "statusCode": response.status,
        "headers": dict(response.headers),
        "body": response.json(),
        "isBase64Encoded": False,
    }


def make_proxy_event(
    method: str,
    path: str,
    *,
    query: Optional[Dict[str, str]] = None,
    headers: Optional[Dict[str, str]] = None,
    body: Optional[Any] = None,
    stage: str = "local",
) -> Dict[str, Any]:
    """REST API (payload v1) event as API Gateway hands it to the lambda."""
    verb = method.upper()
    if body is not None and not isinstance(body, str):
        body = json.dumps(body)
    context = {
        "httpMethod": verb,
        "resourcePath": path,
        "path": f"/{stage}{path}",
        "stage": stage,
        "requestId": str(uuid.uuid4()),
        "accountId": "000000000000",
        "identity": {"sourceIp": "127.0.0.1"},
    }
    return {
        "httpMethod": verb,
        "resource": path,
        # v1 events carry the path without the stage; requestContext.path has it
        "path": path,
        "headers": headers or {},
        # null, not {}, when there is no query string
        "queryStringParameters": query or None,
        "pathParameters": None,
        "stageVariables": None,
        "requestContext": context,
        "body": body,
        "isBase64Encoded": False,
    }
