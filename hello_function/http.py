from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

JSON_CONTENT_TYPE = "application/json"


@dataclass(frozen=True)
class Request:
    method: str
    path: str = "/"
    query: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Response:
    status: int
    body: Dict[str, Any]
    headers: Dict[str, str] = field(default_factory=lambda: {"Content-Type": JSON_CONTENT_TYPE})

    def json(self) -> str:
        return json.dumps(self.body)


def json_response(status: int, body: Dict[str, Any], **extra_headers: str) -> Response:
    headers = {"Content-Type": JSON_CONTENT_TYPE}
    headers.update(extra_headers)
    return Response(status=status, body=body, headers=headers)
