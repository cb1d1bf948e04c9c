from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from hello_function.config import FunctionConfig
from hello_function.http import Request, Response, json_response

DEPLOYMENT_SUFFIX = "This Azure Function was deployed using Jenkins CI/CD Pipeline."
DEFAULT_NAME = "World"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def isoformat_utc(moment: datetime) -> str:
    """Format as an ISO-8601 instant with milliseconds and a ``Z`` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def compose_message(name: Optional[str], suffix: str = DEPLOYMENT_SUFFIX) -> str:
    return f"Hello, {name or DEFAULT_NAME}! {suffix}"


class GreetingHandler:
    """
    Builds the greeting response for a single request.

    The handler holds only immutable settings, so one instance can serve
    any number of concurrent invocations.
    """

    def __init__(
        self,
        config: Optional[FunctionConfig] = None,
        logger: Optional[logging.Logger] = None,
        clock: Callable[[], datetime] = utc_now,
        suffix: str = DEPLOYMENT_SUFFIX,
    ):
        self.config = config or FunctionConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.clock = clock
        self.suffix = suffix

    def __call__(self, request: Request) -> Response:
        return self.handle(request)

    def handle(self, request: Request) -> Response:
        self.logger.info("HTTP trigger function processed a request.")

        name = request.query.get("name")
        # Valores no string se tratan como ausentes
        if not isinstance(name, str):
            name = None
        message = compose_message(name, self.suffix)
        self.logger.info(f"Generated response: {message}")

        return json_response(
            200,
            {
                "message": message,
                "timestamp": isoformat_utc(self.clock()),
                "environment": self.config.environment,
                "runtimeVersion": self.config.runtime_version,
            },
        )
