from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from hello_function.config import DEFAULT_ROUTE_PREFIX, FunctionConfig
from hello_function.greeting import GreetingHandler
from hello_function.http import Request, Response, json_response

RequestHandler = Callable[[Request], Response]


@dataclass(frozen=True)
class Registration:
    name: str
    route: str
    methods: Tuple[str, ...]
    handler: RequestHandler


def _segments(path: str) -> List[str]:
    # Rutas sin distinción de mayúsculas
    return [part.lower() for part in path.split("/") if part]


class FunctionApp:
    """Routing table for HTTP functions, filled explicitly at startup."""

    def __init__(self, route_prefix: str = DEFAULT_ROUTE_PREFIX, logger: Optional[logging.Logger] = None):
        self.route_prefix = route_prefix.strip("/").lower()
        self.logger = logger or logging.getLogger(__name__)
        self._by_name: Dict[str, Registration] = {}
        self._by_route: Dict[str, Registration] = {}

    @property
    def functions(self) -> List[str]:
        return list(self._by_name)

    def http(self, name: str, *, route: str, methods: Iterable[str], handler: RequestHandler) -> Registration:
        normalized_methods = tuple(m.upper() for m in methods)
        if not normalized_methods:
            raise ValueError(f"function {name} must allow at least one HTTP method")
        route_key = "/".join(_segments(route))
        if name in self._by_name:
            raise ValueError(f"function {name} is already registered")
        if route_key in self._by_route:
            raise ValueError(f"route /{route_key} is already bound to {self._by_route[route_key].name}")

        registration = Registration(name, route_key, normalized_methods, handler)
        self._by_name[name] = registration
        self._by_route[route_key] = registration
        self.logger.debug(f"Registered function {name}: {','.join(normalized_methods)} /{route_key}")
        return registration

    def resolve(self, path: str) -> Optional[Registration]:
        parts = _segments(path)
        if self.route_prefix and parts[:1] == [self.route_prefix]:
            parts = parts[1:]
        return self._by_route.get("/".join(parts))

    def dispatch(self, request: Request) -> Response:
        registration = self.resolve(request.path)
        if registration is None:
            self.logger.info(f"No function bound to {request.path}")
            return json_response(404, {"error": "Not Found"})
        if request.method.upper() not in registration.methods:
            self.logger.info(f"{request.method} not allowed for {registration.name}")
            return json_response(
                405,
                {"error": "Method Not Allowed"},
                Allow=", ".join(registration.methods),
            )
        return registration.handler(request)


def create_app(config: Optional[FunctionConfig] = None, logger: Optional[logging.Logger] = None) -> FunctionApp:
    """Compose the deployed app: a single anonymous ``hello`` function."""
    config = config or FunctionConfig()
    logger = logger or logging.getLogger("hello_function")
    app = FunctionApp(route_prefix=config.route_prefix, logger=logger)
    app.http(
        "httpTrigger",
        route="hello",
        methods=["GET", "POST"],
        handler=GreetingHandler(config, logger=logger),
    )
    return app
