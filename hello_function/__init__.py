"""HTTP-triggered greeting function and its Lambda hosting adapter."""

from hello_function.app import FunctionApp, create_app
from hello_function.config import FunctionConfig
from hello_function.greeting import GreetingHandler, compose_message
from hello_function.http import Request, Response

__all__ = [
    "FunctionApp",
    "FunctionConfig",
    "GreetingHandler",
    "Request",
    "Response",
    "compose_message",
    "create_app",
]
