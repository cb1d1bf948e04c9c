import pytest
from jsonschema import ValidationError

from hello_function.greeting import GreetingHandler
from hello_function.http import Request
from hello_function.schema import validate_body

VALID = {
    "message": "Hello, World! This Azure Function was deployed using Jenkins CI/CD Pipeline.",
    "timestamp": "2026-10-19T12:00:00.000Z",
    "environment": "local",
    "runtimeVersion": "Python 3.12.0",
}


def test_handler_output_matches_contract():
    validate_body(GreetingHandler().handle(Request("GET", "/hello", {"name": "Ana"})).body)


def test_valid_body():
    validate_body(VALID)


@pytest.mark.parametrize(
    "patch",
    [
        {"extra": "field"},
        {"timestamp": "yesterday"},
        {"message": "Goodbye"},
        {"environment": 1},
        {"runtimeVersion": ""},
    ],
)
def test_invalid_bodies(patch):
    with pytest.raises(ValidationError):
        validate_body({**VALID, **patch})


def test_missing_field():
    body = dict(VALID)
    del body["runtimeVersion"]
    with pytest.raises(ValidationError):
        validate_body(body)
