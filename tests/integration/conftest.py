from __future__ import annotations

import importlib.util
import json
import os
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, List

import boto3
import pytest
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError
from jsonschema import Draft202012Validator

LOCALSTACK_ENDPOINT = os.getenv("AWS_ENDPOINT", "http://localhost:4566")
DEFAULT_REGION = os.getenv("REGION", "us-east-1")
AWS_FAKE_CREDS = {
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "AWS_SESSION_TOKEN": "test",
}
LAMBDAS_DIR = Path(__file__).parents[2] / "lambdas"


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("integration-contracts")
    group.addoption(
        "--contracts-dir",
        action="store",
        default=str(Path(__file__).parent / "contracts"),
        help="Path to directory with YAML contracts.",
    )


@pytest.fixture(scope="session", autouse=True)
def aws_credentials() -> Dict[str, str]:
    """Ensure AWS creds exist for boto3 even when running offline."""
    for key, value in AWS_FAKE_CREDS.items():
        os.environ.setdefault(key, value)
    os.environ.setdefault("AWS_DEFAULT_REGION", DEFAULT_REGION)
    return AWS_FAKE_CREDS


@pytest.fixture(scope="session")
def contract_schema(pytestconfig: pytest.Config) -> Dict[str, Any]:
    contracts_dir = Path(pytestconfig.getoption("--contracts-dir"))
    schema_path = contracts_dir / "contract.schema.json"
    with schema_path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


@pytest.fixture(scope="session")
def contract_validator(contract_schema: Dict[str, Any]) -> Draft202012Validator:
    return Draft202012Validator(contract_schema)


@pytest.fixture
def load_lambda(monkeypatch: pytest.MonkeyPatch):
    """Factory loading ``lambdas/<name>/handler.py`` fresh, after applying env overrides."""

    def _load(name: str, env: Dict[str, str]) -> ModuleType:
        for key, value in env.items():
            monkeypatch.setenv(key, value)
        handler_path = LAMBDAS_DIR / name / "handler.py"
        if not handler_path.exists():
            raise FileNotFoundError(f"lambda {name} has no handler.py at {handler_path}")
        spec = importlib.util.spec_from_file_location(f"lambdas_{name}_handler", handler_path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)  # type: ignore
        return module

    return _load


@pytest.fixture(scope="session")
def lambda_client():
    client = boto3.client(
        "lambda",
        endpoint_url=LOCALSTACK_ENDPOINT,
        region_name=DEFAULT_REGION,
        config=Config(retries={"max_attempts": 1}, connect_timeout=2, read_timeout=10),
    )
    yield client
    client.close()


@pytest.fixture(scope="session")
def deployed_functions(lambda_client) -> List[str]:
    """Names of functions deployed on LocalStack; skips when LocalStack is down."""
    try:
        listing = lambda_client.list_functions()
    except (BotoCoreError, ClientError) as exc:
        pytest.skip(f"LocalStack not reachable at {LOCALSTACK_ENDPOINT}: {exc}")
    return [fn["FunctionName"] for fn in listing.get("Functions", [])]
