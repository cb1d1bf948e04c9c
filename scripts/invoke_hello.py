import argparse
import json
import os

import boto3

from hello_function.events import make_proxy_event


def parse():
    p = argparse.ArgumentParser(description="Invoke the hello_world lambda on LocalStack with an API Gateway event.")
    p.add_argument("--function", default="hello_world")
    p.add_argument("--name", default=None, help="Value for the ?name= query parameter")
    p.add_argument("--method", default="GET", choices=["GET", "POST"])
    p.add_argument("--path", default="/api/hello")
    return p.parse_args()


def main():
    a = parse()
    client = boto3.client(
        "lambda",
        endpoint_url=os.environ.get("AWS_ENDPOINT", "http://localhost:4566"),
        region_name=os.environ.get("REGION", "us-east-1"),
        aws_access_key_id="test",
        aws_secret_access_key="test",
    )
    query = {"name": a.name} if a.name else None
    event = make_proxy_event(a.method, a.path, query=query)
    resp = client.invoke(FunctionName=a.function, Payload=json.dumps(event).encode())
    print(resp["StatusCode"], resp.get("FunctionError"))
    print(resp["Payload"].read().decode())


if __name__ == "__main__":
    main()
