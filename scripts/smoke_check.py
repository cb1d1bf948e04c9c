#!/usr/bin/env python3
"""
Verifica el endpoint desplegado: GET /hello y GET /hello?name=...
"""
import argparse
import logging
import os
import sys

from hello_function.smoke import DEFAULT_TIMEOUT, SmokeCheckError, check_endpoint


def parse_args():
    p = argparse.ArgumentParser(description="Smoke-check a deployed hello function.")
    p.add_argument("--url", default=os.environ.get("HELLO_FUNCTION_URL"), help="Function URL (or HELLO_FUNCTION_URL)")
    p.add_argument("--name", default="TestUser", help="Name used for the personalized request")
    p.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="Per-request timeout in seconds")
    return p.parse_args()


def main():
    a = parse_args()
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    if not a.url:
        print("❌ Falta --url o HELLO_FUNCTION_URL", file=sys.stderr)
        return 2

    try:
        check_endpoint(a.url, timeout=a.timeout)
        check_endpoint(a.url, name=a.name, timeout=a.timeout)
    except SmokeCheckError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print("✅ Smoke check OK")
    return 0


if __name__ == "__main__":
    sys.exit(main())
