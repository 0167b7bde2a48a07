"""demo-app — post-deploy smoke check.

Run against whichever stage of the walkthrough is up:

    python smoke.py                                  # docker / compose
    python smoke.py --base-url http://localhost:30080  # k8s NodePort / helm
"""

import argparse
import sys
from dataclasses import dataclass

import requests

API_BASE = "http://localhost:6969"


@dataclass
class CheckResult:
    name: str
    ok: bool
    detail: str


def _check_health(base_url: str, timeout: float) -> CheckResult:
    try:
        resp = requests.get(f"{base_url}/health", timeout=timeout)
    except requests.RequestException as e:
        return CheckResult("health", False, f"request failed: {e}")
    ok = resp.status_code == 200 and resp.text == "ok"
    return CheckResult("health", ok, f"{resp.status_code} {resp.text!r}")


def _check_root(base_url: str, timeout: float) -> CheckResult:
    try:
        resp = requests.get(f"{base_url}/", timeout=timeout)
    except requests.RequestException as e:
        return CheckResult("root", False, f"request failed: {e}")
    content_type = resp.headers.get("content-type", "")
    ok = resp.status_code == 200 and "text/html" in content_type and "<a href=" in resp.text
    return CheckResult("root", ok, f"{resp.status_code} {content_type}")


def check_deployment(base_url: str = API_BASE, timeout: float = 3.0) -> list[CheckResult]:
    """Hit both routes of a running deployment; one result per route."""
    base_url = base_url.rstrip("/")
    return [_check_health(base_url, timeout), _check_root(base_url, timeout)]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Smoke-check a running demo-app deployment.")
    parser.add_argument("--base-url", default=API_BASE, help=f"service address (default: {API_BASE})")
    parser.add_argument("--timeout", type=float, default=3.0, help="per-request timeout in seconds")
    args = parser.parse_args(argv)

    results = check_deployment(args.base_url, timeout=args.timeout)
    for result in results:
        mark = "PASS" if result.ok else "FAIL"
        print(f"[{mark}] {result.name}: {result.detail}")
    return 0 if all(r.ok for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
