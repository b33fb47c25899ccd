#!/usr/bin/env python3
"""
Post-Deployment Smoke Check

Validates that a deployed game backend answers its contract on a few
read-only or side-effect-free requests.

Usage:
    python scripts/health_check.py --url <DEPLOYMENT_URL> --environment <staging|production>

Checks Performed:
    1. /health returns 200 and both schemas report 'connected'
    2. /level/1 returns 200 (level 1 must exist in the content schema)
    3. /stage/ without a code returns 400
    4. /auth/login with unknown credentials returns 401

Exit Codes:
    0: All checks passed
    1: One or more checks failed
"""

import argparse
import sys
import time
import uuid
import requests
from typing import Dict, Optional, Tuple


def check_endpoint(url: str, endpoint: str, timeout: int = 10, expected_status: int = 200,
                   json_body: Optional[dict] = None) -> Tuple[bool, str]:
    """
    Sends a GET (or a POST when json_body is given) and compares the status code.

    Returns:
        Tuple[bool, str]: (success, message)
    """
    full_url = f"{url.rstrip('/')}{endpoint}"

    try:
        if json_body is None:
            response = requests.get(full_url, timeout=timeout)
        else:
            response = requests.post(full_url, json=json_body, timeout=timeout)

        if response.status_code == expected_status:
            return True, f"✓ {endpoint} returned {response.status_code}"
        return False, f"✗ {endpoint} returned {response.status_code} (expected {expected_status})"

    except requests.exceptions.Timeout:
        return False, f"✗ {endpoint} timed out after {timeout} seconds"
    except requests.exceptions.ConnectionError:
        return False, f"✗ {endpoint} connection failed"
    except requests.exceptions.RequestException as e:
        return False, f"✗ {endpoint} error: {str(e)}"


def check_database(url: str, timeout: int = 10) -> Tuple[bool, str]:
    """Checks /health and verifies both schemas are connected."""
    full_url = f"{url.rstrip('/')}/health"

    try:
        response = requests.get(full_url, timeout=timeout)
    except requests.exceptions.RequestException as e:
        return False, f"✗ /health error: {str(e)}"

    try:
        data = response.json()
    except ValueError:
        return False, f"✗ /health returned invalid JSON ({response.status_code})"

    schemas = data.get('database', {})
    broken = [name for name, status in schemas.items() if status != 'connected']
    if response.status_code == 200 and schemas and not broken:
        return True, f"✓ /health returned 200, schemas connected: {', '.join(sorted(schemas))}"
    return False, f"✗ /health returned {response.status_code}, failing schemas: {', '.join(broken) or 'unknown'}"


def run_checks(url: str, environment: str, timeout: int = 15) -> Dict[str, Tuple[bool, str]]:
    print(f"\n{'='*60}")
    print(f"Smoke Checks - {environment.upper()}")
    print(f"{'='*60}\n")
    print(f"Target URL: {url}\n")

    results = {}

    print("Check 1: Database connectivity (/health)...")
    results["database"] = check_database(url, timeout=timeout)
    print(f"  {results['database'][1]}\n")

    print("Check 2: Content lookup (/level/1)...")
    results["level_lookup"] = check_endpoint(url, "/level/1", timeout=timeout)
    print(f"  {results['level_lookup'][1]}\n")

    print("Check 3: Missing path parameter (/stage/)...")
    results["missing_param"] = check_endpoint(url, "/stage/", timeout=timeout, expected_status=400)
    print(f"  {results['missing_param'][1]}\n")

    print("Check 4: Rejected login (/auth/login)...")
    probe = {"id": f"smoke-{uuid.uuid4().hex[:12]}", "pw": uuid.uuid4().hex}
    results["rejected_login"] = check_endpoint(url, "/auth/login", timeout=timeout,
                                               expected_status=401, json_body=probe)
    print(f"  {results['rejected_login'][1]}\n")

    return results


def print_summary(results: Dict[str, Tuple[bool, str]], environment: str) -> bool:
    print(f"{'='*60}")
    print(f"Smoke Check Summary - {environment.upper()}")
    print(f"{'='*60}\n")

    passed = sum(1 for success, _ in results.values() if success)
    total = len(results)

    for check_name, (success, _) in results.items():
        symbol = "✓" if success else "✗"
        print(f"{symbol} {check_name}: {'PASS' if success else 'FAIL'}")

    print(f"\nTotal: {passed}/{total} checks passed\n")
    return passed == total


def main():
    parser = argparse.ArgumentParser(description="Run post-deployment smoke checks")
    parser.add_argument("--url", required=True, help="Deployment URL to check")
    parser.add_argument("--environment", required=True, choices=["staging", "production"],
                        help="Deployment environment")
    parser.add_argument("--retry", type=int, default=3,
                        help="Number of attempts before giving up (default: 3)")
    parser.add_argument("--retry-delay", type=int, default=10,
                        help="Delay in seconds between attempts (default: 10)")

    args = parser.parse_args()

    for attempt in range(1, args.retry + 1):
        if attempt > 1:
            print(f"\nRetry attempt {attempt}/{args.retry}")
            time.sleep(args.retry_delay)

        results = run_checks(args.url, args.environment)
        if print_summary(results, args.environment):
            sys.exit(0)

    print(f"✗ SMOKE CHECKS FAILED AFTER {args.retry} ATTEMPTS", file=sys.stderr)
    sys.exit(1)


if __name__ == "__main__":
    main()
