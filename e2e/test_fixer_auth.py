#!/usr/bin/env python3
"""E2E: Access key rejection (negative scenarios)."""
from e2e_common import INVALID_KEY, run_suite
from fixer_client import build_url, send_request_and_parse, assert_error_type
from fixer_report import current_report


def test_latest_rates_missing_key() -> bool:
    """No access_key parameter returns success:false with an error type."""
    scenario = "test_latest_rates_missing_key"
    print("\n[TEST] Missing access key")
    report = current_report()
    resp = send_request_and_parse(build_url(), scenario, report)

    error_type = assert_error_type(resp.data, scenario, report)
    print(f"  ✓ Rejected ({resp.status_code}), error.type={error_type}")
    return True


def test_latest_rates_invalid_key() -> bool:
    """access_key=INVALID_KEY returns success:false with an error type."""
    scenario = "test_latest_rates_invalid_key"
    print("\n[TEST] Invalid access key")
    report = current_report()
    resp = send_request_and_parse(build_url(INVALID_KEY), scenario, report)

    error_type = assert_error_type(resp.data, scenario, report)
    print(f"  ✓ Rejected ({resp.status_code}), error.type={error_type}")
    return True


if __name__ == "__main__":
    run_suite("E2E: Fixer Access Key", [
        ("Missing key returns error", test_latest_rates_missing_key),
        ("Invalid key returns error", test_latest_rates_invalid_key),
    ], report=current_report())
