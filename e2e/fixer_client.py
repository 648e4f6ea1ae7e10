"""Request/log/parse helpers for the Fixer latest-rates endpoint. Not a test file."""
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

import requests

from e2e_common import (
    FIXER_API_URL,
    DEFAULT_TIMEOUT,
    REQUEST_DELAY,
    TransportError,
    ParseError,
    MissingFieldError,
    AssertionMismatch,
)
from fixer_report import ReportSink


@dataclass
class FixerResponse:
    status_code: int
    body: str
    data: Any


def build_url(access_key: Optional[str] = None, symbols: Optional[Iterable[str]] = None,
              base_url: str = FIXER_API_URL) -> str:
    """Latest-rates URL; symbols stay unencoded so the logged URL is the one sent."""
    params = []
    if access_key is not None:
        params.append(f"access_key={access_key}")
    if symbols:
        params.append("symbols=" + ",".join(symbols))
    if not params:
        return base_url
    return f"{base_url}?{'&'.join(params)}"


def send_request_and_parse(url: str, scenario: str, report: ReportSink) -> FixerResponse:
    """GET the url, log request and response, wait out the rate limit, parse JSON."""
    report.append(f"REQUEST: {url}", scenario)
    try:
        r = requests.get(url, timeout=DEFAULT_TIMEOUT)
    except requests.exceptions.RequestException as e:
        raise TransportError(f"GET {url} failed: {e}") from e
    report.append(f"RESPONSE: {r.status_code} - {r.text}", scenario)

    time.sleep(REQUEST_DELAY)

    try:
        data = r.json()
    except ValueError as e:
        raise ParseError(f"Invalid JSON response ({r.status_code}): {e}") from e
    return FixerResponse(status_code=r.status_code, body=r.text, data=data)


def get_field(data: Any, *path: str) -> Any:
    """Walk nested keys, e.g. get_field(data, "error", "type")."""
    node = data
    for i, key in enumerate(path):
        if not isinstance(node, dict) or key not in node:
            raise MissingFieldError(f"Missing required field: {'.'.join(path[:i + 1])}")
        node = node[key]
    return node


def get_success(data: Any) -> bool:
    success = get_field(data, "success")
    if not isinstance(success, bool):
        raise AssertionMismatch(f"Expected boolean 'success', got {success!r}")
    return success


def expect(condition: bool, message: str) -> None:
    if not condition:
        raise AssertionMismatch(message)


def assert_base(data: Dict[str, Any], expected: str) -> str:
    base = get_field(data, "base")
    expect(base == expected, f"Expected base={expected}, got {base}")
    return base


def assert_rates_contain(data: Dict[str, Any], symbols: Iterable[str]) -> Dict[str, Any]:
    """Every requested code must be in rates; extra codes are allowed."""
    rates = get_field(data, "rates")
    expect(isinstance(rates, dict), f"Expected 'rates' object, got {type(rates).__name__}")
    for code in symbols:
        expect(code in rates, f"Expected {code} in rates")
    return rates


def assert_error_type(data: Dict[str, Any], scenario: str, report: ReportSink) -> str:
    """Failure shape: success is false and error.type is a non-empty string."""
    expect(not get_success(data), "Expected success:false from API")
    error_type = get_field(data, "error", "type")
    expect(isinstance(error_type, str) and error_type != "",
           f"Expected non-empty error.type, got {error_type!r}")
    report.append(f"Error type: {error_type}", scenario)
    return error_type
