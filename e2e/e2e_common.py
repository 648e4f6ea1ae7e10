"""Shared config, error kinds and suite runner for the Fixer E2E tests. Not a test file (no test_ prefix)."""
import os

FIXER_API_URL = os.getenv("FIXER_API_URL", "http://data.fixer.io/api/latest")
MISSING_KEY = "MISSING_KEY"


def load_api_key() -> str:
    """Key from FIXER_API_KEY_FREE; only an unset variable falls back to the sentinel."""
    return os.getenv("FIXER_API_KEY_FREE", MISSING_KEY)


FIXER_API_KEY = load_api_key()
INVALID_KEY = "INVALID_KEY"

REPORT_FILE = os.getenv("FIXER_REPORT_FILE", "Report.log")
# Set by run_all_tests.py so scenario files leave the report lifecycle to it
REPORT_MANAGED_ENV = "FIXER_REPORT_MANAGED"

DEFAULT_TIMEOUT = float(os.getenv("FIXER_TIMEOUT", "10"))
# Free plan is rate limited; pause after every response
REQUEST_DELAY = float(os.getenv("FIXER_REQUEST_DELAY", "1.2"))


class FixerTestError(Exception):
    """Base for every failure a scenario can raise."""


class TransportError(FixerTestError):
    """The provider could not be reached or the HTTP exchange failed."""


class ParseError(FixerTestError):
    """Response body is not valid JSON."""


class MissingFieldError(FixerTestError):
    """An expected field is absent from the response."""


class AssertionMismatch(FixerTestError, AssertionError):
    """A field is present but holds the wrong value."""


def masked_key(key: str) -> str:
    if key and len(key) >= 4:
        return f"API Key loaded (masked): {key[:4]}****"
    return "API Key not set or too short!"


def report_is_managed() -> bool:
    return os.getenv(REPORT_MANAGED_ENV) == "1"


def run_suite(name: str, tests: list, report=None) -> bool:
    """Run a list of (test_name, test_callable) and exit 0/1.

    When a report is given and no outer runner owns it, the report is
    initialized before the first scenario and finalized after the last.
    """
    import sys
    print("=" * 70)
    print(name)
    print("=" * 70)
    print(masked_key(FIXER_API_KEY))
    owns_report = report is not None and not report_is_managed()
    if owns_report:
        report.initialize()
    results = []
    try:
        for label, fn in tests:
            try:
                ok = fn()
                results.append((label, ok))
            except Exception as e:
                print(f"  ✗ {label}: {type(e).__name__}: {e}")
                results.append((label, False))
    finally:
        if owns_report:
            report.finalize()
    passed = sum(1 for _, ok in results if ok)
    total = len(results)
    print("\n" + "=" * 70)
    print("Summary")
    print("=" * 70)
    for label, ok in results:
        print(f"  {'✓' if ok else '✗'} {label}: {'PASS' if ok else 'FAIL'}")
    print(f"\n{passed}/{total} passed")
    print("=" * 70)
    sys.exit(0 if passed == total else 1)
