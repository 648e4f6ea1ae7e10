"""Append-only report file shared by every scenario in a run."""
import os
from datetime import datetime
from typing import Optional

from e2e_common import REPORT_FILE

GLOBAL_SCOPE = "GLOBAL"
START_MARKER = "=== Test Execution Started ==="
END_MARKER = "=== Test Execution Finished ==="


def format_line(message: str, scenario: str, now: Optional[datetime] = None) -> str:
    """Render one entry as ``HH:MM:SS [scenario] - message``."""
    now = now or datetime.now()
    return f"{now:%H:%M:%S} [{scenario}] - {message}"


class ReportSink:
    """Plain-text log, truncated once per run and appended in call order."""

    def __init__(self, path: str = REPORT_FILE, echo: bool = True):
        self.path = path
        self.echo = echo

    def initialize(self) -> None:
        if os.path.exists(self.path):
            os.remove(self.path)
        self._write(format_line(START_MARKER, GLOBAL_SCOPE))

    def append(self, message: str, scenario: str) -> None:
        line = format_line(message, scenario)
        if self.echo:
            print(f"    {line}")
        self._write(line)

    def finalize(self) -> None:
        self._write(format_line(END_MARKER, GLOBAL_SCOPE))

    def _write(self, line: str) -> None:
        # Reopen per line; closing the handle flushes before the next append
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")


def current_report() -> ReportSink:
    return ReportSink(REPORT_FILE)
