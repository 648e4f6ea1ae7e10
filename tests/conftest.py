import json

import pytest

import fixer_client
from fixer_report import ReportSink


class FakeResponse:
    def __init__(self, status_code, text):
        self.status_code = status_code
        self.text = text

    def json(self):
        return json.loads(self.text)


@pytest.fixture
def report(tmp_path):
    return ReportSink(str(tmp_path / "Report.log"), echo=False)


@pytest.fixture
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr(fixer_client.time, "sleep", calls.append)
    return calls


@pytest.fixture
def fake_get(monkeypatch, sleeps):
    """Serve canned bodies; every requested URL is recorded in ``calls``."""
    state = {"status": 200, "body": "{}", "error": None, "calls": []}

    def get(url, timeout=None):
        state["calls"].append(url)
        if state["error"] is not None:
            raise state["error"]
        body = state["body"]
        if not isinstance(body, str):
            body = json.dumps(body)
        return FakeResponse(state["status"], body)

    monkeypatch.setattr(fixer_client.requests, "get", get)
    return state


@pytest.fixture
def read_lines():
    def read(sink):
        with open(sink.path, encoding="utf-8") as f:
            return f.read().splitlines()
    return read


