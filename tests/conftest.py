from typing import Any

import pytest

from exchange_api.client import ExchangeClient
from exchange_data.models.options import ClientOptions

SERVER_URL = "https://exchange.test/api"


class FakeResponse:
    def __init__(self, body: Any = None, status_code: int = 200, reason: str = "OK", raw_text: str | None = None):
        self.body = body
        self.status_code = status_code
        self.reason = reason
        self.raw_text = raw_text

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self.raw_text is not None:
            raise ValueError(f"Expecting value: {self.raw_text!r}")
        return self.body


class FakeSession:
    """Stands in for requests.Session; records every POST and replays queued outcomes."""

    def __init__(self):
        self.calls: list[dict[str, Any]] = []
        self.outcomes: list[Any] = []

    def queue(self, outcome: Any) -> None:
        self.outcomes.append(outcome)

    def queue_result(self, result: Any) -> None:
        self.outcomes.append(FakeResponse({"result": result}))

    def post(self, url, headers=None, json=None, timeout=None):
        self.calls.append({"url": url, "headers": dict(headers or {}), "json": json, "timeout": timeout})
        outcome = self.outcomes.pop(0) if self.outcomes else FakeResponse({"result": None})
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def close(self):
        pass


class FakeDelegate:
    def __init__(self, token: str | None = "DELEGATE-TOKEN"):
        self.token = token
        self.requests = 0

    async def get_token(self) -> str | None:
        self.requests += 1
        return self.token


class Recorder:
    """Callback that remembers each invocation in a shared log."""

    def __init__(self, name: str, log: list):
        self.name = name
        self.log = log

    def __call__(self, error_message, result):
        self.log.append((self.name, error_message, result))


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def make_client(fake_session):
    def _make(**option_overrides) -> ExchangeClient:
        client = ExchangeClient(SERVER_URL, ClientOptions(**option_overrides))
        client.http.session = fake_session
        return client

    return _make


@pytest.fixture
def client(make_client) -> ExchangeClient:
    return make_client()
