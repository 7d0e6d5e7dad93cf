import json
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from exchange_api.client import ExchangeClient
from exchange_api.errors import CommandError, ErrorKind
from exchange_data.models.options import CallOptions, ClientOptions
from tests.conftest import FakeDelegate, Recorder


class LocalExchange:
    """In-process HTTP server that answers each path with a fixed (status, body)."""

    def __init__(self):
        self.hits: list[dict] = []
        self.routes: dict[str, tuple[int, dict]] = {}
        exchange = self

        class Handler(BaseHTTPRequestHandler):
            def do_POST(self):
                length = int(self.headers.get("Content-Length") or 0)
                raw = self.rfile.read(length) if length else b""
                exchange.hits.append(
                    {"path": self.path, "headers": dict(self.headers), "body": json.loads(raw or b"null")}
                )
                status, body = exchange.routes.get(self.path, (200, {"result": None}))
                payload = json.dumps(body).encode()
                self.send_response(status)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(payload)))
                self.end_headers()
                self.wfile.write(payload)

            def log_message(self, format, *args):
                pass

        self.server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        self.url = f"http://127.0.0.1:{self.server.server_address[1]}"
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)

    def start(self):
        self.thread.start()

    def stop(self):
        self.server.shutdown()
        self.server.server_close()


@pytest.fixture
def local_exchange():
    exchange = LocalExchange()
    exchange.start()
    yield exchange
    exchange.stop()


@pytest.fixture
def live_client(local_exchange):
    client = ExchangeClient(local_exchange.url, ClientOptions(timeout=5.0))
    yield client
    client.close()


def _unused_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


async def test_success_sends_json_with_bearer_header(live_client, local_exchange):
    local_exchange.routes["/Session/Signin"] = (
        200,
        {"result": {"session_token": "T", "User": {"user_id": 1, "user_name": "a"}}},
    )
    local_exchange.routes["/Accounts"] = (200, {"result": [{"account_id": 3}]})

    await live_client.authenticate("a@b.com", "x")
    accounts = await live_client.accounts.list()

    assert accounts == [{"account_id": 3}]
    signin, listing = local_exchange.hits
    assert signin["body"] == {"email_address": "a@b.com", "password": "x"}
    assert "Authorization" not in signin["headers"]
    assert listing["headers"]["Content-Type"] == "application/json"
    assert listing["headers"]["Authorization"] == "Bearer T"


async def test_server_error_is_single_attempt_network_error(live_client, local_exchange):
    local_exchange.routes["/Orders"] = (500, {"error": "boom"})

    with pytest.raises(CommandError) as excinfo:
        await live_client.orders.list(3)

    assert excinfo.value.kind is ErrorKind.NETWORK
    assert excinfo.value.status_code == 500
    assert str(excinfo.value) == "In command [/Orders]; Network error: [500] Internal Server Error"
    assert len(local_exchange.hits) == 1


async def test_api_error_body_over_http(live_client, local_exchange):
    local_exchange.routes["/Account/Funding"] = (200, {"error": "insufficient funds"})

    with pytest.raises(CommandError, match=r"^In command \[/Account/Funding\]; insufficient funds$"):
        await live_client.accounts.test_withdraw(3, 100)


async def test_refused_connection_reports_empty_response_with_code():
    client = ExchangeClient(f"http://127.0.0.1:{_unused_port()}", ClientOptions(timeout=5.0))
    log = []
    try:
        result = await client.accounts.list(CallOptions(callback=Recorder("call", log)))
    finally:
        client.close()

    assert result is None
    assert log == [
        ("call", "In command [/Accounts]; Received an empty response from the server. [ECONNREFUSED]", None)
    ]


async def test_unserializable_parameters_reach_callbacks(live_client, local_exchange):
    log = []

    result = await live_client.dispatcher.dispatch(
        "/Accounts", {"x": {1, 2}}, CallOptions(callback=Recorder("call", log))
    )

    assert result is None
    assert local_exchange.hits == []
    [(name, message, payload)] = log
    assert name == "call"
    assert payload is None
    assert message.startswith("In command [/Accounts]; ")
    assert "not JSON serializable" in message


async def test_unserializable_parameters_raise_command_error(live_client, local_exchange):
    with pytest.raises(CommandError) as excinfo:
        await live_client.dispatcher.dispatch("/Accounts", {"x": {1, 2}})

    assert excinfo.value.kind is ErrorKind.GENERIC
    assert local_exchange.hits == []


async def test_unencodable_token_reaches_callbacks(live_client, local_exchange):
    live_client.state.attach_delegate(FakeDelegate("tök€n"))
    log = []

    result = await live_client.accounts.list(CallOptions(callback=Recorder("call", log)))

    assert result is None
    assert local_exchange.hits == []
    [(name, message, payload)] = log
    assert message.startswith("In command [/Accounts]; ")
    assert "latin-1" in message
