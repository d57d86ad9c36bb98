"""
Pytest configuration and fixtures
"""

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any

import pytest

RECIPIENT = "SP2ZNGJ85ENDY6QRHQ5P2D4FXKGZWCKTB2T0Z55KS"
SENDER = "SP1HTBVD3JG9C05J7HBJTHGR0GGW7KXW28M5JS8QE"
SBTC_ADDRESS = "SP3K8BC0PPEVCV7NZ6QSRWPQ2JE9E5B6N3PA0KBR9.token-sbtc"
TX_ID = "0x" + "ab" * 32


@pytest.fixture
def anyio_backend():
    return "asyncio"


def make_stx_transfer(
    recipient: str = RECIPIENT,
    amount: str = "1000",
    status: str = "success",
    tx_id: str = TX_ID,
) -> dict[str, Any]:
    """Indexer record for a native STX transfer"""
    return {
        "tx_id": tx_id,
        "tx_status": status,
        "tx_type": "token_transfer",
        "sender_address": SENDER,
        "block_height": 150000,
        "token_transfer": {
            "recipient_address": recipient,
            "amount": amount,
            "memo": "0x",
        },
    }


def make_sip010_transfer(
    recipient: str = RECIPIENT,
    amount: int = 1000,
    contract_id: str = SBTC_ADDRESS,
    function_name: str = "transfer",
    status: str = "success",
    tx_id: str = TX_ID,
    args: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Indexer record for a SIP-010 transfer contract call"""
    if args is None:
        args = [
            {"hex": "0x01", "repr": f"u{amount}", "name": "amount", "type": "uint"},
            {"hex": "0x05", "repr": f"'{SENDER}", "name": "sender", "type": "principal"},
            {"hex": "0x05", "repr": f"'{recipient}", "name": "recipient", "type": "principal"},
            {"hex": "0x09", "repr": "none", "name": "memo", "type": "(optional (buff 34))"},
        ]
    return {
        "tx_id": tx_id,
        "tx_status": status,
        "tx_type": "contract_call",
        "sender_address": SENDER,
        "block_height": 150000,
        "contract_call": {
            "contract_id": contract_id,
            "function_name": function_name,
            "function_signature": "(define-public (transfer ...))",
            "function_args": args,
        },
    }


@pytest.fixture
def stx_transfer():
    return make_stx_transfer()


@pytest.fixture
def sbtc_transfer():
    return make_sip010_transfer()


@pytest.fixture
def stx_record():
    """Factory for native STX transfer records"""
    return make_stx_transfer


@pytest.fixture
def sip010_record():
    """Factory for SIP-010 transfer records"""
    return make_sip010_transfer


@pytest.fixture
def indexer_server(monkeypatch):
    """Local HTTP indexer serving the records placed in its ``records`` dict"""
    for var in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(var, raising=False)

    records: dict[str, dict[str, Any]] = {}

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            tx_id = self.path.rsplit("/", 1)[-1]
            record = records.get(tx_id)
            body = json.dumps(record if record is not None else {"error": "not found"}).encode()
            self.send_response(200 if record is not None else 404)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format, *args):
            pass

    server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    server.records = records
    server.url = f"http://127.0.0.1:{server.server_address[1]}"
    yield server
    server.shutdown()
    server.server_close()
