"""
Tests for the FastAPI payment middleware.
"""

import base64
import json
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from x402_stacks import STACKS_MAINNET, TOKENS
from x402_stacks.facilitator import StacksFacilitator
from x402_stacks.fastapi import X402Middleware, x402_protected

RECIPIENT = "SP2ZNGJ85ENDY6QRHQ5P2D4FXKGZWCKTB2T0Z55KS"
TX_ID = "0x" + "ab" * 32
PRICE = "10000"


def _header(data) -> str:
    return base64.b64encode(json.dumps(data).encode()).decode()


def _decode(value: str):
    return json.loads(base64.b64decode(value))


@pytest.fixture
def fetcher():
    mock = AsyncMock()
    mock.get_transaction = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def client(fetcher):
    facilitator = StacksFacilitator(fetchers={STACKS_MAINNET: fetcher})
    middleware = X402Middleware(facilitator)
    app = FastAPI()

    @app.get("/premium")
    @middleware.protect(amount=PRICE, recipient=RECIPIENT, token="sBTC")
    async def premium(request: Request):
        return {"secret": "The answer is 42"}

    @app.get("/free")
    async def free():
        return {"message": "This is free!"}

    return TestClient(app)


def test_free_route_untouched(client):
    assert client.get("/free").status_code == 200


def test_missing_header_returns_challenge(client, fetcher):
    response = client.get("/premium")
    assert response.status_code == 402
    body = response.json()
    assert body["error"] == "Payment Required"
    assert body["paymentRequirements"]["token"] == TOKENS["sBTC"].address
    assert body["paymentRequirements"]["amount"] == PRICE
    assert body["paymentRequirements"]["recipient"] == RECIPIENT
    fetcher.get_transaction.assert_not_awaited()


def test_undecodable_header(client):
    response = client.get("/premium", headers={"X-PAYMENT": "%%%"})
    assert response.status_code == 400
    assert response.json()["error"] == "Payment Error"


def test_header_without_tx_id(client):
    response = client.get("/premium", headers={"X-PAYMENT": _header({"token": "native"})})
    assert response.status_code == 400


def test_invalid_payment_reissues_challenge(client):
    response = client.get("/premium", headers={"X-PAYMENT": _header({"txId": TX_ID})})
    assert response.status_code == 402
    body = response.json()
    assert body["error"] == "Payment Invalid"
    assert body["reason"] == f"Transaction not found: {TX_ID}"
    assert body["paymentRequirements"]["amount"] == PRICE


def test_wrong_token_is_rejected(client, fetcher):
    response = client.get(
        "/premium", headers={"X-PAYMENT": _header({"txId": TX_ID, "token": "native"})}
    )
    assert response.status_code == 402
    assert response.json()["reason"] == "Unsupported payment token: native"
    fetcher.get_transaction.assert_not_awaited()


def test_valid_payment_unlocks_resource(client, fetcher, sip010_record):
    fetcher.get_transaction.return_value = sip010_record(amount=int(PRICE), tx_id=TX_ID)
    response = client.get(
        "/premium",
        headers={"X-PAYMENT": _header({"txId": TX_ID, "token": TOKENS["sBTC"].address})},
    )
    assert response.status_code == 200
    assert response.json() == {"secret": "The answer is 42"}
    assert _decode(response.headers["X-PAYMENT-RESPONSE"]) == {"success": True, "txId": TX_ID}
    fetcher.get_transaction.assert_awaited_once_with(TX_ID)


def test_protect_validates_token_at_startup():
    from x402_stacks.exceptions import UnknownTokenError

    with pytest.raises(UnknownTokenError):
        x402_protected(amount="1", recipient=RECIPIENT, token="DOGE")


def test_protect_rejects_unknown_network():
    with pytest.raises(ValueError):
        X402Middleware().protect(amount="1", recipient=RECIPIENT, network="unknown:1")
