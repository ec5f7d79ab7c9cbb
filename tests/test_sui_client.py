"""SuiClient request/response handling against an in-memory socket."""

import asyncio
import json

import pytest
from websockets.protocol import State

from typegate.blockchain import SuiClient, SuiConnectionError, SuiObjectNotFound, SuiQueryError

OBJECT_ID = "0x3811685776bedf4af159128144edd470e7ba28a3878c6884bfe5c83ee4dda635"


class FakeSocket:
    """Replies to each request with the next canned response (id filled in)."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.sent = []
        self.state = State.OPEN

    async def send(self, message):
        self.sent.append(json.loads(message))

    async def recv(self):
        response = dict(self.responses.pop(0))
        response.setdefault("id", self.sent[-1]["id"])
        return json.dumps(response)

    async def close(self):
        self.state = State.CLOSED


def make_client(*responses):
    client = SuiClient(url="ws://test")
    client._ws = FakeSocket(*responses)
    return client


def test_get_object():
    client = make_client({"jsonrpc": "2.0", "result": {"data": {"objectId": OBJECT_ID, "type": "0x2::coin::Coin<0x2::sui::SUI>"}}})
    data = asyncio.run(client.get_object(OBJECT_ID))
    assert data["type"] == "0x2::coin::Coin<0x2::sui::SUI>"

    request = client._ws.sent[0]
    assert request["method"] == "sui_getObject"
    assert request["params"] == [OBJECT_ID, {"showType": True}]


def test_get_object_not_found():
    client = make_client({"jsonrpc": "2.0", "result": {"error": {"code": "notExists", "object_id": OBJECT_ID}}})
    with pytest.raises(SuiObjectNotFound):
        asyncio.run(client.get_object(OBJECT_ID))


def test_get_objects_drops_missing():
    client = make_client({"jsonrpc": "2.0", "result": [
        {"data": {"objectId": "0x1", "type": "0x2::a::A"}},
        {"error": {"code": "notExists"}},
    ]})
    assert asyncio.run(client.get_objects(["0x1", "0x2"])) == [{"objectId": "0x1", "type": "0x2::a::A"}]


def test_rpc_error():
    client = make_client({"jsonrpc": "2.0", "error": {"code": -32602, "message": "Invalid params"}})
    with pytest.raises(SuiQueryError, match="Invalid params"):
        asyncio.run(client.get_chain_identifier())


def test_request_ids_increase():
    client = make_client({"result": "35834a8a"}, {"result": "1234"})
    assert asyncio.run(client.get_chain_identifier()) == "35834a8a"
    assert asyncio.run(client.get_latest_checkpoint()).sequence_number == 1234
    assert [r["id"] for r in client._ws.sent] == [1, 2]


def test_not_connected():
    client = SuiClient(url="ws://test")
    assert not client.is_connected
    with pytest.raises(SuiConnectionError):
        asyncio.run(client.get_chain_identifier())


def test_health_check():
    client = make_client({"result": "1234"}, {"result": "35834a8a"})
    health = asyncio.run(client.health_check())
    assert health == {"status": "healthy", "connected": True, "chain": "35834a8a", "checkpoint": 1234}


def test_health_check_unhealthy():
    client = make_client({"error": "boom"})
    assert asyncio.run(client.health_check())["status"] == "unhealthy"


def test_disconnect():
    client = make_client()
    assert client.is_connected
    asyncio.run(client.disconnect())
    assert not client.is_connected
