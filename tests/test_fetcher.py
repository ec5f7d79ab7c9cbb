"""Fetcher and SuiChainClient with in-memory chain data."""

import asyncio
import json

import pytest
from websockets.protocol import State

from typegate.blockchain import SuiClient, SuiQueryError
from typegate.fetching import Fetcher, SuiChainClient
from typegate.parsing import MalformedAddress

FRAMEWORK = "0" * 63 + "2"
PACKAGE = "98c8b10337a98bc3f844253a6075e6db911948880346b989f6650364a09f76f0"

OBJECTS = {
    "0xcoin": "0x2::coin::Coin<0x2::sui::SUI>",
    "0xcap": f"0x{PACKAGE}::dispenser::AdminCap",
    "0xbad": "0xzz::m::S",
}


class FakeChainClient:
    def __init__(self, objects):
        self.objects = objects

    async def get_object_type(self, object_id):
        return self.objects.get(object_id)

    async def get_object_types(self, object_ids):
        return {i: self.objects[i] for i in object_ids if i in self.objects}


class FakeSuiClient:
    async def get_object(self, object_id):
        return {"objectId": object_id, "type": OBJECTS[object_id]}

    async def get_objects(self, object_ids):
        return [{"objectId": i, "type": OBJECTS[i]} for i in object_ids if i in OBJECTS] + [{"objectId": "0xpkg"}]


def make_fetcher(address_length=32):
    return Fetcher(FakeChainClient(OBJECTS), address_length)


def test_fetch_signature():
    sig = asyncio.run(make_fetcher().fetch_signature("0xcoin"))
    assert sig.address_hex == FRAMEWORK
    assert (sig.module_name, sig.struct_name) == ("coin", "Coin")
    assert sig.generic_arguments == (f"{FRAMEWORK}::sui::SUI",)


def test_fetch_signature_missing():
    assert asyncio.run(make_fetcher().fetch_signature("0xnone")) is None


def test_fetch_signature_parse_error_propagates():
    fetcher = Fetcher(FakeChainClient({"0xbad": "zz::m::S"}), 1)
    with pytest.raises(MalformedAddress):
        asyncio.run(fetcher.fetch_signature("0xbad"))


def test_fetch_signatures_skips_unparseable():
    fetcher = Fetcher(FakeChainClient({"0xok": "01::m::S", "0xbad": "zz::m::S"}), 1)
    signatures = asyncio.run(fetcher.fetch_signatures(["0xok", "0xbad", "0xnone"]))
    assert list(signatures) == ["0xok"]
    assert signatures["0xok"].struct_name == "S"


def test_object_matches():
    fetcher = make_fetcher()
    assert asyncio.run(fetcher.object_matches("0xcoin", "0x2::coin::Coin<0x2::sui::SUI>"))
    assert asyncio.run(fetcher.object_matches("0xcap", f"{PACKAGE}::dispenser::AdminCap"))
    assert not asyncio.run(fetcher.object_matches("0xcoin", "0x2::coin::Coin<u64>"))
    assert not asyncio.run(fetcher.object_matches("0xnone", "0x2::coin::Coin<0x2::sui::SUI>"))


def test_sui_chain_client():
    client = SuiChainClient(FakeSuiClient())
    assert asyncio.run(client.get_object_type("0xcap")) == OBJECTS["0xcap"]
    types = asyncio.run(client.get_object_types(["0xcoin", "0xcap"]))
    assert types == {"0xcoin": OBJECTS["0xcoin"], "0xcap": OBJECTS["0xcap"]}
    assert asyncio.run(client.get_object_types([])) == {}


class ReplySocket:
    """Answers every request with the same JSON-RPC response."""

    def __init__(self, response):
        self.response = response
        self.state = State.OPEN

    async def send(self, message):
        pass

    async def recv(self):
        return json.dumps(self.response)


def make_sui_fetcher(response):
    sui = SuiClient(url="ws://test")
    sui._ws = ReplySocket(response)
    return Fetcher(SuiChainClient(sui), 32)


def test_missing_object_never_matches():
    fetcher = make_sui_fetcher({"jsonrpc": "2.0", "id": 1, "result": {"error": {"code": "notExists", "object_id": "0xgone"}}})
    assert not asyncio.run(fetcher.object_matches("0xgone", "0x2::coin::Coin<0x2::sui::SUI>"))
    assert asyncio.run(fetcher.fetch_signature("0xgone")) is None


def test_rpc_failure_still_propagates():
    fetcher = make_sui_fetcher({"jsonrpc": "2.0", "id": 1, "error": {"code": -32000, "message": "overloaded"}})
    with pytest.raises(SuiQueryError, match="overloaded"):
        asyncio.run(fetcher.object_matches("0xcoin", "0x2::coin::Coin<0x2::sui::SUI>"))


def test_existing_object_through_sui_client():
    fetcher = make_sui_fetcher({"jsonrpc": "2.0", "id": 1, "result": {"data": {"objectId": "0xcoin", "type": OBJECTS["0xcoin"]}}})
    assert asyncio.run(fetcher.object_matches("0xcoin", f"{FRAMEWORK}::coin::Coin<{FRAMEWORK}::sui::SUI>"))
