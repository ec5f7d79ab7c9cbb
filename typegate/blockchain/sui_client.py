"""Sui full node JSON-RPC client over WebSocket."""

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from websockets.asyncio.client import ClientConnection, connect as ws_connect
from websockets.protocol import State

logger = logging.getLogger(__name__)

OBJECT_TYPE_OPTIONS = {"showType": True}


@dataclass
class Checkpoint:
    sequence_number: int


class SuiError(Exception):
    """Base exception for Sui RPC errors."""

class SuiConnectionError(SuiError):
    """Connection-related errors."""

class SuiQueryError(SuiError):
    """Query-related errors."""

class SuiObjectNotFound(SuiQueryError):
    """Object does not exist or was deleted."""


class SuiClient:
    """Async client for the Sui JSON-RPC API."""
    
    def __init__(self, url: str = "wss://fullnode.mainnet.sui.io:443", timeout: float = 30.0):
        self.url = url
        self.timeout = timeout
        self._ws: Optional[ClientConnection] = None
        self._request_id = 0
    
    async def connect(self) -> bool:
        """Connect to the full node. Returns True on success."""
        try:
            # Multi-object responses can be large
            self._ws = await ws_connect(self.url, max_size=50 * 1024 * 1024)
            logger.info(f"Connected to Sui node at {self.url}")
            return True
        except ConnectionRefusedError:
            logger.error(f"Connection refused. Is a Sui node reachable at {self.url}?")
            return False
        except Exception as e:
            logger.error(f"Failed to connect to Sui node: {e}")
            return False
    
    async def disconnect(self):
        if self._ws:
            await self._ws.close()
            self._ws = None
            logger.info("Disconnected from Sui node")
    
    @property
    def is_connected(self) -> bool:
        return self._ws is not None and self._ws.state is State.OPEN
    
    async def __aenter__(self):
        if not await self.connect():
            raise SuiConnectionError(f"Failed to connect to {self.url}")
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()
    
    def _next_request_id(self) -> int:
        self._request_id += 1
        return self._request_id
    
    async def _send_request(self, method: str, params: Optional[List[Any]] = None) -> Any:
        """Send JSON-RPC request and wait for response."""
        if not self._ws:
            raise SuiConnectionError("Not connected to Sui node")
        
        request = {"jsonrpc": "2.0", "id": self._next_request_id(), "method": method, "params": params or []}
        
        try:
            await self._ws.send(json.dumps(request))
            response = json.loads(await asyncio.wait_for(self._ws.recv(), timeout=self.timeout))
        except asyncio.TimeoutError:
            raise SuiQueryError(f"Request timed out after {self.timeout}s: {method}")
        except Exception as e:
            raise SuiQueryError(f"Request failed: {e}")
        
        if "error" in response:
            err = response["error"]
            raise SuiQueryError(f"Sui error: {err.get('message', err) if isinstance(err, dict) else err}")
        if "result" in response:
            return response["result"]
        raise SuiQueryError(f"Malformed response to {method}: {response}")
    
    async def get_object(self, object_id: str) -> Dict[str, Any]:
        """Object data (with its type) for one object ID."""
        result = await self._send_request("sui_getObject", [object_id, OBJECT_TYPE_OPTIONS])
        if "error" in result:
            raise SuiObjectNotFound(f"Object {object_id[:16]}.. unavailable: {result['error']}")
        return result.get("data", {})
    
    async def get_objects(self, object_ids: List[str]) -> List[Dict[str, Any]]:
        """Object data for several IDs, in request order. Missing objects are dropped."""
        result = await self._send_request("sui_multiGetObjects", [object_ids, OBJECT_TYPE_OPTIONS])
        return [r["data"] for r in result if isinstance(r, dict) and "data" in r]
    
    async def get_chain_identifier(self) -> str:
        return await self._send_request("sui_getChainIdentifier")
    
    async def get_latest_checkpoint(self) -> Checkpoint:
        seq = await self._send_request("sui_getLatestCheckpointSequenceNumber")
        return Checkpoint(sequence_number=int(seq))
    
    async def health_check(self) -> Dict[str, Any]:
        try:
            checkpoint = await self.get_latest_checkpoint()
            chain = await self.get_chain_identifier()
            return {"status": "healthy", "connected": True, "chain": chain, "checkpoint": checkpoint.sequence_number}
        except Exception as e:
            return {"status": "unhealthy", "connected": False, "error": str(e)}
