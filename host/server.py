from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Dict, List, Optional, Tuple

import websockets
from websockets.asyncio.server import ServerConnection, serve

from tricard.models import RoundConfig
from tricard.showdown import evaluate_records, outcome_payload

LOGGER = logging.getLogger("tricard_host")

HEALTH_PATHS = {"/", "/health", "/healthz"}

# ShowdownHost exposes round evaluation to WebSocket clients.
# Parsing and ranking stay in tricard; this module only handles sockets and JSON.


@dataclass
class HostStats:
    connections: int = 0
    rounds_evaluated: int = 0
    rounds_rejected: int = 0


class ShowdownHost:
    def __init__(self, config: Optional[RoundConfig] = None) -> None:
        self.config = config or RoundConfig()
        self.stats = HostStats()

    async def start(self, host: str = "0.0.0.0", port: int = 8765) -> None:
        async with serve(self._handle_connection, host, port, process_request=self._process_request):
            LOGGER.info("Showdown host listening on %s:%s", host, port)
            await asyncio.Future()

    def _process_request(self, connection: ServerConnection, request):
        """Answer plain HTTP health checks; let WebSocket upgrades through."""
        if request.headers.get("Upgrade", "").lower() == "websocket":
            return None
        if request.path in HEALTH_PATHS:
            return connection.respond(HTTPStatus.OK, "showdown host running\n")
        return connection.respond(HTTPStatus.NOT_FOUND, "not found\n")

    async def _handle_connection(self, websocket: ServerConnection) -> None:
        self.stats.connections += 1
        LOGGER.info("Client connected from %s", websocket.remote_address)
        try:
            async for raw in websocket:
                await self._handle_message(websocket, raw)
        except websockets.ConnectionClosed:
            pass
        finally:
            LOGGER.info("Client %s disconnected", websocket.remote_address)

    async def _handle_message(self, websocket: ServerConnection, raw: str) -> None:
        message = self._decode(raw)
        if message is None:
            await self._send_error(websocket, code="BAD_JSON", msg="Expected a JSON object")
            return
        msg_type = message.get("type")
        if msg_type == "evaluate":
            await self._handle_evaluate(websocket, message)
        elif msg_type == "stats":
            await self._send_json(websocket, "stats", asdict(self.stats))
        else:
            await self._send_error(websocket, code="UNKNOWN_TYPE", msg="Unsupported message type")

    async def _handle_evaluate(self, websocket: ServerConnection, message: Dict[str, object]) -> None:
        round_id = message.get("round_id")
        players = message.get("players")
        if not isinstance(players, list) or not all(isinstance(entry, dict) for entry in players):
            self.stats.rounds_rejected += 1
            await self._send_error(
                websocket,
                code="BAD_SCHEMA",
                msg="players must be a list of {id, cards} objects",
                round_id=round_id,
            )
            return

        records: List[Tuple[object, object]] = [(entry.get("id"), entry.get("cards")) for entry in players]
        outcome = evaluate_records(records, self.config)
        payload = outcome_payload(outcome)
        if outcome.error is not None:
            self.stats.rounds_rejected += 1
            LOGGER.warning("Rejected round %s: %s", round_id, outcome.error)
            await self._send_json(websocket, "error", {"round_id": round_id, **payload})
            return

        self.stats.rounds_evaluated += 1
        LOGGER.debug("Round %s winners=%s", round_id, outcome.winners)
        await self._send_json(websocket, "result", {"round_id": round_id, **payload})

    async def _send_json(self, websocket: ServerConnection, msg_type: str, payload: Dict[str, object]) -> None:
        try:
            await websocket.send(self._envelope(msg_type, payload))
        except websockets.ConnectionClosed:
            pass

    async def _send_error(self, websocket: ServerConnection, code: str, msg: str, round_id: object = None) -> None:
        payload: Dict[str, object] = {"code": code, "msg": msg}
        if round_id is not None:
            payload["round_id"] = round_id
        await self._send_json(websocket, "error", payload)

    def _envelope(self, msg_type: str, payload: Dict[str, object]) -> str:
        body = {"type": msg_type, "v": 1, "ts": datetime.now(timezone.utc).isoformat()}
        body.update(payload)
        return json.dumps(body)

    def _decode(self, raw: str) -> Optional[Dict[str, object]]:
        try:
            message = json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            return None
        return message if isinstance(message, dict) else None
