# server/services/websocket_service.py
"""WebSocket connection management and message handling."""

import asyncio
import json
import random
from typing import Callable, Dict, Optional

from fastapi import WebSocket, WebSocketDisconnect

from models.entities import InputState
from config.settings import CANVAS_HEIGHT, CANVAS_WIDTH, UPDATE_RATE, get_game_config
from services.audio import AudioSink
from services.game_controller import GameController
from services.game_service import GameSession
from utils.logging_config import get_logger

logger = get_logger(__name__)


def _dimension(value: Optional[str], default: int) -> int:
    """Parse a canvas dimension from the query string, falling back on junk."""
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default


class WebSocketService:
    """Binds each WebSocket connection to its own game controller."""

    def __init__(self, scoreboard=None, rng_factory: Callable[[], random.Random] = random.Random, update_rate: float = UPDATE_RATE):
        self.scoreboard = scoreboard
        self.rng_factory = rng_factory
        self.update_rate = update_rate
        self.controllers: Dict[WebSocket, GameController] = {}

    def create_controller(self, name: Optional[str], width: int, height: int) -> GameController:
        """Create a controller with a fresh session for one client."""
        session = GameSession(width, height, rng=self.rng_factory())
        return GameController(
            session,
            audio=AudioSink(),
            scoreboard=self.scoreboard,
            player_name=name.strip() if name and name.strip() else None,
        )

    async def handle_connection(self, websocket: WebSocket):
        """Handle a new WebSocket connection."""
        await websocket.accept()
        params = websocket.query_params
        controller = self.create_controller(
            params.get("name"),
            _dimension(params.get("width"), CANVAS_WIDTH),
            _dimension(params.get("height"), CANVAS_HEIGHT),
        )
        self.controllers[websocket] = controller
        logger.info("WebSocket connection accepted", client=str(websocket.client), player=controller.player_name)

        loop_task = None
        try:
            await self._send_initial_state(websocket, controller)
            loop_task = asyncio.create_task(
                controller.run(lambda frame: self._send_frame(websocket, controller, frame), self.update_rate)
            )
            await self._handle_client_messages(websocket, controller)
        except WebSocketDisconnect:
            logger.info("WebSocket disconnected", player=controller.player_name)
        except Exception as e:
            logger.error("WebSocket error", player=controller.player_name, error=str(e))
        finally:
            controller.stop()
            if loop_task is not None:
                loop_task.cancel()
                try:
                    await loop_task
                except asyncio.CancelledError:
                    pass
                except Exception as e:
                    # The send side fails once the socket is gone
                    logger.debug("Frame loop ended", player=controller.player_name, error=str(e))
            await controller.wait_for_scoreboard()
            self.controllers.pop(websocket, None)

    async def _send_initial_state(self, websocket: WebSocket, controller: GameController):
        """Send configuration and the first frame to a newly connected client."""
        session = controller.session
        await websocket.send_json(
            {
                "type": "init",
                "config": {
                    **get_game_config(),
                    "canvasWidth": session.canvas_width,
                    "canvasHeight": session.canvas_height,
                },
                "player": controller.player_name,
                "frame": controller.tick(),
            }
        )

    async def _send_frame(self, websocket: WebSocket, controller: GameController, frame: dict):
        await websocket.send_json(frame)
        for event in controller.audio.drain():
            await websocket.send_json(event)

    async def _handle_client_messages(self, websocket: WebSocket, controller: GameController):
        """Handle incoming messages from a client."""
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))

            raw = message.get("text")
            if raw is None:
                raw = message.get("bytes")
            try:
                data = json.loads(raw)
            except (TypeError, ValueError):
                # Unreadable frames count as no input
                logger.debug("Ignoring malformed message", player=controller.player_name)
                continue
            self._process_message(controller, data)

    def _process_message(self, controller: GameController, data):
        """Process a single message from a client. Unknown messages are ignored."""
        if not isinstance(data, dict):
            return
        message_type = data.get("type")

        if message_type == "input":
            controller.set_input(InputState.from_message(data))
        elif message_type == "start":
            controller.start()
        elif message_type == "pause":
            controller.pause()
        elif message_type == "resume":
            controller.resume()
        elif message_type == "toggle_pause":
            controller.toggle_pause()
        elif message_type == "restart":
            controller.restart()
        elif message_type == "mute":
            controller.audio.toggle_mute()
        elif message_type == "volume_up":
            controller.audio.volume_up()
        elif message_type == "volume_down":
            controller.audio.volume_down()
