# server/services/game_controller.py
"""Session lifecycle and the per-frame update/render loop."""

import asyncio
import time
from typing import Any, Awaitable, Callable, Optional, Set

from models.entities import InputState, SessionState
from config.settings import MAX_FRAME_DELTA, UPDATE_RATE
from services.audio import BACKGROUND, EXPLOSION, AudioSink
from services.game_service import GameSession
from services.renderer import render_frame
from utils.logging_config import get_logger

logger = get_logger(__name__)


class GameController:
    """Drives one GameSession: start/pause/resume/restart plus the frame tick.

    The controller is the only mutator of its session. Collaborators
    (render sink, audio sink, scoreboard) are injected so transports and
    tests can supply their own.
    """

    def __init__(
        self,
        session: GameSession,
        render_sink: Callable[..., Any] = render_frame,
        audio: Optional[AudioSink] = None,
        scoreboard=None,
        player_name: Optional[str] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.session = session
        self.render_sink = render_sink
        self.audio = audio or AudioSink()
        self.scoreboard = scoreboard
        self.player_name = player_name
        self.clock = clock
        self.last_time = clock()
        self._running = False
        self._scoreboard_tasks: Set[asyncio.Task] = set()

    @property
    def state(self) -> SessionState:
        return self.session.state

    def start(self):
        """Begin the session. Calling it again has no effect."""
        if self.session.state is not SessionState.NOT_STARTED:
            return
        self._load_high_score()
        self.session.state = SessionState.RUNNING
        self.last_time = self.clock()
        self.audio.trigger(BACKGROUND)
        logger.info("Session started", player=self.player_name, high_score=self.session.high_score)

    def pause(self):
        if self.session.state is not SessionState.RUNNING:
            return
        self.session.state = SessionState.PAUSED
        self.audio.stop(BACKGROUND)
        logger.debug("Session paused", player=self.player_name)

    def resume(self):
        if self.session.state is not SessionState.PAUSED:
            return
        self.session.state = SessionState.RUNNING
        self.last_time = self.clock()
        self.audio.trigger(BACKGROUND)
        logger.debug("Session resumed", player=self.player_name)

    def toggle_pause(self):
        if self.session.state is SessionState.PAUSED:
            self.resume()
        else:
            self.pause()

    def restart(self):
        """Throw away the current run and start a fresh one, from any state."""
        self.session.reset()
        self.last_time = self.clock()
        self._load_high_score()
        self.audio.trigger(BACKGROUND)
        logger.info("Session restarted", player=self.player_name)

    def set_input(self, input_state: InputState):
        self.session.input = input_state

    def tick(self) -> Any:
        """Run one frame: update the session, then hand a snapshot to the render sink."""
        now = self.clock()
        delta_time = min(max(now - self.last_time, 0.0), MAX_FRAME_DELTA)
        self.last_time = now

        was_running = self.session.state is SessionState.RUNNING
        self.session.update(delta_time)
        if was_running and self.session.state is SessionState.GAME_OVER:
            self._on_game_over()

        ship, asteroids, stars, meta = self.session.snapshot()
        return self.render_sink(ship, asteroids, stars, meta)

    async def run(self, send: Callable[[Any], Awaitable[None]], rate: float = UPDATE_RATE):
        """Tick continuously until stop() is called."""
        self._running = True
        self.last_time = self.clock()
        while self._running:
            frame = self.tick()
            await send(frame)
            await asyncio.sleep(1 / rate)

    def stop(self):
        self._running = False

    async def wait_for_scoreboard(self):
        """Wait until every outstanding scoreboard call has settled."""
        while self._scoreboard_tasks:
            await asyncio.gather(*self._scoreboard_tasks)

    def _on_game_over(self):
        score = self.session.score
        logger.info("Session over", player=self.player_name, score=score)
        self.audio.trigger(EXPLOSION)
        self.audio.stop(BACKGROUND)

        if self.scoreboard is None or not self.player_name:
            return

        def failed(e: Exception):
            logger.warning("Could not submit score", player=self.player_name, score=score, error=str(e))

        self._call_scoreboard(self.scoreboard.submit_score, (self.player_name, score), on_error=failed)

    def _load_high_score(self):
        """Fetch the global high score; any failure leaves a zero baseline."""
        if self.scoreboard is None:
            return
        self._call_scoreboard(self.scoreboard.fetch_high_score, (), self._set_high_score, self._high_score_failed)

    def _set_high_score(self, score):
        self.session.high_score = float(score)

    def _high_score_failed(self, e: Exception):
        logger.warning("Could not fetch global high score", error=str(e))
        self.session.high_score = 0.0

    def _call_scoreboard(self, call: Callable, args: tuple, on_result=None, on_error=None):
        """Run a blocking scoreboard call.

        Inside an event loop the call goes to a worker thread and the frame
        loop carries on; callbacks run back on the loop once it settles.
        Without a running loop the call completes inline.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            try:
                result = call(*args)
            except Exception as e:
                on_error(e)
            else:
                if on_result is not None:
                    on_result(result)
            return

        task = loop.create_task(self._offload(call, args, on_result, on_error))
        self._scoreboard_tasks.add(task)
        task.add_done_callback(self._scoreboard_tasks.discard)

    async def _offload(self, call: Callable, args: tuple, on_result, on_error):
        try:
            result = await asyncio.to_thread(call, *args)
        except Exception as e:
            on_error(e)
            return
        if on_result is not None:
            on_result(result)
