# server/services/audio.py
"""Audio triggers forwarded to the client."""

from typing import Dict, List

from config.settings import DEFAULT_VOLUME, VOLUME_STEP

EXPLOSION = "explosion"
BACKGROUND = "background"


class AudioSink:
    """Collects fire-and-forget audio events for the transport to drain.

    The sink only tracks mute and volume; playback happens on the client.
    """

    def __init__(self, volume: float = DEFAULT_VOLUME):
        self.volume = volume
        self.muted = False
        self._pending: List[Dict] = []

    @property
    def effective_volume(self) -> float:
        return 0.0 if self.muted else self.volume

    def trigger(self, effect: str):
        """Play a sound from the start."""
        self._pending.append({"type": "audio", "action": "play", "sound": effect, "volume": self.effective_volume})

    def stop(self, track: str):
        """Stop and rewind a sound."""
        self._pending.append({"type": "audio", "action": "stop", "sound": track, "volume": self.effective_volume})

    def set_muted(self, muted: bool):
        self.muted = bool(muted)
        # Muting zeroes the level, so stepping up from mute starts at silence
        self.volume = 0.0 if self.muted else DEFAULT_VOLUME
        self._pending.append({"type": "audio", "action": "volume", "volume": self.effective_volume})

    def toggle_mute(self):
        self.set_muted(not self.muted)

    def volume_up(self):
        self._step_volume(VOLUME_STEP)

    def volume_down(self):
        self._step_volume(-VOLUME_STEP)

    def _step_volume(self, step: float):
        # Adjusting the volume always unmutes
        self.muted = False
        self.volume = round(min(max(self.volume + step, 0.0), 1.0), 2)
        self._pending.append({"type": "audio", "action": "volume", "volume": self.effective_volume})

    def drain(self) -> List[Dict]:
        """Return and clear the queued events."""
        events, self._pending = self._pending, []
        return events
