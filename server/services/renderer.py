# server/services/renderer.py
"""Frame rendering: turns a session snapshot into a drawable payload."""

from dataclasses import asdict
from typing import Iterable

from models.entities import Asteroid, SessionMeta, Ship, Star


def _hud(meta: SessionMeta) -> list:
    """HUD text items, in draw order."""
    items = []
    if meta.gameStarted:
        items.append({"text": f"Time: {meta.elapsedTime:.1f}s", "x": 10, "y": 30, "color": "white", "font": "20px sans-serif"})
        items.append({"text": f"High Score: {meta.highScore:.1f}s", "x": 10, "y": 60, "color": "yellow", "font": "20px sans-serif"})

    center_x = meta.canvasWidth / 2
    center_y = meta.canvasHeight / 2
    if meta.gameOver:
        items.append({"text": "GAME OVER!", "x": center_x, "y": center_y - 20, "color": "#0f0", "font": "bold 50px Trebuchet MS", "align": "center"})
        items.append({"text": "Press R to Restart", "x": center_x, "y": center_y + 30, "color": "#0f0", "font": "20px Trebuchet MS", "align": "center"})
    elif meta.paused:
        items.append({"text": "Paused", "x": center_x, "y": center_y, "color": "white", "font": "30px sans-serif", "align": "center"})
    return items


def render_frame(
    ship: Ship, asteroids: Iterable[Asteroid], stars: Iterable[Star], meta: SessionMeta
) -> dict:
    """Build one frame for the client canvas. Arguments are only read."""
    show_ship = meta.gameStarted and not meta.gameOver
    return {
        "type": "frame",
        "state": meta.state.value,
        "elapsedTime": meta.elapsedTime,
        "highScore": meta.highScore,
        "stars": [asdict(star) for star in stars],
        "ship": asdict(ship) if show_ship else None,
        "asteroids": [asdict(asteroid) for asteroid in asteroids],
        "hud": _hud(meta),
    }
