"""Tests for the WebSocket game transport."""

from models.entities import SessionState


def _receive_until(websocket, predicate, limit=500):
    for _ in range(limit):
        message = websocket.receive_json()
        if predicate(message):
            return message
    raise AssertionError("expected message never arrived")


def test_connection_receives_config_and_first_frame(client):
    with client.websocket_connect("/ws?name=Ann&width=640&height=480") as websocket:
        init = websocket.receive_json()

    assert init["type"] == "init"
    assert init["player"] == "Ann"
    assert init["config"]["canvasWidth"] == 640
    assert init["config"]["canvasHeight"] == 480
    assert init["frame"]["state"] == "not_started"


def test_bad_dimensions_fall_back_to_defaults(client):
    with client.websocket_connect("/ws?width=abc&height=-5") as websocket:
        init = websocket.receive_json()

    assert init["player"] is None
    assert (init["config"]["canvasWidth"], init["config"]["canvasHeight"]) == (800, 600)


def test_commands_drive_the_session(client):
    with client.websocket_connect("/ws?name=Ann") as websocket:
        websocket.receive_json()

        websocket.send_json({"type": "start"})
        _receive_until(websocket, lambda m: m["type"] == "audio" and m["action"] == "play" and m["sound"] == "background")
        _receive_until(websocket, lambda m: m["type"] == "frame" and m["state"] == "running")

        websocket.send_json({"type": "bogus"})
        websocket.send_json({"type": "input", "up": "yes"})
        websocket.send_json({"type": "pause"})
        _receive_until(websocket, lambda m: m["type"] == "frame" and m["state"] == "paused")

        websocket.send_json({"type": "mute"})
        _receive_until(websocket, lambda m: m["type"] == "audio" and m["action"] == "volume" and m["volume"] == 0.0)

        websocket.send_json({"type": "restart"})
        frame = _receive_until(websocket, lambda m: m["type"] == "frame" and m["state"] == "running")
        assert frame["ship"] is not None


def test_message_mapping_without_socket(client):
    service = client.app.state.websocket_service
    controller = service.create_controller("Bob", 800, 600)

    service._process_message(controller, {"type": "start"})
    service._process_message(controller, {"type": "input", "up": True})
    assert controller.session.input.up is True

    service._process_message(controller, {"type": "toggle_pause"})
    assert controller.state is SessionState.PAUSED

    service._process_message(controller, ["not", "a", "dict"])
    service._process_message(controller, {"type": "resume"})
    assert controller.state is SessionState.RUNNING


def test_malformed_frames_are_ignored(client):
    with client.websocket_connect("/ws?name=Ann") as websocket:
        websocket.receive_json()

        websocket.send_text("not json")
        websocket.send_bytes(b"\xff\x00")
        websocket.send_json({"type": "start"})

        frame = _receive_until(websocket, lambda m: m["type"] == "frame" and m["state"] == "running")
        assert frame["ship"] is not None
