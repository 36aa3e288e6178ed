"""
Microdot web server for the Fifths Wheel.

One application instance serves one wheel session. Every request pushes its
input into the web ports, runs one FifthsWheelApp.update() cycle and
responds with the rendered frame.
"""
import json
import logging
import math

from microdot import Microdot
from microdot.websocket import with_websocket

from fifths_wheel import FifthsWheelApp
from fifths_wheel.constants import Notation

from .exceptions import InvalidRequest, UnknownAction
from .web_hal import create_web_port

logger = logging.getLogger(__name__)


def _require_body(data):
    if not isinstance(data, dict):
        raise InvalidRequest("expected a JSON object body")
    return data


def _number(data, field):
    """Read a numeric field; booleans and strings are rejected."""
    value = _require_body(data).get(field)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidRequest("'" + field + "' must be a number")
    if not math.isfinite(value):
        raise InvalidRequest("'" + field + "' must be finite")
    return value


def _json_body(request):
    """Decoded JSON body, or None when the request has none."""
    try:
        return request.json
    except ValueError:
        raise InvalidRequest("body is not valid JSON")


def _integer(data, field):
    value = _number(data, field)
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidRequest("'" + field + "' must be an integer")
        value = int(value)
    return value


def _notation(data):
    value = _require_body(data).get("notation")
    if value not in Notation.ALL:
        raise InvalidRequest(
            "'notation' must be one of: " + ", ".join(Notation.ALL)
        )
    return value


class WheelSession:
    """
    A wheel session plus its web ports.
    Translates actions into port input and runs the update cycle.
    """

    def __init__(self, notation=Notation.DEFAULT):
        self.port = create_web_port()
        self.wheel = FifthsWheelApp(self.port, notation=notation)

    def frame(self):
        """Rendered frame plus the numeric key state."""
        chart = self.wheel.state.get_chart()
        frame = dict(self.port.display.frame)
        frame["root_index"] = chart.root_index
        frame["scale_pitch_classes"] = chart.get_scale_pitch_classes()
        frame["functions"] = chart.get_functions()
        return frame

    def apply(self, action, data=None):
        """
        Apply one user action and return the new frame.

        Args:
            action: One of "state", "drag_start", "drag", "drag_end", "key",
                    "step", "reset", "notation"
            data: Decoded JSON body for actions that take arguments

        Raises:
            InvalidRequest: Body is missing or malformed
            UnknownAction: Action is not recognized
        """
        pointer = self.port.pointer
        controls = self.port.controls

        if action == "state":
            pass
        elif action == "drag_start":
            pointer.press()
        elif action == "drag":
            body = _require_body(data)
            if "angle" in body:
                pointer.push_angle(_number(body, "angle"))
            else:
                pointer.push_point(_number(body, "x"), _number(body, "y"))
        elif action == "drag_end":
            pointer.release()
        elif action == "key":
            controls.request_key(_integer(data, "index"))
        elif action == "step":
            controls.request_step(_integer(data, "delta"))
        elif action == "reset":
            controls.request_reset()
        elif action == "notation":
            controls.request_notation(_notation(data))
        else:
            raise UnknownAction("unknown action '" + str(action) + "'")

        self.wheel.update()
        frame = self.frame()
        logger.debug(
            "Applied %s",
            action,
            extra={"action": action, "root_index": frame["root_index"]},
        )
        return frame


def create_app(notation=Notation.DEFAULT):
    """
    Build the Microdot application for one wheel session.

    Args:
        notation: Initial Notation constant

    Returns:
        Microdot app; the session is available as app.session
    """
    app = Microdot()
    session = WheelSession(notation=notation)
    app.session = session

    @app.errorhandler(InvalidRequest)
    async def invalid_request(request, exception):
        logger.info(
            "Rejected request: %s",
            exception,
            extra={"method": request.method, "path": request.path},
        )
        return {"error": str(exception)}, 400

    @app.route("/api/wheel")
    async def get_wheel(request):
        return session.apply("state")

    @app.route("/api/drag/start", methods=["POST"])
    async def drag_start(request):
        return session.apply("drag_start")

    @app.route("/api/drag", methods=["POST"])
    async def drag(request):
        return session.apply("drag", _json_body(request))

    @app.route("/api/drag/end", methods=["POST"])
    async def drag_end(request):
        return session.apply("drag_end")

    @app.route("/api/key", methods=["POST"])
    async def select_key(request):
        return session.apply("key", _json_body(request))

    @app.route("/api/step", methods=["POST"])
    async def step(request):
        return session.apply("step", _json_body(request))

    @app.route("/api/reset", methods=["POST"])
    async def reset(request):
        return session.apply("reset")

    @app.route("/api/notation", methods=["POST"])
    async def notation_toggle(request):
        return session.apply("notation", _json_body(request))

    @app.route("/ws")
    @with_websocket
    async def ws_handler(request, ws):
        """WebSocket handler for continuous drag updates: {"action": ..., ...}"""
        while True:
            message = await ws.receive()
            try:
                data = json.loads(message)
                action = _require_body(data).get("action")
                frame = session.apply(action, data)
                await ws.send(json.dumps({"status": "ok", "frame": frame}))
            except (ValueError, InvalidRequest) as e:
                await ws.send(json.dumps({"status": "error", "message": str(e)}))

    return app
