"""
Web Presentation Implementation.
Bridges HTTP/WebSocket requests to the wheel's presentation ports.

Requests push input into queues that FifthsWheelApp.update() drains; the
display records the last rendered frame so it can be sent back as JSON.
"""
from fifths_wheel.hal_protocol import (
    ControlsHAL,
    DisplayHAL,
    PointerHAL,
    WheelPort,
)
from fifths_wheel.rotation import pointer_angle


class WebPointerHAL(PointerHAL):
    """Pointer fed by drag requests from the browser."""

    def __init__(self):
        self._pressed = False
        self._released = False
        self._samples = []

    def press(self):
        """Pointer went down on the wheel."""
        self._pressed = True

    def push_angle(self, angle):
        """Queue a drag sample given as an angle in degrees."""
        self._samples.append(angle)

    def push_point(self, dx, dy):
        """Queue a drag sample given as an offset from the wheel centre."""
        self._samples.append(pointer_angle(dx, dy))

    def release(self):
        """Pointer/touch released."""
        self._released = True

    def update(self):
        pass

    def was_pressed(self):
        if self._pressed:
            self._pressed = False
            return True
        return False

    def get_drag_samples(self):
        samples, self._samples = self._samples, []
        return samples

    def was_released(self):
        if self._released:
            self._released = False
            return True
        return False


class WebControlsHAL(ControlsHAL):
    """Picker, previous/next, reset and notation toggle from the browser."""

    def __init__(self):
        self._key_request = None
        self._step_request = 0
        self._reset = False
        self._notation_request = None

    def request_key(self, index):
        self._key_request = index

    def request_step(self, delta):
        self._step_request += delta

    def request_reset(self):
        self._reset = True

    def request_notation(self, notation):
        self._notation_request = notation

    def update(self):
        pass

    def get_key_request(self):
        key, self._key_request = self._key_request, None
        return key

    def get_step_request(self):
        step, self._step_request = self._step_request, 0
        return step

    def was_reset_pressed(self):
        if self._reset:
            self._reset = False
            return True
        return False

    def get_notation_request(self):
        notation, self._notation_request = self._notation_request, None
        return notation


class WebDisplayHAL(DisplayHAL):
    """Display that keeps the current frame as a JSON-ready dict."""

    def __init__(self):
        self._pending = {}
        self.frame = {}
        self.frames_sent = 0

    def clear(self):
        self._pending = {}
        self.frame = {}

    def show_rotation(self, angle, dragging):
        self._pending["rotation"] = angle
        self._pending["dragging"] = dragging

    def show_key(self, title, scale):
        self._pending["title"] = title
        self._pending["scale"] = [
            {"degree": numeral, "note": name} for numeral, name in scale
        ]

    def show_chord_table(self, numerals, chords):
        self._pending["numerals"] = list(numerals)
        self._pending["chords"] = list(chords)

    def show_wheel_labels(self, root_labels, minor_labels):
        self._pending["rings"] = {
            "root": list(root_labels),
            "minor": list(minor_labels),
        }

    def show_windows(self, windows):
        self._pending["windows"] = [dict(window) for window in windows]

    def show_caption(self, caption):
        self._pending["caption"] = caption

    def show_notation(self, notation, picker_options):
        self._pending["notation"] = notation
        self._pending["picker"] = list(picker_options)

    def update(self):
        """Commit pending changes into the published frame."""
        if self._pending:
            self.frame.update(self._pending)
            self._pending = {}
            self.frames_sent += 1


def create_web_port():
    """
    Factory function to create the web presentation port.

    Returns:
        WheelPort wired to web HALs
    """
    pointer = WebPointerHAL()
    controls = WebControlsHAL()
    display = WebDisplayHAL()
    return WheelPort(pointer, controls, display)
