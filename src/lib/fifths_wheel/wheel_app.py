"""
Main Fifths Wheel Application.
Ties together the key chart, session state, and the presentation layer.
Front-end independent - receives its ports through dependency injection.
"""
import logging

from .constants import Notation
from .ui_state import Event, WheelState

logger = logging.getLogger(__name__)


class FifthsWheelApp:
    """
    Main application class for the Fifths Wheel.
    Front-end independent - receives its ports through dependency injection.
    """

    def __init__(self, port, notation=Notation.DEFAULT):
        """
        Initialize the wheel.

        Args:
            port: WheelPort instance with all HAL implementations
            notation: Initial Notation constant
        """
        # Session state (angle + notation); every session starts at the tonic
        self.state = WheelState(notation=notation)

        # Presentation (injected)
        self.hw = port

        # Subscribe to UI events
        self._setup_event_handlers()

        # Initial display update
        self._update_display()

    def _setup_event_handlers(self):
        """Connect state events to display actions."""

        def on_angle_changed(data):
            self.hw.display.show_rotation(data["angle"], data["dragging"])

        def on_key_changed(data):
            self._update_key_display()

        def on_notation_changed(data):
            self._update_display()

        def on_drag_released(data):
            logger.debug(
                "Drag released at %s, key %d", data["angle"], data["root_index"]
            )

        # Register handlers
        self.state.subscribe(Event.ANGLE_CHANGED, on_angle_changed)
        self.state.subscribe(Event.KEY_CHANGED, on_key_changed)
        self.state.subscribe(Event.NOTATION_CHANGED, on_notation_changed)
        self.state.subscribe(Event.DRAG_RELEASED, on_drag_released)

    def _update_key_display(self):
        """Update everything that depends on the selected key."""
        chart = self.state.get_chart()
        chords = chart.get_all_chords()
        self.hw.display.show_key(chart.get_title(), chart.get_scale())
        self.hw.display.show_chord_table(
            [numeral for _, _, numeral in chords],
            [symbol for _, symbol, _ in chords],
        )
        self.hw.display.show_windows(chart.get_windows())
        self.hw.display.show_caption(chart.get_caption())

    def _update_display(self):
        """Update display with current state."""
        chart = self.state.get_chart()
        labels = chart.get_ring_labels()
        self.hw.display.show_rotation(self.state.rotation, self.state.dragging)
        self.hw.display.show_wheel_labels(labels["root"], labels["minor"])
        self.hw.display.show_notation(self.state.notation, chart.get_picker_options())
        self._update_key_display()
        self.state.clear_display_dirty()

    def update(self):
        """
        Main update loop - call once per input event batch.
        Polls inputs and processes state changes.
        """
        # Poll presentation inputs
        self.hw.update_inputs()

        # Drag: press, continuous samples, then release snaps
        if self.hw.pointer.was_pressed():
            self.state.begin_drag()

        for angle in self.hw.pointer.get_drag_samples():
            self.state.update_continuous(angle)

        if self.hw.pointer.was_released():
            self.state.snap_on_release()

        # Discrete controls
        key_index = self.hw.controls.get_key_request()
        if key_index is not None:
            self.state.select_key(key_index)

        step = self.hw.controls.get_step_request()
        if step:
            self.state.step(step)

        if self.hw.controls.was_reset_pressed():
            self.state.reset()

        notation = self.hw.controls.get_notation_request()
        if notation is not None:
            self.state.set_notation(notation)

        # Update display if dirty
        if self.state.display_dirty:
            self._update_display()

        # Push output updates
        self.hw.update_outputs()

    def get_display_data(self):
        """Snapshot of everything currently shown."""
        return self.state.get_display_data()

    def cleanup(self):
        """Clean shutdown - clear the renderer."""
        self.hw.display.clear()
        self.hw.display.update()
