"""
UI State management - platform independent.
Owns the wheel's two mutable values (rotation angle and notation) and
provides an event-driven architecture around them.
"""
import logging
import math

from .constants import Notation, Wheel
from .key_chart import KeyChart
from .notation import other_notation
from .rotation import (
    angle_to_index,
    index_to_angle,
    normalize_angle,
    pointer_angle,
    snap_angle,
    step_angle,
)

logger = logging.getLogger(__name__)


class Event:
    """Event type constants for state changes."""

    ANGLE_CHANGED = "angle_changed"
    KEY_CHANGED = "key_changed"
    NOTATION_CHANGED = "notation_changed"
    DRAG_STARTED = "drag_started"
    DRAG_RELEASED = "drag_released"


class WheelState:
    """
    Centralized state for one wheel session.
    The key is never stored: it is derived from the angle on every read.
    """

    def __init__(self, notation=Notation.DEFAULT, angle=Wheel.DEFAULT_ANGLE):
        """
        Args:
            notation: Initial Notation constant
            angle: Initial rotation in degrees
        """
        self.rotation = normalize_angle(angle)
        self.notation = notation if notation in Notation.ALL else Notation.DEFAULT
        self.dragging = False

        # Flag to trigger display update
        self.display_dirty = True

        # Event subscribers
        self._subscribers = {}

    @property
    def root_index(self):
        """Sector under the pointer (0-11)."""
        return angle_to_index(self.rotation)

    def subscribe(self, event_type, callback):
        """
        Subscribe to an event type.

        Args:
            event_type: Event type constant from Event class
            callback: Function to call when event occurs, receives data dict
        """
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []
        self._subscribers[event_type].append(callback)

    def unsubscribe(self, event_type, callback):
        """Remove a callback from an event type."""
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    def emit(self, event_type, data=None):
        """Emit an event to all subscribers."""
        if event_type in self._subscribers:
            for callback in self._subscribers[event_type]:
                callback(data)

    def _set_rotation(self, angle):
        if not math.isfinite(angle):
            logger.debug("Ignoring non-finite angle %r", angle)
            return
        previous_index = self.root_index
        self.rotation = normalize_angle(angle)
        self.display_dirty = True
        self.emit(
            Event.ANGLE_CHANGED,
            {"angle": self.rotation, "dragging": self.dragging},
        )

        root_index = self.root_index
        if root_index != previous_index:
            logger.debug("Key changed %d -> %d", previous_index, root_index)
            self.emit(
                Event.KEY_CHANGED,
                {"root_index": root_index, "previous_index": previous_index},
            )

    def begin_drag(self):
        """Pointer/touch went down on the wheel."""
        self.dragging = True
        self.emit(Event.DRAG_STARTED, {"angle": self.rotation})

    def update_continuous(self, angle):
        """
        Follow the pointer during a drag.
        The angle is kept unquantized so the dial turns smoothly; the key
        still follows the nearest step.
        NaN and infinite samples are ignored.

        Args:
            angle: Pointer angle in degrees, any range
        """
        self._set_rotation(angle)

    def drag_to_point(self, dx, dy):
        """
        Follow a pointer given as an offset from the wheel centre.

        Args:
            dx: Horizontal offset (right is positive)
            dy: Vertical offset (down is positive, screen space)
        """
        self.update_continuous(pointer_angle(dx, dy))

    def snap_on_release(self):
        """Pointer/touch released: rest the dial on the nearest step."""
        self.dragging = False
        snapped = snap_angle(self.rotation)
        logger.debug("Snapping %.2f -> %d", self.rotation, snapped)
        self._set_rotation(snapped)
        self.emit(
            Event.DRAG_RELEASED,
            {"angle": self.rotation, "root_index": self.root_index},
        )

    def select_key(self, index):
        """
        Turn the dial so a sector sits under the pointer (key picker).

        Args:
            index: Sector index, reduced mod 12
        """
        self._set_rotation(index_to_angle(index))

    def step(self, delta):
        """
        Turn the dial by whole steps (previous/next buttons).

        Args:
            delta: Steps of 30 degrees; +1 turns clockwise, which moves the
                   key one fifth down
        """
        self._set_rotation(step_angle(self.rotation, delta))

    def reset(self):
        """Back to the reference tonic."""
        self.dragging = False
        self._set_rotation(Wheel.DEFAULT_ANGLE)

    def set_notation(self, notation):
        """Switch naming convention. Unknown values are ignored."""
        if notation not in Notation.ALL:
            logger.debug("Ignoring unknown notation %r", notation)
            return
        if notation == self.notation:
            return
        self.notation = notation
        self.display_dirty = True
        logger.debug("Notation changed to %s", notation)
        self.emit(Event.NOTATION_CHANGED, {"notation": notation})

    def toggle_notation(self):
        """Toggle between the two conventions."""
        self.set_notation(other_notation(self.notation))

    def get_chart(self):
        """Key chart for the current angle and notation."""
        return KeyChart(self.root_index, self.notation)

    def get_display_data(self):
        """
        Get data needed for rendering.

        Returns:
            Dict with the key chart data plus rotation and drag phase
        """
        data = self.get_chart().get_display_data()
        data["rotation"] = self.rotation
        data["dragging"] = self.dragging
        return data

    def clear_display_dirty(self):
        """Mark display as updated."""
        self.display_dirty = False
