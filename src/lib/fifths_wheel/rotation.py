"""
Angle-to-index mapping for the rotating dial.

The dial turns under a fixed pointer at the top, so the key under the pointer
moves opposite to the rotation: turning the dial +30 degrees selects the
previous sector (-1), never the next one.
"""
import math

from .constants import Wheel


def _round_half_up(value):
    """Round to the nearest integer, halves toward +infinity."""
    return int(math.floor(value + 0.5))


def normalize_angle(angle):
    """Reduce any angle to [0, 360). NaN and infinities map to the rest angle."""
    if not math.isfinite(angle):
        return float(Wheel.DEFAULT_ANGLE)
    angle = angle % Wheel.FULL_TURN
    # -1e-15 % 360 rounds up to exactly 360.0
    if angle >= Wheel.FULL_TURN:
        angle = 0.0
    return angle


def normalize_index(index):
    """Reduce any sector index to 0-11."""
    return int(index) % Wheel.SECTORS


def angle_to_steps(angle):
    """Number of whole 30-degree steps nearest to the (normalized) angle."""
    return _round_half_up(normalize_angle(angle) / Wheel.STEP_DEGREES)


def angle_to_index(angle):
    """
    Convert a dial angle to the sector index under the pointer.

    Args:
        angle: Rotation in degrees, any sign or range

    Returns:
        Sector index 0-11 on the circle of fifths
    """
    return (-angle_to_steps(angle)) % Wheel.SECTORS


def index_to_angle(index):
    """
    Dial angle that puts a sector under the pointer.
    Inverse of angle_to_index for snapped angles.
    """
    return normalize_index(-int(index)) * Wheel.STEP_DEGREES


def snap_angle(angle):
    """Snap an angle to the nearest 30-degree rest position in [0, 360)."""
    return (angle_to_steps(angle) * Wheel.STEP_DEGREES) % Wheel.FULL_TURN


def step_angle(angle, delta):
    """
    Snap, then rotate the dial by whole steps.

    Args:
        angle: Current rotation in degrees
        delta: Number of 30-degree steps (positive = clockwise)

    Returns:
        New rest angle in [0, 360)
    """
    steps = angle_to_steps(angle) + int(delta)
    return (steps * Wheel.STEP_DEGREES) % Wheel.FULL_TURN


def pointer_angle(dx, dy):
    """
    Angle of a pointer relative to the wheel centre.

    Args:
        dx: Horizontal offset from the centre (grows to the right)
        dy: Vertical offset from the centre (grows downward, screen space)

    Returns:
        Degrees in [0, 360), 0 at the top, growing clockwise
    """
    degrees = math.degrees(math.atan2(dy, dx))
    return normalize_angle(degrees + Wheel.POINTER_OFFSET_DEGREES)
