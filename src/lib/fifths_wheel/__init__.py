"""
Fifths Wheel - Circle-of-fifths key wheel: rotation, major scales, diatonic
triads and enharmonic spelling in two note-naming conventions.
"""

from .constants import Notation, Wheel, Ring
from .note_tables import (
    FIFTHS_NAMES,
    FIFTHS_DISPLAY_NAMES,
    RELATIVE_MINOR_NAMES,
    SHARP_NAMES,
    FLAT_NAMES,
    ROMAN_NUMERALS,
)
from .rotation import (
    normalize_angle,
    angle_to_index,
    index_to_angle,
    snap_angle,
    step_angle,
    pointer_angle,
)
from .music_theory import (
    MAJOR_SCALE,
    MAJOR_TRIAD_QUALITIES,
    major_scale,
    diatonic_triads,
    triad_quality,
    chord_symbol,
    degree_numeral,
    relative_minor,
    fifths_to_chromatic,
    chromatic_to_fifths,
)
from .spelling import (
    FLAT_SIDE_SECTORS,
    FLAT_KEY_SECTORS,
    prefers_flats,
    key_prefers_flats,
    spell,
    spell_in_key,
)
from .notation import present, to_title, translate, pitch_class_of
from .key_chart import KeyChart
from .ui_state import WheelState, Event
from .hal_protocol import (
    PointerHAL,
    ControlsHAL,
    DisplayHAL,
    WheelPort,
)
from .wheel_app import FifthsWheelApp

__all__ = [
    # Constants
    "Notation",
    "Wheel",
    "Ring",
    # Note Tables
    "FIFTHS_NAMES",
    "FIFTHS_DISPLAY_NAMES",
    "RELATIVE_MINOR_NAMES",
    "SHARP_NAMES",
    "FLAT_NAMES",
    "ROMAN_NUMERALS",
    # Rotation
    "normalize_angle",
    "angle_to_index",
    "index_to_angle",
    "snap_angle",
    "step_angle",
    "pointer_angle",
    # Music Theory
    "MAJOR_SCALE",
    "MAJOR_TRIAD_QUALITIES",
    "major_scale",
    "diatonic_triads",
    "triad_quality",
    "chord_symbol",
    "degree_numeral",
    "relative_minor",
    "fifths_to_chromatic",
    "chromatic_to_fifths",
    # Spelling & Notation
    "FLAT_SIDE_SECTORS",
    "FLAT_KEY_SECTORS",
    "prefers_flats",
    "key_prefers_flats",
    "spell",
    "spell_in_key",
    "present",
    "to_title",
    "translate",
    "pitch_class_of",
    # Key Chart
    "KeyChart",
    # UI State
    "WheelState",
    "Event",
    # Presentation Protocol
    "PointerHAL",
    "ControlsHAL",
    "DisplayHAL",
    "WheelPort",
    # Application
    "FifthsWheelApp",
]
