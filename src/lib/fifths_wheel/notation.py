"""
Notation presenter - maps internal note names to display strings.

Works only on names and resolved pitch classes; index arithmetic never goes
through here, so switching convention cannot move the key.
"""
import logging

from .constants import Notation
from .note_tables import (
    ACCIDENTALS,
    FLAT_NAMES,
    SHARP_NAMES,
    SPANISH_BASES,
)
from .spelling import name_for

logger = logging.getLogger(__name__)


def _build_name_index():
    """Map every known spelling (internal and display form) to its pitch class."""
    index = {}
    for table in (SHARP_NAMES, FLAT_NAMES):
        for notation in Notation.ALL:
            for pitch_class, name in enumerate(table[notation]):
                index[name] = pitch_class
                index[to_title(name, notation)] = pitch_class
    return index


def normalize_notation(value):
    """Return value if it is a known notation, otherwise the default."""
    if value in Notation.ALL:
        return value
    return Notation.DEFAULT


def other_notation(notation):
    """The convention a toggle switches to."""
    current = Notation.ALL.index(normalize_notation(notation))
    return Notation.ALL[(current + 1) % len(Notation.ALL)]


def to_title(name, notation):
    """
    Convert an internal name to display form.

    Spanish: "DO" -> "Do", "FA#" -> "Fa#", "SOLb" -> "Solb".
    English names are already in display form and are returned as-is.
    Names that do not parse are returned unchanged.
    """
    if notation != Notation.SPANISH:
        return name

    base, accidental = name, ""
    if name[-1:] in ACCIDENTALS:
        base, accidental = name[:-1], name[-1]

    title = SPANISH_BASES.get(base)
    if title is None:
        logger.debug("Unknown Spanish note name %r, passing through", name)
        return name
    return title + accidental


def present(pitch_class, notation, prefer_flat=False):
    """
    Display name for a chromatic pitch class.

    Args:
        pitch_class: Chromatic pitch class (reduced mod 12)
        notation: Notation constant
        prefer_flat: Use the flat table for black keys

    Returns:
        Display string, e.g. "Do#", "Sib", "F#"
    """
    notation = normalize_notation(notation)
    return to_title(name_for(pitch_class, notation, prefer_flat), notation)


def pitch_class_of(name):
    """
    Chromatic pitch class of a note name in either notation.

    Accepts internal or display form, sharps or flats ("DO#", "Do#", "Reb",
    "C#", "Db"). Returns None for unknown names.
    """
    return _NAME_INDEX.get(name)


def translate(name, notation, prefer_flat=False):
    """
    Rename a note in the target notation.

    Args:
        name: Note name in either notation
        notation: Target notation constant
        prefer_flat: Use the flat table for black keys

    Returns:
        Display name in the target notation, or name unchanged if unknown
    """
    pitch_class = pitch_class_of(name)
    if pitch_class is None:
        logger.debug("Cannot translate unknown note name %r", name)
        return name
    return present(pitch_class, notation, prefer_flat)


_NAME_INDEX = _build_name_index()
