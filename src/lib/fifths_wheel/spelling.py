"""
Enharmonic spelling: sharp or flat names chosen by circular position.

The circle already encodes the sharp/flat boundary, so every choice here is a
set lookup rather than an accidental count:

- FLAT_SIDE_SECTORS: sectors whose own note is written as a flat
  (Gb, Db, Ab, Eb, Bb).
- FLAT_KEY_SECTORS: keys written with a flat key signature, i.e. the flat
  side plus F.
"""
from .constants import Music, Notation
from .note_tables import FLAT_NAMES, SHARP_NAMES, get_table
from .rotation import normalize_index


FLAT_SIDE_SECTORS = frozenset([6, 7, 8, 9, 10])
FLAT_KEY_SECTORS = FLAT_SIDE_SECTORS | frozenset([11])


def prefers_flats(sector):
    """True if the note in this sector is named with a flat."""
    return normalize_index(sector) in FLAT_SIDE_SECTORS


def key_prefers_flats(sector):
    """True if the major key in this sector has a flat key signature."""
    return normalize_index(sector) in FLAT_KEY_SECTORS


def name_for(pitch_class, notation=Notation.DEFAULT, prefer_flat=False):
    """Internal name of a chromatic pitch class from the sharp or flat table."""
    table = FLAT_NAMES if prefer_flat else SHARP_NAMES
    return get_table(table, notation)[int(pitch_class) % Music.NOTES_PER_OCTAVE]


def spell(pitch_class, sector, notation=Notation.DEFAULT):
    """
    Name a chromatic pitch class by the sector it falls in.

    Args:
        pitch_class: Chromatic pitch class (reduced mod 12)
        sector: Circle-of-fifths index (reduced mod 12)
        notation: Notation constant

    Returns:
        Internal note name, e.g. "SIb" / "Bb" on the flat side, "FA#" / "F#"
        otherwise. Natural notes are the same in both tables.
    """
    return name_for(pitch_class, notation, prefers_flats(sector))


def spell_in_key(pitch_class, key_sector, notation=Notation.DEFAULT):
    """
    Name a chromatic pitch class as written inside the key of a sector.
    F major spells its fourth as "SIb" / "Bb", G major its seventh "FA#" / "F#".

    Only single accidentals exist in the tables, so Gb major spells its fourth
    degree as the natural "SI" / "B" rather than Cb.
    """
    return name_for(pitch_class, notation, key_prefers_flats(key_sector))
