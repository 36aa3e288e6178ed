"""
Static note tables - one parallel set per notation convention.

Names are stored in their internal form: Spanish bases are uppercase with the
accidental kept as a suffix ("DO#", "SOLb"), English names are already in
display form ("C#", "Gb"). The two sets are separate tables rather than a
transliteration because the base names differ structurally (DO vs C,
SOL vs G).
"""
from .constants import Notation


# Circle of fifths, clockwise from the top (index 0), +7 semitones per step
FIFTHS_NAMES = {
    Notation.SPANISH: [
        "DO", "SOL", "RE", "LA", "MI", "SI",
        "FA#", "DO#", "SOL#", "RE#", "LA#", "FA",
    ],
    Notation.ENGLISH: [
        "C", "G", "D", "A", "E", "B",
        "F#", "C#", "G#", "D#", "A#", "F",
    ],
}

# Root-ring labels, with enharmonic pairs where both spellings are common
FIFTHS_DISPLAY_NAMES = {
    Notation.SPANISH: [
        "Do", "Sol", "Re", "La", "Mi", "Si",
        "Solb/Fa#", "Reb/Do#", "Lab/Sol#", "Mib/Re#", "Sib/La#", "Fa",
    ],
    Notation.ENGLISH: [
        "C", "G", "D", "A", "E", "B",
        "Gb/F#", "Db/C#", "Ab/G#", "Eb/D#", "Bb/A#", "F",
    ],
}

# Relative-minor ring labels, index aligned with FIFTHS_NAMES
RELATIVE_MINOR_NAMES = {
    Notation.SPANISH: [
        "Lam",        # Do
        "Mim",        # Sol
        "Sim",        # Re
        "Fa#m",       # La
        "Do#m",       # Mi
        "Sol#m",      # Si
        "Mibm/Re#m",  # Solb/Fa#
        "Sibm",       # Reb/Do#
        "Fam",        # Lab/Sol#
        "Dom",        # Mib/Re#
        "Solm",       # Sib/La#
        "Rem",        # Fa
    ],
    Notation.ENGLISH: [
        "Am",         # C
        "Em",         # G
        "Bm",         # D
        "F#m",        # A
        "C#m",        # E
        "G#m",        # B
        "Ebm/D#m",    # Gb/F#
        "Bbm",        # Db/C#
        "Fm",         # Ab/G#
        "Cm",         # Eb/D#
        "Gm",         # Bb/A#
        "Dm",         # F
    ],
}

# Chromatic scale (semitone order from C) spelled with sharps
SHARP_NAMES = {
    Notation.SPANISH: [
        "DO", "DO#", "RE", "RE#", "MI", "FA",
        "FA#", "SOL", "SOL#", "LA", "LA#", "SI",
    ],
    Notation.ENGLISH: [
        "C", "C#", "D", "D#", "E", "F",
        "F#", "G", "G#", "A", "A#", "B",
    ],
}

# Chromatic scale (semitone order from C) spelled with flats
FLAT_NAMES = {
    Notation.SPANISH: [
        "DO", "REb", "RE", "MIb", "MI", "FA",
        "SOLb", "SOL", "LAb", "LA", "SIb", "SI",
    ],
    Notation.ENGLISH: [
        "C", "Db", "D", "Eb", "E", "F",
        "Gb", "G", "Ab", "A", "Bb", "B",
    ],
}

# Spanish solfege bases and their display form
SPANISH_BASES = {
    "DO": "Do",
    "RE": "Re",
    "MI": "Mi",
    "FA": "Fa",
    "SOL": "Sol",
    "LA": "La",
    "SI": "Si",
}

SHARP = "#"
FLAT = "b"
ACCIDENTALS = [SHARP, FLAT]

# Roman numeral labels
ROMAN_NUMERALS = ["I", "II", "III", "IV", "V", "VI", "VII"]

# Functional harmony captions
FUNCTION_LABELS = {
    Notation.SPANISH: {
        "tonic": "Tónica",
        "subdominant": "Subdominante",
        "dominant": "Dominante",
    },
    Notation.ENGLISH: {
        "tonic": "Tonic",
        "subdominant": "Subdominant",
        "dominant": "Dominant",
    },
}

# Summary heading: "<label>: <key> <mode>"
KEY_TITLE = {
    Notation.SPANISH: ("Tonalidad", "mayor"),
    Notation.ENGLISH: ("Key", "major"),
}


def get_table(table, notation):
    """
    Return the list for a notation from one of the tables above.
    Unknown notations read the default table.
    """
    return table.get(notation, table[Notation.DEFAULT])
