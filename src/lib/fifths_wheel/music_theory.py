"""
Pure music theory calculations for major keys - no rendering dependencies.

Pitch classes here are chromatic (semitone order, C=0 ... B=11). The wheel's
sectors are in fifths order; convert with fifths_to_chromatic() before
building scales.
"""
from .constants import Music
from .note_tables import ROMAN_NUMERALS


# Major scale as semitone offsets from the root: W-W-H-W-W-W-H
MAJOR_SCALE = [0, 2, 4, 5, 7, 9, 11]

# Triad intervals from the chord root
CHORD_TYPES = {
    "major": [0, 4, 7],       # root, major 3rd, perfect 5th
    "minor": [0, 3, 7],       # root, minor 3rd, perfect 5th
    "diminished": [0, 3, 6],  # root, minor 3rd, diminished 5th
}

# Triad quality of each degree I-VII. Same for every major key.
MAJOR_TRIAD_QUALITIES = [
    "major", "minor", "minor", "major", "major", "minor", "diminished",
]

QUALITY_SUFFIXES = {
    "major": "",
    "minor": "m",
    "diminished": "°",
}


def fifths_to_chromatic(index):
    """Convert a circle-of-fifths sector (0=C, 1=G, ...) to a chromatic pitch class."""
    return (int(index) * Music.FIFTH_SEMITONES) % Music.NOTES_PER_OCTAVE


def chromatic_to_fifths(pitch_class):
    """Convert a chromatic pitch class to its circle-of-fifths sector."""
    # 7 * 7 = 49 = 1 (mod 12), so the same multiplication inverts itself
    return (int(pitch_class) * Music.FIFTH_SEMITONES) % Music.NOTES_PER_OCTAVE


def major_scale(root):
    """
    Build the major scale on a root.

    Args:
        root: Chromatic pitch class of the tonic (any integer, reduced mod 12)

    Returns:
        List of 7 chromatic pitch classes, degree I first
    """
    return [(root + offset) % Music.NOTES_PER_OCTAVE for offset in MAJOR_SCALE]


def triad_quality(degree):
    """Return 'major', 'minor' or 'diminished' for a scale degree (0-6)."""
    return MAJOR_TRIAD_QUALITIES[degree % Music.SCALE_DEGREES]


def diatonic_triads(root):
    """
    The seven diatonic triads of a major key.

    Returns:
        List of (pitch_class, quality) tuples for degrees I-VII
    """
    return [
        (pitch_class, triad_quality(degree))
        for degree, pitch_class in enumerate(major_scale(root))
    ]


def triad_pitch_classes(root, quality):
    """Chord tones (root, third, fifth) of a triad as chromatic pitch classes."""
    intervals = CHORD_TYPES.get(quality, CHORD_TYPES["major"])
    return [(root + interval) % Music.NOTES_PER_OCTAVE for interval in intervals]


def chord_suffix(quality):
    return QUALITY_SUFFIXES.get(quality, "")


def chord_symbol(name, quality):
    """Format a chord symbol: "C", "Dm", "B°"."""
    return name + chord_suffix(quality)


def degree_numeral(degree):
    """
    Roman numeral for a degree of the major key.
    Uppercase for major, lowercase for minor/diminished, "°" for diminished.
    """
    degree = degree % Music.SCALE_DEGREES
    quality = triad_quality(degree)
    numeral = ROMAN_NUMERALS[degree]
    if quality in ["minor", "diminished"]:
        numeral = numeral.lower()
    if quality == "diminished":
        numeral += "°"
    return numeral


def relative_minor(root):
    """Pitch class of the relative minor tonic (a minor third below the root)."""
    return (root + Music.RELATIVE_MINOR_SEMITONES) % Music.NOTES_PER_OCTAVE
