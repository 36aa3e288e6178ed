"""
Key chart - everything the wheel displays for one selected key.
Pure logic: built from (root_index, notation), holds no session state.
"""
from .constants import Music, Notation, Ring, Wheel
from .music_theory import (
    chord_symbol,
    degree_numeral,
    diatonic_triads,
    fifths_to_chromatic,
    major_scale,
    triad_pitch_classes,
)
from .note_tables import (
    FIFTHS_DISPLAY_NAMES,
    FIFTHS_NAMES,
    FUNCTION_LABELS,
    KEY_TITLE,
    RELATIVE_MINOR_NAMES,
    ROMAN_NUMERALS,
    get_table,
)
from .notation import normalize_notation, to_title
from .rotation import normalize_index
from .spelling import key_prefers_flats, spell_in_key


# Pointer windows as (degree, sector offset from the root, ring).
# Major chords sit on the outer ring at I, IV (one fifth down) and V (one
# fifth up); minor chords are the relative minors of neighbouring sectors.
WINDOW_LAYOUT = [
    (0, 0, Ring.OUTER),    # I
    (1, -1, Ring.MID),     # ii   = relative minor of IV
    (2, 1, Ring.MID),      # iii  = relative minor of V
    (3, -1, Ring.OUTER),   # IV
    (4, 1, Ring.OUTER),    # V
    (5, 0, Ring.MID),      # vi   = relative minor of I
    (6, 2, Ring.MID),      # vii° = relative minor of II
]


class KeyChart:
    """
    Scale, chords and labels of the major key under the pointer.
    """

    def __init__(self, root_index=Wheel.DEFAULT_INDEX, notation=Notation.DEFAULT):
        """
        Args:
            root_index: Circle-of-fifths sector of the tonic (reduced mod 12)
            notation: Notation constant (unknown values use the default)
        """
        self._root_index = normalize_index(root_index)
        self._notation = normalize_notation(notation)

    @property
    def root_index(self):
        return self._root_index

    @property
    def notation(self):
        return self._notation

    @property
    def tonic_pitch_class(self):
        """Chromatic pitch class of the tonic."""
        return fifths_to_chromatic(self._root_index)

    @property
    def prefers_flats(self):
        """True if the key is written with a flat key signature."""
        return key_prefers_flats(self._root_index)

    def _sector(self, offset):
        return (self._root_index + offset) % Wheel.SECTORS

    def _name(self, pitch_class):
        return to_title(
            spell_in_key(pitch_class, self._root_index, self._notation), self._notation
        )

    def _sector_name(self, offset):
        return self._name(fifths_to_chromatic(self._sector(offset)))

    def get_tonic_name(self):
        """Display name of the tonic, e.g. "Do", "Sib", "F#"."""
        return self._name(self.tonic_pitch_class)

    def get_scale_pitch_classes(self):
        """The 7 chromatic pitch classes of the scale."""
        return major_scale(self.tonic_pitch_class)

    def get_scale(self):
        """
        Scale for the summary list.

        Returns:
            List of (roman_numeral, note_name) tuples, I-VII
        """
        return [
            (ROMAN_NUMERALS[degree], self._name(pitch_class))
            for degree, pitch_class in enumerate(self.get_scale_pitch_classes())
        ]

    def get_chord(self, degree):
        """
        Get a diatonic triad.

        Args:
            degree: Scale degree 0-6 (I-VII), reduced mod 7

        Returns:
            Tuple of (pitch_classes, chord_symbol, roman_numeral)
            - pitch_classes: chromatic root, third, fifth
            - chord_symbol: e.g. "Rem", "Si°", "Bb"
            - roman_numeral: e.g. "ii", "vii°"
        """
        degree = degree % Music.SCALE_DEGREES
        root, quality = diatonic_triads(self.tonic_pitch_class)[degree]
        return (
            triad_pitch_classes(root, quality),
            chord_symbol(self._name(root), quality),
            degree_numeral(degree),
        )

    def get_all_chords(self):
        """Return info for all 7 diatonic chords."""
        return [self.get_chord(i) for i in range(Music.SCALE_DEGREES)]

    def get_ring_labels(self):
        """
        Labels for all 12 sectors of both rings.

        Returns:
            Dict with "root" (major keys, enharmonic pairs) and "minor"
            (relative minors), each a list of 12 strings in sector order
        """
        return {
            "root": list(get_table(FIFTHS_DISPLAY_NAMES, self._notation)),
            "minor": list(get_table(RELATIVE_MINOR_NAMES, self._notation)),
        }

    def get_windows(self):
        """
        The 7 pointer windows, one per degree.

        Returns:
            List of dicts with "degree", "numeral", "sector", "ring" and
            "label" (the ring label shown through the window)
        """
        labels = self.get_ring_labels()
        windows = []
        for degree, offset, ring in WINDOW_LAYOUT:
            sector = self._sector(offset)
            ring_labels = labels["root"] if ring == Ring.OUTER else labels["minor"]
            windows.append({
                "degree": degree,
                "numeral": degree_numeral(degree),
                "sector": sector,
                "ring": ring,
                "label": ring_labels[sector],
            })
        return windows

    def get_functions(self):
        """Tonic, subdominant and dominant names (sectors root, root-1, root+1)."""
        return {
            "tonic": self._sector_name(0),
            "subdominant": self._sector_name(Music.SUBDOMINANT_OFFSET),
            "dominant": self._sector_name(Music.DOMINANT_OFFSET),
        }

    def get_picker_options(self):
        """Key picker entries in sector order, e.g. "Do", "Sol", ... "Fa"."""
        names = get_table(FIFTHS_NAMES, self._notation)
        return [to_title(name, self._notation) for name in names]

    def get_caption(self):
        """Accessible caption, e.g. "Tónica: Do · Subdominante: Fa · Dominante: Sol"."""
        labels = get_table(FUNCTION_LABELS, self._notation)
        functions = self.get_functions()
        parts = []
        for key in ("tonic", "subdominant", "dominant"):
            parts.append(labels[key] + ": " + functions[key])
        return " · ".join(parts)

    def get_title(self):
        """Summary heading, e.g. "Tonalidad: Do mayor" / "Key: C major"."""
        label, mode = get_table(KEY_TITLE, self._notation)
        return label + ": " + self.get_tonic_name() + " " + mode

    def get_display_data(self):
        """
        Get data needed for rendering.

        Returns:
            Dict with every per-key output of the wheel
        """
        chords = self.get_all_chords()
        return {
            "root_index": self._root_index,
            "notation": self._notation,
            "tonic": self.get_tonic_name(),
            "title": self.get_title(),
            "prefers_flats": self.prefers_flats,
            "scale_pitch_classes": self.get_scale_pitch_classes(),
            "scale": [name for _, name in self.get_scale()],
            "numerals": [numeral for _, _, numeral in chords],
            "chords": [symbol for _, symbol, _ in chords],
            "rings": self.get_ring_labels(),
            "windows": self.get_windows(),
            "functions": self.get_functions(),
            "picker": self.get_picker_options(),
            "caption": self.get_caption(),
        }
