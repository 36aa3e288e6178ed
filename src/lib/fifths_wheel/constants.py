"""
Constants for the Fifths Wheel application.
All magic strings and numbers are defined here for easy maintenance.
"""


# ============================================================================
# NOTATION CONVENTIONS
# ============================================================================
class Notation:
    """Note-naming convention constants."""
    SPANISH = "spanish"   # Do-Re-Mi
    ENGLISH = "english"   # C-D-E

    DEFAULT = SPANISH

    # List of all conventions in toggle order
    ALL = [SPANISH, ENGLISH]


# ============================================================================
# WHEEL GEOMETRY
# ============================================================================
class Wheel:
    """Rotation constants for the dial."""
    SECTORS = 12
    FULL_TURN = 360
    STEP_DEGREES = FULL_TURN // SECTORS  # 30

    # Pointer sits at the top; 0 degrees is "up", growing clockwise
    POINTER_OFFSET_DEGREES = 90

    # Every session starts at the reference tonic
    DEFAULT_ANGLE = 0
    DEFAULT_INDEX = 0


# ============================================================================
# RINGS
# ============================================================================
class Ring:
    """Label rings on the dial."""
    OUTER = "outer"  # major keys
    MID = "mid"      # relative minors


# ============================================================================
# MUSIC CONSTANTS
# ============================================================================
class Music:
    """Music theory constants."""
    NOTES_PER_OCTAVE = 12
    SCALE_DEGREES = 7
    FIFTH_SEMITONES = 7
    RELATIVE_MINOR_SEMITONES = 9  # minor third below == major sixth above

    # Sector offsets of the harmonic functions around the tonic
    SUBDOMINANT_OFFSET = -1
    DOMINANT_OFFSET = 1


# ============================================================================
# SERVER DEFAULTS
# ============================================================================
class Server:
    """Defaults for the web adapter."""
    HOST = "0.0.0.0"
    PORT = 5000
    LOG_LEVEL = "INFO"
