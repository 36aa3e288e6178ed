"""Desktop tools for the Fifths Wheel."""
