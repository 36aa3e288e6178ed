"""
Presentation Layer Protocol Definitions.
These are abstract base classes that each front end must implement.

This allows the same application code to drive:
- A browser front end through the web adapter
- A terminal or desktop front end
- Recording mocks for testing
"""


class PointerHAL:
    """Abstract interface for pointer/touch input on the wheel."""

    def update(self):
        """Poll pointer state. Call in main loop."""
        raise NotImplementedError

    def was_pressed(self):
        """
        Check if a drag started.

        Returns:
            True if the pointer went down on the wheel since last check
        """
        raise NotImplementedError

    def get_drag_samples(self):
        """
        Get drag angles received since last call, oldest first.

        Returns:
            List of angles in degrees (0 at the top, clockwise, any range)
        """
        raise NotImplementedError

    def was_released(self):
        """
        Check if the drag ended.

        Returns:
            True if the pointer/touch was released since last check
        """
        raise NotImplementedError


class ControlsHAL:
    """Abstract interface for the discrete controls next to the wheel."""

    def update(self):
        """Poll control states. Call in main loop."""
        raise NotImplementedError

    def get_key_request(self):
        """
        Key chosen in the picker.

        Returns:
            Sector index, or None if nothing was picked since last check
        """
        raise NotImplementedError

    def get_step_request(self):
        """
        Previous/next button presses since last check.

        Returns:
            Integer: Positive = clockwise steps, Negative = counter-clockwise
        """
        raise NotImplementedError

    def was_reset_pressed(self):
        """
        Check if reset was pressed.

        Returns:
            True if reset was pressed since last check
        """
        raise NotImplementedError

    def get_notation_request(self):
        """
        Notation chosen in the toggle.

        Returns:
            Notation constant, or None if unchanged since last check
        """
        raise NotImplementedError


class DisplayHAL:
    """Abstract interface for the wheel renderer."""

    def clear(self):
        """Clear the display."""
        raise NotImplementedError

    def show_rotation(self, angle, dragging):
        """
        Turn the dial geometry.

        Args:
            angle: Rotation in degrees [0, 360)
            dragging: True while the pointer is down (angle not snapped)
        """
        raise NotImplementedError

    def show_key(self, title, scale):
        """
        Display the summary of the current key.

        Args:
            title: Heading (e.g., "Tonalidad: Do mayor")
            scale: List of (roman_numeral, note_name) tuples
        """
        raise NotImplementedError

    def show_chord_table(self, numerals, chords):
        """
        Display the diatonic chord table.

        Args:
            numerals: 7 column headers (e.g., "I", "ii", ... "vii°")
            chords: 7 chord symbols (e.g., "Do", "Rem", ... "Si°")
        """
        raise NotImplementedError

    def show_wheel_labels(self, root_labels, minor_labels):
        """
        Display the ring labels.

        Args:
            root_labels: 12 outer-ring labels in sector order
            minor_labels: 12 relative-minor labels in sector order
        """
        raise NotImplementedError

    def show_windows(self, windows):
        """
        Display the pointer windows.

        Args:
            windows: List of dicts with "numeral", "sector", "ring", "label"
        """
        raise NotImplementedError

    def show_caption(self, caption):
        """
        Display the accessible caption.

        Args:
            caption: Caption string
        """
        raise NotImplementedError

    def show_notation(self, notation, picker_options):
        """
        Display the notation toggle and key picker.

        Args:
            notation: Active Notation constant
            picker_options: 12 key names in sector order
        """
        raise NotImplementedError

    def update(self):
        """Push changes to the renderer."""
        raise NotImplementedError


class WheelPort:
    """
    Complete presentation port interface.
    A front end provides an instance of this with all HAL implementations.
    """

    def __init__(self, pointer, controls, display):
        """
        Args:
            pointer: PointerHAL implementation
            controls: ControlsHAL implementation
            display: DisplayHAL implementation
        """
        self.pointer = pointer
        self.controls = controls
        self.display = display

    def update_inputs(self):
        """Poll all input devices."""
        self.pointer.update()
        self.controls.update()

    def update_outputs(self):
        """Push all output changes."""
        self.display.update()
