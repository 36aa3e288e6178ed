"""
Integration tests for FifthsWheelApp driven through mock presentation ports.
"""
from fifths_wheel.constants import Notation
from fifths_wheel.wheel_app import FifthsWheelApp

from mock_hal import create_mock_wheel_port


def make_app(notation=Notation.SPANISH):
    port, mocks = create_mock_wheel_port()
    return FifthsWheelApp(port, notation=notation), mocks


class TestFifthsWheelApp:
    """Tests for the application loop."""

    def test_initial_display(self):
        app, mocks = make_app()
        display = mocks["display"]

        assert display.rotation == 0
        assert display.title == "Tonalidad: Do mayor"
        assert display.chords == ["Do", "Rem", "Mim", "Fa", "Sol", "Lam", "Si°"]
        assert display.numerals == ["I", "ii", "iii", "IV", "V", "vi", "vii°"]
        assert display.root_labels[0] == "Do"
        assert display.minor_labels[0] == "Lam"
        assert display.notation == Notation.SPANISH
        assert display.caption == "Tónica: Do · Subdominante: Fa · Dominante: Sol"
        assert len(display.windows) == 7

    def test_drag_updates_key_before_release(self):
        app, mocks = make_app()
        pointer = mocks["pointer"]
        display = mocks["display"]

        pointer.simulate_press()
        pointer.simulate_drag(45)
        pointer.simulate_drag(95)
        app.update()

        assert app.state.dragging is True
        assert display.rotation == 95
        assert display.dragging is True
        assert display.title == "Tonalidad: Mib mayor"

        pointer.simulate_release()
        app.update()

        assert display.rotation == 90
        assert display.dragging is False
        assert app.state.root_index == 9

    def test_drag_samples_are_applied_in_order(self):
        app, mocks = make_app()
        display = mocks["display"]

        mocks["pointer"].simulate_press()
        for angle in [10, 20, 30]:
            mocks["pointer"].simulate_drag(angle)
        app.update()

        rotations = [c[1] for c in display.calls if c[0] == "show_rotation"]
        assert rotations[-4:-1] == [10, 20, 30]

    def test_picker(self):
        app, mocks = make_app()
        mocks["controls"].simulate_pick(1)
        app.update()

        assert mocks["display"].title == "Tonalidad: Sol mayor"
        assert mocks["display"].rotation == 330

    def test_step_buttons(self):
        app, mocks = make_app()
        mocks["controls"].simulate_step(1)
        app.update()

        assert app.state.root_index == 11
        assert mocks["display"].chords == ["Fa", "Solm", "Lam", "Sib", "Do", "Rem", "Mi°"]

    def test_reset(self):
        app, mocks = make_app()
        mocks["controls"].simulate_pick(4)
        app.update()
        mocks["controls"].simulate_reset()
        app.update()

        assert app.state.rotation == 0
        assert mocks["display"].title == "Tonalidad: Do mayor"

    def test_notation_toggle_changes_only_strings(self):
        app, mocks = make_app()
        mocks["controls"].simulate_pick(9)
        app.update()
        rotation = app.state.rotation

        mocks["controls"].simulate_notation(Notation.ENGLISH)
        app.update()

        display = mocks["display"]
        assert display.notation == Notation.ENGLISH
        assert display.chords == ["Eb", "Fm", "Gm", "Ab", "Bb", "Cm", "D°"]
        assert display.root_labels[9] == "Eb/D#"
        assert display.picker[0] == "C"
        assert app.state.rotation == rotation
        assert app.state.root_index == 9

    def test_idle_update_does_not_redraw(self):
        app, mocks = make_app()
        display = mocks["display"]
        before = display.count("show_key")

        app.update()

        assert display.count("show_key") == before
        assert display.calls[-1] == ("update",)

    def test_display_data(self):
        app, mocks = make_app(Notation.ENGLISH)
        data = app.get_display_data()
        assert data["root_index"] == 0
        assert data["notation"] == Notation.ENGLISH
        assert data["chords"][6] == "B°"

    def test_cleanup(self):
        app, mocks = make_app()
        app.cleanup()
        assert mocks["display"].calls[-2:] == [("clear",), ("update",)]
