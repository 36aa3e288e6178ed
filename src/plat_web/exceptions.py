"""Custom exceptions for the Fifths Wheel web adapter."""


class FifthsWheelError(Exception):
    """Base exception for all Fifths Wheel web errors."""

    pass


class InvalidRequest(FifthsWheelError):
    """Request body is missing, malformed, or names an unknown value."""

    pass


class UnknownAction(InvalidRequest):
    """WebSocket message names an action the wheel does not handle."""

    pass
