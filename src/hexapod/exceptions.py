"""
Exceptions raised by the hexapod packages.
"""


class HexapodError(Exception):
    """Base class for every error the controller reports to the user."""


class ConfigurationError(HexapodError):
    """The configuration file is missing, unreadable or incomplete."""


class PositionTableError(HexapodError, ValueError):
    """A position table violates its invariants and cannot be built."""


class UnreachablePositionError(HexapodError, ValueError):
    """A servo was asked for a position its joint type cannot take."""


class TransportError(HexapodError):
    """The output channel could not be opened or a message could not be sent."""


__all__ = [
    'HexapodError',
    'ConfigurationError',
    'PositionTableError',
    'UnreachablePositionError',
    'TransportError',
]
