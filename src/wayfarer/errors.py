class WayfarerError(Exception):
    """Base error for Wayfarer domain exceptions."""


class UnknownRoomError(WayfarerError):
    """Raised when a room handle or room name does not resolve in the world graph."""


class DuplicateObjectError(WayfarerError):
    """Raised when a room already holds an object with the same normalized name."""


class InteractionError(WayfarerError):
    """Raised when an object behavior needs a capability the context does not provide."""


class BattleOverError(WayfarerError):
    """Raised when a command is issued to a battle that already reached a terminal state."""


class SettingsError(WayfarerError):
    """Raised when a settings file cannot be parsed or fails validation."""
