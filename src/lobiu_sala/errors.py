class LobiuSalaError(Exception):
    """Base error for Lobiu Sala domain exceptions."""


class GridConfigError(LobiuSalaError, ValueError):
    """Raised when a grid cannot hold the requested treasure, items and enemies."""


class SettingsError(LobiuSalaError):
    """Raised when a settings file cannot be parsed or has the wrong shape."""


class KeyMapError(LobiuSalaError, ValueError):
    """Raised when a key binding refers to an unknown command."""
