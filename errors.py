# errors.py
#
# Description:
# Exceptions shared by the store, the controller and the UI. Recoverable
# errors carry the user-facing message as their text.
#


class TuidoError(Exception):
    """Base class for all application errors."""


class InvalidInput(TuidoError):
    """A prompt was submitted with an empty or blank value."""


class NothingSelected(TuidoError):
    """A command addressed a category or task row that does not exist."""


class PersistenceUnavailable(TuidoError):
    """The data file could not be read or does not hold a valid store."""


class PersistenceWriteFailure(TuidoError):
    """The data file could not be written. Never recovered from."""
