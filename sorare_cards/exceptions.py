class SorareCardsError(Exception):
    """Base class for errors raised by the card report tool."""


class InputFileError(SorareCardsError):
    """The user list could not be opened or read. Fatal."""


class ConfigError(SorareCardsError):
    """The configuration file is missing or malformed. Fatal."""


class ReportWriteError(SorareCardsError):
    """The spreadsheet could not be written or read back. Fatal."""


class SorareAPIError(SorareCardsError):
    """
    The API answered, but not with usable card data.

    Raised for non-JSON bodies, GraphQL ``errors`` payloads, unknown users
    and responses missing the ``data.user.cards`` shape. Recoverable: the
    caller logs it and skips the user.
    """
