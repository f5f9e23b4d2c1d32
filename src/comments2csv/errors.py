"""Exception types callers may want to tell apart from ordinary I/O and value errors."""


class InvalidBatchError(ValueError):
    """The selected inputs mix families or contain more than one presentation."""


class PackageReadError(OSError):
    """An input file could not be copied or is not a valid zip container."""


class MalformedPartError(ValueError):
    """An XML part inside a package could not be parsed."""


class DestinationInUseError(PermissionError):
    """The output CSV is locked by another program (usually open in a spreadsheet app)."""
