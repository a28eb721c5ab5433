class SixwordError(Exception):
    """Base class for sixword-specific errors."""


# Inputs that could plausibly occur at runtime
class InputError(SixwordError, ValueError):
    pass


class FormatError(InputError):
    """Byte or word count does not fit the block structure."""


class InvalidParity(InputError):
    pass


class UnknownWord(InputError):
    pass


class InvalidWord(InputError):
    pass


# Command line
class CLIError(SixwordError):
    pass
