"""
Exception types raised by the BC5 codec.

Length and dimension violations are precondition failures and derive from
ValueError. Running out of container bytes derives from EOFError as well.
"""


class BC5Error(ValueError):
    """Base class for all BC5 codec errors."""


class InvalidDimensionsError(BC5Error):
    """Image dimensions are not usable for the requested operation."""


class InvalidLengthError(BC5Error):
    """A block or index byte slice has the wrong length."""


class BadSignatureError(BC5Error):
    """Container data does not start with the "BC5 " signature."""


class TruncatedError(BC5Error, EOFError):
    """Container data ends before the header or the block data."""
