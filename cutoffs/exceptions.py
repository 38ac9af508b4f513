class CutoffError(Exception):
    """Base class for errors raised by the cutoff search."""


class InvalidInput(CutoffError):
    """The rank filter request is missing fields or malformed."""


class StoreUnavailable(CutoffError):
    """The cutoff table could not be read."""
