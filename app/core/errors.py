class InvalidArgumentError(ValueError):
    """Raised when a required argument is missing (None) or unusable.

    Subclasses ValueError so callers that already guard domain input with
    ``except ValueError`` keep working.
    """


class IndexOutOfRangeError(IndexError):
    """Raised when a positional lookup falls outside ``[0, count)``."""
