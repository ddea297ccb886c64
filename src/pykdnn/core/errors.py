"""
Errors raised by the search structures
"""


class EmptyReferenceSetError(ValueError):
    """Raised when a nearest-neighbor query runs against zero reference points.

    Returning an arbitrary index here would silently corrupt whatever the
    caller does with the result, so every search entry point raises instead.
    """

    def __init__(self, message: str = "reference set is empty"):
        super().__init__(message)
