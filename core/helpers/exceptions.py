"""Custom exception classes for the helper functions.

Errors raised here are contract violations or bad input; none of them are
retried by callers.
"""


class HelpersException(Exception):
    """Base exception for all helper functions."""
    pass


class ParseError(HelpersException, ValueError):
    """Raised when input text is not valid JSON or is not a JSON object."""

    def __init__(self, text=None, message=None):
        if message is None:
            message = "Input is not a valid JSON object"
        super().__init__(message)
        self.text = text


class SerializationError(HelpersException):
    """Raised when a converted structure cannot be encoded back to JSON."""

    def __init__(self, value=None, message=None):
        if message is None:
            message = "Unable to serialize converted value"
        super().__init__(message)
        self.value = value


class AllValuesFilteredError(HelpersException, ValueError):
    """Raised when every input value was removed by a filter."""

    def __init__(self, message=None):
        if message is None:
            message = "MinMaxIntSlice: all inputs were filtered"
        super().__init__(message)
