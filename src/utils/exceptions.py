"""
Custom errors raised by the summary pipeline and its command-line front end.
"""

class SourceReadError(Exception):
    """Raised when the input source cannot be opened or read. Fatal for the run."""
    pass

class InvalidEncodingError(ValueError):
    """Raised when a declared encoding is not known to the codec registry."""
    pass
