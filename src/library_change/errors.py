"""Exceptions raised by library-change."""


class LibraryChangeError(Exception):
    """Base class for library-change errors."""


class AnalysisSetupError(LibraryChangeError, ValueError):
    """Raised when the analyzer cannot be configured."""
