"""
podfinder Exceptions
"""

class PodFinderError(Exception):
    """Base exception for all podfinder errors"""
    def __init__(self, message, code=None, details=None):
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ConnectionError(PodFinderError):
    """Connection-related errors"""
    pass


class ClientInitializationError(ConnectionError):
    """Kubernetes client could not be built; the provider stays unusable"""
    pass


class InvalidPatternError(PodFinderError):
    """Pod name expression is not a valid regular expression"""
    pass


class PodListError(PodFinderError):
    """Listing pods from the Kubernetes API failed"""
    pass


class SelectionError(PodFinderError):
    """Malformed selection criteria"""
    pass
