"""
Custom exception classes for the Region Gallery application.
"""


class GalleryError(Exception):
    """Base exception for all Region Gallery errors."""
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BadRequestError(GalleryError):
    """Raised when a request path is malformed."""
    status_code = 400


class ForbiddenError(GalleryError):
    """Raised when a region is not allowed or a path segment tries to escape its directory."""
    status_code = 403

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


class NotFoundError(GalleryError):
    """Raised when an allowed region has no directory on disk."""
    status_code = 404


class QueryError(GalleryError):
    """Raised when the region store cannot be queried."""
    status_code = 500
