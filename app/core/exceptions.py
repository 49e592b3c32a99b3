from typing import Optional, Any


class TourNextError(Exception):
    """
    Base exception for TourNext application.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ResourceNotFoundError(TourNextError):
    """
    Raised when a requested resource is not found.
    """
    def __init__(self, message: str = "Resource not found", details: Optional[Any] = None):
        super().__init__(message, code="NOT_FOUND", status_code=404, details=details)


class InvalidIdentifierError(TourNextError):
    """
    Raised when a path identifier is not a valid ObjectId.
    """
    def __init__(self, message: str = "Invalid identifier", details: Optional[Any] = None):
        super().__init__(message, code="INVALID_ID", status_code=400, details=details)


class InvalidQueryError(TourNextError):
    """
    Raised when a query parameter cannot be interpreted (e.g. a non-numeric sort).
    """
    def __init__(self, message: str = "Invalid query parameter", details: Optional[Any] = None):
        super().__init__(message, code="INVALID_QUERY", status_code=400, details=details)


class ValidationError(TourNextError):
    """
    Raised when input validation fails.
    """
    def __init__(self, message: str = "Validation error", details: Optional[Any] = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=422, details=details)


class DatabaseUnavailableError(TourNextError):
    """
    Raised when the document store is not connected or cannot be reached.
    """
    def __init__(self, message: str = "Database unavailable", details: Optional[Any] = None):
        super().__init__(message, code="DATABASE_UNAVAILABLE", status_code=503, details=details)


class GuideAcceptanceError(TourNextError):
    """
    Raised when accepting a tour guide fails after the user write was applied.
    details carries user_updated / guide_updated / compensated flags.
    """
    def __init__(self, message: str = "Tour guide acceptance failed", details: Optional[Any] = None):
        super().__init__(message, code="GUIDE_ACCEPTANCE_FAILED", status_code=500, details=details)
