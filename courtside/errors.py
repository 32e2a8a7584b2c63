"""Custom exception classes for the application."""


class AppError(Exception):
    """Base application error class."""

    def __init__(self, message, status_code=400):
        """Initialize the error."""
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ValidationError(AppError):
    """Raised when user input fails validation."""

    def __init__(self, message="Validation failed."):
        """Initialize the error."""
        super().__init__(message, 400)


class NotFoundError(AppError):
    """Raised when a resource is not found."""

    def __init__(self, message="Resource not found."):
        """Initialize the error."""
        super().__init__(message, 404)


class StorageError(AppError):
    """Raised when the document store cannot complete a request."""

    def __init__(self, message="The database is unavailable. Please try again."):
        """Initialize the error."""
        super().__init__(message, 503)


class StorageTimeoutError(StorageError):
    """Raised when a document store call exceeds its deadline."""

    def __init__(self, message="The database took too long to respond."):
        """Initialize the error."""
        super().__init__(message)
        self.status_code = 504
