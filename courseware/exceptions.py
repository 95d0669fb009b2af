"""
Typed service-layer exceptions

Raised by services and mapped to HTTP responses in main.py.
"""


class CoursewareError(Exception):
    """Base exception for the learning platform"""
    status_code: int = 500
    error: str = "internal_error"

    def __init__(self, message: str, status_code: int = None):
        self.message = message
        if status_code:
            self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(CoursewareError):
    """
    Raised when a user, chapter or badge lookup fails.
    """
    status_code = 404
    error = "not_found"

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, self.status_code)


class InvalidArgumentError(CoursewareError):
    """
    Raised when a caller passes arguments that cannot produce a valid record.

    Examples:
    - Quiz submitted with zero questions
    - More correct answers than questions
    """
    status_code = 400
    error = "invalid_argument"

    def __init__(self, message: str = "Invalid argument"):
        super().__init__(message, self.status_code)
