# career_quiz/errors.py
# Exception taxonomy shared by the store, lifecycle and report layers.


class QuizError(Exception):
    """Base class for quiz service errors."""
    def __init__(self, message="Quiz service error occurred", code="QUIZ_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class StorageError(QuizError):
    """Raised when a session store operation cannot complete."""
    def __init__(self, message="Session store operation failed", code="STORAGE_ERROR"):
        super().__init__(message, code)


class DataIntegrityError(QuizError):
    """Raised when a stored result references data the domain tables do not know."""
    def __init__(self, message="Stored result is inconsistent with the RIASEC tables", code="DATA_INTEGRITY"):
        super().__init__(message, code)


class SessionIncompleteError(QuizError):
    """Raised when a report is requested for a session that was never completed."""
    def __init__(self, message="Session has not been completed", code="SESSION_INCOMPLETE"):
        super().__init__(message, code)


class InvalidScoresError(ValueError):
    """Raised when a score map has unknown type codes or out-of-range tallies."""
