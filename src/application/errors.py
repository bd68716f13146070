from typing import List, Optional


class AssessmentError(Exception):
    """Base exception for assessment submission errors."""


class InvalidAssessmentError(AssessmentError):
    """Raised when submitted answers fail validation."""

    def __init__(self, message: str, errors: Optional[List[dict]] = None):
        super().__init__(message)
        self.errors = errors or []


class IncompleteAssessmentError(AssessmentError):
    """Raised when a wizard step is left with required fields unanswered."""

    def __init__(self, missing: List[str]):
        super().__init__("Missing required fields: " + ", ".join(missing))
        self.missing = missing
