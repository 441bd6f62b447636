from .errors import ValidationError, ValidationIssue
from .record_validation import validate_candidate

__all__ = ["ValidationError", "ValidationIssue", "validate_candidate"]
