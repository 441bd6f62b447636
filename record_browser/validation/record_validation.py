from __future__ import annotations

import copy
import math
from typing import TYPE_CHECKING, Any, List

from record_browser.validation.errors import ValidationError, ValidationIssue

if TYPE_CHECKING:
    from record_browser.core.record import RecordDraft


_INVALID = object()


def _coerce_rating(value: Any) -> Any:
    """Form inputs may hand over strings; None/"" mean missing."""
    if value is None or isinstance(value, bool):
        return _INVALID if isinstance(value, bool) else None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else _INVALID
    text = str(value).strip()
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return _INVALID
    if not math.isfinite(number):
        return _INVALID
    return int(number) if number.is_integer() else number


def _clean_items(items: List[str]) -> List[str]:
    cleaned = (str(i).strip() for i in items or [])
    return [i for i in cleaned if i]


def validate_candidate(draft: RecordDraft) -> RecordDraft:
    """
    Check a draft is fit for submission and return a cleaned copy.

    Name must be non-blank and rating a non-zero number. List items are
    trimmed and empty ones dropped. Raises ValidationError listing every
    problem found; the draft itself is left untouched.
    """
    issues: List[ValidationIssue] = []

    if not (draft.name or "").strip():
        issues.append(ValidationIssue("missing_name", "Name is required"))

    rating = _coerce_rating(draft.rating)
    if rating is _INVALID:
        issues.append(ValidationIssue("invalid_rating", f"Rating must be a number, got {draft.rating!r}"))
    elif not rating:
        issues.append(ValidationIssue("missing_rating", "Rating is required"))

    if issues:
        raise ValidationError(issues)

    cleaned = copy.deepcopy(draft)
    cleaned.rating = rating
    cleaned.powers = _clean_items(draft.powers)
    cleaned.tips = _clean_items(draft.tips)
    return cleaned
