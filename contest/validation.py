"""Validation of a single score submission before it is written."""

import enum
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Mapping, Self

from contest.models import CATEGORIES, Scores

MIN_SCORE = 0
MAX_SCORE = 10
SCORE_STEP = 0.5


class RejectionReason(enum.Enum):
    OUT_OF_RANGE = "OutOfRange"
    INVALID_GRANULARITY = "InvalidGranularity"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a submission.

    Attributes:
        ok: True if every category score is acceptable
        reason: Why the submission was rejected (None when ok)
        category: Field name of the first offending category (None when ok)
        value: The offending value as submitted (None when ok)
    """
    ok: bool
    reason: RejectionReason | None = None
    category: str | None = None
    value: Any = None

    @classmethod
    def accepted(cls) -> Self:
        return cls(ok=True)

    @classmethod
    def rejected(cls, reason: RejectionReason, category: str, value: Any) -> Self:
        return cls(ok=False, reason=reason, category=category, value=value)

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"ok": True}
        return {
            "ok": False,
            "reason": self.reason.value,
            "category": self.category,
            "value": self.value,
        }


class VoteRejected(ValueError):
    """Raised on the write path when a submission fails validation."""

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(
            f"{result.category}={result.value!r} rejected: {result.reason.value}"
        )


def _check_score(value: Any) -> RejectionReason | None:
    # bool is a Real subclass but never a meaningful score
    if isinstance(value, bool) or not isinstance(value, Real):
        return RejectionReason.OUT_OF_RANGE
    if math.isnan(value) or not MIN_SCORE <= value <= MAX_SCORE:
        return RejectionReason.OUT_OF_RANGE
    if not float(value / SCORE_STEP).is_integer():
        return RejectionReason.INVALID_GRANULARITY
    return None


def validate(scores: Scores) -> ValidationResult:
    """Check that every category score is in [0, 10] in steps of 0.5.

    Categories are checked in order and the first failure is reported.
    Range is checked before granularity, so 10.5 is out of range rather
    than mis-stepped.
    """
    for category, value in zip(CATEGORIES, scores.as_tuple()):
        reason = _check_score(value)
        if reason is not None:
            return ValidationResult.rejected(reason, category.field, value)
    return ValidationResult.accepted()


def require_valid(scores: Scores) -> Scores:
    """Return scores unchanged, or raise VoteRejected."""
    result = validate(scores)
    if not result.ok:
        raise VoteRejected(result)
    return scores


def scores_from_mapping(mapping: Mapping[str, Any]) -> Scores:
    """Build Scores from a {"category_1": ..., ...} mapping.

    Raises KeyError if a category is missing. Values are not validated here.
    """
    return Scores(**{c.field: mapping[c.field] for c in CATEGORIES})
