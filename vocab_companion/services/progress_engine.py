"""Progress update rules: counter replacement, mastered-word union, study streak."""
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from typing import Iterable

ONE_DAY = timedelta(days=1)
# streak continues when the previous session is at most this many whole days ago
STREAK_CONTINUATION_DAYS = 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ProgressRecord:
    user_id: str
    cards_studied: int = 0
    score: int = 0
    mastered_words: frozenset[str] = field(default_factory=frozenset)
    study_streak: int = 0
    last_studied: datetime | None = None
    created_at: datetime | None = None

    @classmethod
    def empty(cls, user_id: str) -> "ProgressRecord":
        """Zero-valued record returned for users that have never studied."""
        return cls(user_id=user_id)


@dataclass(frozen=True)
class ProgressDelta:
    """Results of one study session. None means "not provided"."""

    cards_studied: int | None = None
    score: int | None = None
    mastered_words: tuple[str, ...] | None = None

    @classmethod
    def of(
        cls,
        cards_studied: int | None = None,
        score: int | None = None,
        mastered_words: Iterable[str] | None = None,
    ) -> "ProgressDelta":
        words = tuple(mastered_words) if mastered_words is not None else None
        return cls(cards_studied=cards_studied, score=score, mastered_words=words)


def _replace_if_present_and_nonzero(current: int, incoming: int | None) -> int:
    # an explicit 0 is treated the same as an absent field
    if incoming is None or incoming == 0:
        return current
    return incoming


def days_between(earlier: datetime, later: datetime) -> int:
    """Whole days elapsed, floored (negative gaps floor below zero)."""
    return (later - earlier) // ONE_DAY


def next_streak(current_streak: int, last_studied: datetime | None, now: datetime) -> int:
    """Increment when the last session is within a day of now, else restart at 1.

    Every call within the window increments, so several updates on the same
    day raise the streak several times.
    """
    if last_studied is None:
        return 1
    if days_between(last_studied, now) <= STREAK_CONTINUATION_DAYS:
        return current_streak + 1
    return 1


def apply_delta(
    current: ProgressRecord | None,
    delta: ProgressDelta,
    *,
    user_id: str | None = None,
    now: datetime | None = None,
) -> ProgressRecord:
    """Compute the next record from the current one (or None) and a session delta."""
    now = now or utcnow()

    if current is None:
        if not user_id:
            raise ValueError("user_id is required to create a progress record")
        return ProgressRecord(
            user_id=user_id,
            cards_studied=delta.cards_studied or 0,
            score=delta.score or 0,
            mastered_words=frozenset(delta.mastered_words or ()),
            study_streak=1,
            last_studied=now,
            created_at=now,
        )

    mastered = current.mastered_words
    if delta.mastered_words:
        mastered = mastered | frozenset(delta.mastered_words)

    return replace(
        current,
        cards_studied=_replace_if_present_and_nonzero(current.cards_studied, delta.cards_studied),
        score=_replace_if_present_and_nonzero(current.score, delta.score),
        mastered_words=mastered,
        # uses the pre-update last_studied
        study_streak=next_streak(current.study_streak, current.last_studied, now),
        last_studied=now,
    )
