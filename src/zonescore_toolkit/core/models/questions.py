"""
Module: questions

Purpose:
    Provides the Question dataclass - a single scored question inside a
    snapshot, as fetched from storage. Immutable once constructed; the
    aggregation step only ever reads it.

Key Functions:
    - Question.is_answered: True when a score has been recorded
    - Question.is_eligible: True when the question may contribute to a zone
    - Question.to_dict() / Question.from_dict(): Serialization

Dependencies:
    - dataclasses (std)

Used By:
    - reporting.aggregation.aggregator
    - core.utils.serialization
    - reporting.loading.sources
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


MIN_SCORE = 0
MAX_SCORE = 100
MAX_TEXT_LENGTH = 1000


@dataclass(frozen=True)
class Question:
    """
    A question record scoped to one snapshot (immutable).

    Identity is the pair (snapshot_id, question_id); the same question id
    may appear in many snapshots with different scores.

    Attributes:
        snapshot_id: Snapshot this record belongs to
        question_id: Question identifier within the snapshot
        text: Question wording
        score: Recorded score 0-100, or None when unanswered
        is_relevant: Whether the question counts towards zone scores
        test_id: Owning test identifier

    Invariants:
        - snapshot_id >= 0, question_id > 0, test_id >= 0
        - score is None or 0 <= score <= 100
        - len(text) <= 1000

    Example:
        >>> q = Question(snapshot_id=1, question_id=7, text="2 + 2?", score=80)
        >>> q.is_answered
        True
    """

    snapshot_id: int
    question_id: int
    text: str = ""
    score: Optional[int] = None
    is_relevant: bool = True
    test_id: int = 0

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if self.snapshot_id < 0:
            raise ValueError(f"snapshot_id must be non-negative: {self.snapshot_id}")
        if self.question_id <= 0:
            raise ValueError(f"question_id must be positive: {self.question_id}")
        if self.test_id < 0:
            raise ValueError(f"test_id must be non-negative: {self.test_id}")
        if self.score is not None and not (MIN_SCORE <= self.score <= MAX_SCORE):
            raise ValueError(f"score must be {MIN_SCORE}-{MAX_SCORE}: {self.score}")
        if len(self.text) > MAX_TEXT_LENGTH:
            raise ValueError(
                f"text cannot exceed {MAX_TEXT_LENGTH} characters: {len(self.text)}"
            )

    @property
    def is_answered(self) -> bool:
        """True when a score has been recorded."""
        return self.score is not None

    @property
    def is_eligible(self) -> bool:
        """True when the question may contribute to a zone's statistics."""
        return self.is_relevant

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON storage.

        Returns:
            Dict representation with snake_case keys
        """
        return {
            "snapshot_id": self.snapshot_id,
            "question_id": self.question_id,
            "question_text": self.text,
            "score": self.score,
            "is_relevant": self.is_relevant,
            "test_id": self.test_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Question:
        """
        Deserialize from dictionary.

        Args:
            data: Dict representation (see to_dict)

        Returns:
            Question instance
        """
        return cls(
            snapshot_id=data["snapshot_id"],
            question_id=data["question_id"],
            text=data.get("question_text") or "",
            score=data.get("score"),
            is_relevant=data.get("is_relevant", True),
            test_id=data.get("test_id", 0),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"Question(snapshot={self.snapshot_id}, id={self.question_id}, "
            f"score={self.score}, relevant={self.is_relevant})"
        )
