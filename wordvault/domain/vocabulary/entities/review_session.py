"""
Review session over the records that were due when the session started.
"""

import random
from dataclasses import dataclass
from enum import Enum

from wordvault.domain.common.exceptions import BusinessRuleViolationError
from wordvault.domain.vocabulary.entities.record import Record

DEFAULT_MEANING_FIRST_PROBABILITY = 0.7


class ReviewState(str, Enum):
    """Lifecycle of the card currently on screen."""

    EMPTY = "empty"
    PRESENTING = "presenting"
    REVEALED = "revealed"


class ReviewDirection(str, Enum):
    """Which side of the record is shown as the prompt."""

    MEANING_FIRST = "meaning-first"
    WORD_FIRST = "word-first"


@dataclass(frozen=True)
class PresentedCard:
    """Card as shown to the user. The answer side is hidden until revealed."""

    record: Record
    direction: ReviewDirection
    revealed: bool

    @property
    def prompt(self) -> str:
        if self.direction is ReviewDirection.MEANING_FIRST:
            return self.record.meaning
        return self.record.word

    @property
    def answer(self) -> str:
        if self.direction is ReviewDirection.MEANING_FIRST:
            return self.record.word
        return self.record.meaning

    @property
    def example(self) -> str:
        return self.record.example


class ReviewSession:
    """
    State machine for a single review drill.

    States: EMPTY -> PRESENTING -> REVEALED -> (next card) PRESENTING ... -> EMPTY

    Business Rules:
    - The pool is the due set at start time, shuffled once, never re-queried
    - Every presentation picks its direction independently, favouring
      meaning-first with the configured probability
    - Reveal is idempotent
    - Answering is only legal while a card is presented or revealed
    - Exiting is always legal and discards the remaining pool
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        meaning_first_probability: float = DEFAULT_MEANING_FIRST_PROBABILITY,
    ) -> None:
        if not 0.0 <= meaning_first_probability <= 1.0:
            raise ValueError("meaning_first_probability must be between 0 and 1")
        self._rng = rng or random.Random()
        self._meaning_first_probability = meaning_first_probability
        self._pool: list[Record] = []
        self._state = ReviewState.EMPTY
        self._direction = ReviewDirection.WORD_FIRST

    @property
    def state(self) -> ReviewState:
        return self._state

    @property
    def remaining(self) -> int:
        """Number of records left in the pool, including the current one."""
        return len(self._pool)

    @property
    def current(self) -> Record | None:
        return self._pool[0] if self._pool else None

    @property
    def card(self) -> PresentedCard | None:
        """The card on screen, or None when the session is empty."""
        if self._state is ReviewState.EMPTY or not self._pool:
            return None
        return PresentedCard(
            record=self._pool[0],
            direction=self._direction,
            revealed=self._state is ReviewState.REVEALED,
        )

    def start(self, due_records: list[Record]) -> int:
        """
        Start a session over a snapshot of the due records.

        Args:
            due_records: Records due at session start

        Returns:
            Pool size
        """
        self._pool = list(due_records)
        self._rng.shuffle(self._pool)
        self._present_next()
        return len(self._pool)

    def reveal(self) -> None:
        """Show the hidden side of the current card. No-op unless presenting."""
        if self._state is ReviewState.PRESENTING:
            self._state = ReviewState.REVEALED

    def require_answerable(self) -> Record:
        """
        Return the record awaiting an answer.

        Raises:
            BusinessRuleViolationError: If no card is being presented
        """
        if self._state is ReviewState.EMPTY or not self._pool:
            raise BusinessRuleViolationError(
                "answer_requires_card", "No word is being reviewed right now"
            )
        return self._pool[0]

    def complete_current(self) -> None:
        """Remove the current record from the pool and present the next one."""
        self.require_answerable()
        self._pool.pop(0)
        self._present_next()

    def exit(self) -> None:
        """Discard the remaining pool."""
        self._pool = []
        self._state = ReviewState.EMPTY

    def _present_next(self) -> None:
        if not self._pool:
            self._state = ReviewState.EMPTY
            return
        self._direction = (
            ReviewDirection.MEANING_FIRST
            if self._rng.random() < self._meaning_first_probability
            else ReviewDirection.WORD_FIRST
        )
        self._state = ReviewState.PRESENTING
