"""Pydantic schemas for the review drill."""

from pydantic import BaseModel, Field

from wordvault.domain.vocabulary.entities.review_session import PresentedCard, ReviewState


class ReviewCard(BaseModel):
    """The card on screen. ``answer`` stays hidden until the card is revealed."""

    record_id: int
    direction: str = Field(..., description="meaning-first or word-first")
    prompt: str
    answer: str | None = None
    example: str = ""
    revealed: bool

    @classmethod
    def from_card(cls, card: PresentedCard) -> "ReviewCard":
        return cls(
            record_id=card.record.id.value,
            direction=card.direction.value,
            prompt=card.prompt,
            answer=card.answer if card.revealed else None,
            example=card.example,
            revealed=card.revealed,
        )


class ReviewStateResponse(BaseModel):
    """Drill state after any review action."""

    state: ReviewState
    remaining: int = Field(..., description="Cards left, including the current one")
    card: ReviewCard | None = None
    due_count: int
    message: str = ""


class ReviewAnswerRequest(BaseModel):
    """Schema for answering the current card."""

    known: bool
