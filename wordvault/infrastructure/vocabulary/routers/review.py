from fastapi import APIRouter, Depends

from wordvault.application.common.result import Failure
from wordvault.application.vocabulary.vocabulary_app import VocabularyApp
from wordvault.infrastructure.common.di import get_vocabulary_app
from wordvault.infrastructure.common.errors import raise_failure
from wordvault.infrastructure.vocabulary.schemas import (
    ReviewAnswerRequest,
    ReviewCard,
    ReviewStateResponse,
)

router = APIRouter(prefix="/review", tags=["review"])


def _state(app: VocabularyApp, message: str = "") -> ReviewStateResponse:
    session = app.review_use_case.session
    card = app.current_card()
    return ReviewStateResponse(
        state=session.state,
        remaining=session.remaining,
        card=ReviewCard.from_card(card) if card else None,
        due_count=app.due_count(),
        message=message,
    )


@router.post("/start", response_model=ReviewStateResponse)
async def start_review(app: VocabularyApp = Depends(get_vocabulary_app)) -> ReviewStateResponse:
    """Start a drill over every word due now, in random order."""
    size = app.start_review()
    return _state(app, app.status if size == 0 else "")


@router.get("/card", response_model=ReviewStateResponse)
async def get_current_card(
    app: VocabularyApp = Depends(get_vocabulary_app),
) -> ReviewStateResponse:
    return _state(app)


@router.post("/reveal", response_model=ReviewStateResponse)
async def reveal_card(app: VocabularyApp = Depends(get_vocabulary_app)) -> ReviewStateResponse:
    """Show the hidden side of the current card."""
    app.reveal()
    return _state(app)


@router.post("/answer", response_model=ReviewStateResponse)
async def answer_card(
    request: ReviewAnswerRequest,
    app: VocabularyApp = Depends(get_vocabulary_app),
) -> ReviewStateResponse:
    """
    Mark the current card known or unknown and move to the next one.

    Raises:
        BusinessRuleViolationError: If no card is being reviewed (400)
    """
    result = await app.answer(request.known)
    if isinstance(result, Failure):
        raise_failure(app, result)
    return _state(app, app.status)


@router.post("/exit", response_model=ReviewStateResponse)
async def exit_review(app: VocabularyApp = Depends(get_vocabulary_app)) -> ReviewStateResponse:
    app.exit_review()
    return _state(app)
