from .record import Record
from .review_session import PresentedCard, ReviewDirection, ReviewSession, ReviewState

__all__ = [
    "PresentedCard",
    "Record",
    "ReviewDirection",
    "ReviewSession",
    "ReviewState",
]
