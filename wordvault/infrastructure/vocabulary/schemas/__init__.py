from .backup_schemas import BackupLinkRequest, BackupLinkResponse, ImportResponse
from .review_schemas import ReviewAnswerRequest, ReviewCard, ReviewStateResponse
from .word_schemas import Word, WordCreateRequest, WordListResponse

__all__ = [
    "BackupLinkRequest",
    "BackupLinkResponse",
    "ImportResponse",
    "ReviewAnswerRequest",
    "ReviewCard",
    "ReviewStateResponse",
    "Word",
    "WordCreateRequest",
    "WordListResponse",
]
