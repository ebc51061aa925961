from .deduplication_service import RecordDeduplicationService
from .record_normalizer import NormalizationResult, RecordNormalizer
from .review_scheduler import ReviewOutcome, ReviewScheduler

__all__ = [
    "NormalizationResult",
    "RecordDeduplicationService",
    "RecordNormalizer",
    "ReviewOutcome",
    "ReviewScheduler",
]
