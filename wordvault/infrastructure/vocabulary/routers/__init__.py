from .backup import router as backup_router
from .review import router as review_router
from .words import router as words_router

__all__ = ["backup_router", "review_router", "words_router"]
