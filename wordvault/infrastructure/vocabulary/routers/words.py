import logging

from fastapi import APIRouter, Depends, Query
from starlette import status

from wordvault.application.common.result import Failure
from wordvault.application.vocabulary.services.view_cache import SortMode
from wordvault.application.vocabulary.vocabulary_app import VocabularyApp
from wordvault.infrastructure.common.di import get_vocabulary_app
from wordvault.infrastructure.common.errors import raise_failure
from wordvault.infrastructure.common.schemas import SuccessResponse
from wordvault.infrastructure.vocabulary.schemas import Word, WordCreateRequest, WordListResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/words", tags=["words"])


@router.get("", response_model=WordListResponse)
async def list_words(
    page: int | None = Query(None, ge=1, description="Page number, clamped to the last page"),
    page_size: int | None = Query(None, ge=1, description="Rows per page, capped at the maximum"),
    sort: SortMode | None = Query(None, description="Sort order"),
    search: str | None = Query(None, description="Case-insensitive word/meaning filter"),
    app: VocabularyApp = Depends(get_vocabulary_app),
) -> WordListResponse:
    """
    Get one page of the word list.

    The view remembers its search, sort and page size between calls.
    Changing any of them goes back to the first page unless ``page`` is
    also given.
    """
    view = app.view_cache
    if search is not None and search != view.search_term:
        app.set_search_term(search)
    if sort is not None and sort is not view.sort_mode:
        app.set_sort_mode(sort)
    if page_size is not None and page_size != view.page_size:
        app.set_page_size(page_size)
    if page is not None:
        app.set_page(page)

    return WordListResponse.from_page(
        view.page(), total_count=app.total_count(), due_count=app.due_count()
    )


@router.post("", response_model=Word, status_code=status.HTTP_201_CREATED)
async def create_word(
    request: WordCreateRequest,
    app: VocabularyApp = Depends(get_vocabulary_app),
) -> Word:
    """
    Add a new word, due for review immediately.

    Raises:
        ValidationError: If word or meaning is blank (400)
    """
    result = await app.save(request.word, request.meaning, request.example)
    if isinstance(result, Failure):
        raise_failure(app, result)
    return Word.from_record(result.unwrap())


@router.delete("/{word_id}", response_model=SuccessResponse, status_code=status.HTTP_200_OK)
async def delete_word(
    word_id: int,
    app: VocabularyApp = Depends(get_vocabulary_app),
) -> SuccessResponse:
    """
    Delete a word.

    Raises:
        RecordNotFoundError: If the word does not exist (404)
    """
    result = await app.delete_record(word_id)
    if isinstance(result, Failure):
        raise_failure(app, result)
    logger.info(f"Deleted word {word_id}")
    return SuccessResponse(success=True, message=app.status)
