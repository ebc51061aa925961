"""Translation of facade failures into HTTP errors."""

from typing import NoReturn

from fastapi import HTTPException
from starlette import status

from wordvault.application.common.result import Failure
from wordvault.application.vocabulary.vocabulary_app import VocabularyApp


def raise_failure(app: VocabularyApp, failure: Failure[str]) -> NoReturn:
    """
    Re-raise the error behind a failed facade call.

    The registered exception handlers turn it into a JSON response with the
    matching status code.
    """
    if app.last_error is not None:
        raise app.last_error
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=failure.unwrap_error())
