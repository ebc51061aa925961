from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from wordvault.application.vocabulary.vocabulary_app import VocabularyApp
from wordvault.core import container

T = TypeVar("T")


def inject_provider(provider: Provider[T]) -> Callable[[], T]:
    """
    Create a FastAPI dependency for a container provider.

    Resolution happens per request, so provider overrides set in tests take
    effect without rebuilding the routers.
    """

    def dependency() -> T:
        return provider()

    return dependency


get_vocabulary_app: Callable[[], VocabularyApp] = inject_provider(container.vocabulary_app)
