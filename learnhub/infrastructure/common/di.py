import threading
from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from learnhub.core import container
from learnhub.database import DatabaseSession

T = TypeVar("T")

# The db override lives on the shared container; only one graph may be built at a time.
_override_lock = threading.Lock()


def inject_provider(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    The request session is bound to ``container.db`` only while the provider
    graph is built. Sync routes run on a threadpool, so building is serialized.
    """

    def dependency(db: DatabaseSession) -> T:
        with _override_lock:
            container.db.override(db)
            try:
                return provider()
            finally:
                container.db.reset_override()

    return dependency
