import threading

from sqlalchemy.orm import Session

from learnhub.core import container
from learnhub.infrastructure.common.di import inject_provider


def test_dependency_builds_repository_on_the_given_session() -> None:
    session = Session()
    try:
        repository = inject_provider(container.content_repository)(session)
    finally:
        session.close()

    assert repository.db is session


def test_override_is_released_after_build() -> None:
    session = Session()
    try:
        inject_provider(container.content_repository)(session)
    finally:
        session.close()

    assert not container.db.overridden


def test_concurrent_requests_never_share_a_session() -> None:
    dependency = inject_provider(container.content_repository)
    mismatches: list[int] = []
    start = threading.Barrier(4)

    def build_many(worker: int) -> None:
        own_session = Session()
        try:
            start.wait()
            for _ in range(2000):
                repository = dependency(own_session)
                if repository.db is not own_session:
                    mismatches.append(worker)
        finally:
            own_session.close()

    workers = [threading.Thread(target=build_many, args=(n,)) for n in range(4)]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()

    assert mismatches == []
