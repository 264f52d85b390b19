from collections.abc import Callable
from typing import Any, TypeVar

from dependency_injector.providers import Provider

from wordjotter.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(
    provider: Provider[T], **stores: Provider[Any]
) -> Callable[[DatabaseSession], T]:
    """
    Turn a container provider into a FastAPI dependency.

    Each keyword names a use case argument and the repository provider that
    fills it. The repositories are built per request around that request's
    session and passed to the use case directly.
    """

    def build(db: DatabaseSession) -> T:
        return provider(**{name: store(db=db) for name, store in stores.items()})

    return build
