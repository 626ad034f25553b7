"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from penpixel.domain.error import NotFoundError


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_uuid(value: str, resource: str) -> UUID:
    """Parse an id coming from a request.

    A malformed id cannot name an existing resource.

    Raises:
        NotFoundError: If value is not a UUID
    """
    try:
        return UUID(value)
    except ValueError:
        raise NotFoundError(resource, value)
