"""Builds fresh list containers for each benchmark."""
import logging
from typing import Optional

from .models import IntList, ListKind


# Configure logging
logger = logging.getLogger(__name__)


class ListFactory:
    """Creates empty or pre-populated containers of a given kind."""

    def __init__(self, list_size: int):
        self.list_size = list_size

    @staticmethod
    def create_empty(kind: ListKind) -> IntList:
        """Return a new empty container backing ``kind``."""
        return kind.container_factory()

    def create_populated(self, kind: ListKind, size: Optional[int] = None) -> IntList:
        """
        Return a new container holding ``0..size-1`` in ascending order.

        Args:
            kind: Backing kind of the container.
            size: Number of elements; defaults to the configured list size.

        Returns:
            A freshly allocated list or deque.
        """
        size = self.list_size if size is None else size
        container = self.create_empty(kind)
        for value in range(size):
            container.append(value)
        logger.debug(f"Populated {kind.value} list with {size} elements")
        return container
