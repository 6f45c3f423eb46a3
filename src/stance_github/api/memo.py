"""
Memoization slots for lazily fetched API data.

Each entity keeps one ``MemoSlot`` per child collection. A slot is either
unfetched or holds the value of the first successful fetch; only ``clear()``
moves it back. There is no expiry and no size limit.
"""

import logging
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class CacheState(Enum):
    """Lifecycle of a memoized value."""

    UNFETCHED = "unfetched"
    FETCHED = "fetched"


class MemoSlot(Generic[T]):
    """
    Holds at most one fetched value.

    A fetch that returns None is treated as a failure and is not stored, so
    the next ``get()`` tries again.
    """

    def __init__(self, name: str):
        """
        Initialize slot.

        Args:
            name: Name of the slot (for logging)
        """
        self.name = name
        self.state = CacheState.UNFETCHED
        self._value: Optional[T] = None

    @property
    def fetched(self) -> bool:
        return self.state is CacheState.FETCHED

    def get(self, fetch: Callable[[], Optional[T]]) -> Optional[T]:
        """
        Return the stored value, calling ``fetch`` first if there is none.

        Args:
            fetch: Zero-argument callable producing the value, or None on failure

        Returns:
            The memoized value, or None if the fetch failed
        """
        if self.state is CacheState.FETCHED:
            logger.debug(f"Memo hit for '{self.name}'")
            return self._value

        logger.debug(f"Memo miss for '{self.name}'")
        value = fetch()
        if value is None:
            return None

        self._value = value
        self.state = CacheState.FETCHED
        return value

    def clear(self) -> None:
        """Forget the stored value."""
        self._value = None
        self.state = CacheState.UNFETCHED
        logger.debug(f"Memo '{self.name}' cleared")
