"""GitHub organizations."""

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .entities import MAIN_RELATION, Entity
from .memo import MemoSlot
from .repository import Repository

if TYPE_CHECKING:
    from .client import GitHubClient

logger = logging.getLogger(__name__)


class Organization(Entity):
    """
    An organization visible to the authenticated user.

    Only ``id``, ``login`` and ``description`` are kept from the listing;
    ``details()`` fetches the full object.
    """

    def __init__(self, client: 'GitHubClient', data: Dict[str, Any]):
        super().__init__(client, data)
        self.id = data.get('id')
        self.login = data.get('login')
        self.description = data.get('description')

        self._details: MemoSlot[Dict[str, Any]] = MemoSlot(f"org:{self.login}:details")
        self._repos: MemoSlot[List[Repository]] = MemoSlot(f"org:{self.login}:repos")

    def details(self) -> Optional[Dict[str, Any]]:
        """
        Retrieve the full API object for this organization.

        Memoized until ``clear()``.
        """
        return self._details.get(lambda: self.fetch(MAIN_RELATION))

    def repos(self) -> Optional[List[Repository]]:
        """
        Retrieve the repositories that belong to this organization.

        Memoized until ``clear()``. Returns None if the request failed.
        """
        def fetch_repos() -> Optional[List[Repository]]:
            data = self.fetch('repos')
            if data is None:
                return None
            logger.debug(f"Fetched {len(data)} repositories for {self.login}")
            return [Repository(self.client, item) for item in data]

        return self._repos.get(fetch_repos)

    def clear(self) -> 'Organization':
        """Forget memoized results and return the organization."""
        self._details.clear()
        self._repos.clear()
        return self

    def __repr__(self) -> str:
        return f"Organization(login={self.login!r})"
