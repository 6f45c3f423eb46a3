"""
GitHub repositories.

A repository keeps every field of the API object except its URLs, which go
into ``urls``, and its ``has_*`` feature switches, which go into ``has``
without the prefix::

    {"name": "x", "has_wiki": false, "issues_url": "..."}
    -> fields {"name": "x"}, has {"wiki": False}, urls {"issues": "...", ...}
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .entities import URL_SUFFIX, MAIN_RELATION, Entity
from .issue import Issue
from .memo import MemoSlot

if TYPE_CHECKING:
    from .client import GitHubClient

logger = logging.getLogger(__name__)

FLAG_PREFIX = "has_"


def split_repository_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """Return the fields of a repository object that are neither URLs nor flags."""
    return {
        key: value for key, value in data.items()
        if not key.endswith(URL_SUFFIX) and not key.startswith(FLAG_PREFIX)
    }


def split_repository_flags(data: Dict[str, Any]) -> Dict[str, bool]:
    """Return the ``has_*`` switches of a repository object, prefix removed."""
    return {
        key[len(FLAG_PREFIX):]: bool(value) for key, value in data.items()
        if key.startswith(FLAG_PREFIX)
    }


class Repository(Entity):
    """A repository reached from an organization."""

    def __init__(self, client: 'GitHubClient', data: Dict[str, Any]):
        super().__init__(client, data)
        self.fields = split_repository_fields(data)
        self.has = split_repository_flags(data)

        self._details: MemoSlot[Dict[str, Any]] = MemoSlot(f"repo:{self.name}:details")
        self._issues: MemoSlot[List[Issue]] = MemoSlot(f"repo:{self.name}:issues")

    @property
    def name(self) -> Optional[str]:
        return self.fields.get('full_name') or self.fields.get('name')

    def __getitem__(self, key: str) -> Any:
        return self.fields[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    def details(self) -> Optional[Dict[str, Any]]:
        """
        Retrieve the full API object for this repository.

        Memoized until ``clear()``.
        """
        return self._details.get(lambda: self.fetch(MAIN_RELATION))

    def issues(self) -> Optional[List[Issue]]:
        """
        Retrieve the issues, pull requests included, of this repository.

        Memoized until ``clear()``. Returns None if the request failed.
        """
        def fetch_issues() -> Optional[List[Issue]]:
            data = self.fetch('issues')
            if data is None:
                return None
            logger.debug(f"Fetched {len(data)} issues for {self.name}")
            return [Issue(item) for item in data]

        return self._issues.get(fetch_issues)

    def clear(self) -> 'Repository':
        """Forget memoized results and return the repository."""
        self._details.clear()
        self._issues.clear()
        return self

    def __repr__(self) -> str:
        return f"Repository(name={self.name!r})"
