"""
Shared plumbing for the API entities.

Entities navigate by hypermedia: every ``*_url`` field of the object GitHub
returned becomes an entry in the entity's ``urls`` map, keyed by the field
name without the suffix, and the object's own ``url`` is stored as ``main``.
"""

import weakref
from typing import TYPE_CHECKING, Any, Dict, Optional

from .errors import MissingRelationError

if TYPE_CHECKING:
    from .client import GitHubClient

URL_SUFFIX = "_url"
MAIN_RELATION = "main"


def build_url_map(data: Dict[str, Any]) -> Dict[str, Optional[str]]:
    """
    Collect the hypermedia URLs of an API object.

    Args:
        data: Raw object from the GitHub API

    Returns:
        Mapping of relation name to URL, with the object's own URL under 'main'
    """
    urls: Dict[str, Optional[str]] = {MAIN_RELATION: data.get('url')}
    for key, value in data.items():
        if key.endswith(URL_SUFFIX):
            urls[key[:-len(URL_SUFFIX)]] = value
    return urls


class Entity:
    """Base class for objects that fetch their children through the client."""

    def __init__(self, client: 'GitHubClient', data: Dict[str, Any]):
        # Entities never keep the client alive.
        self._client_ref = weakref.ref(client)
        self.urls = build_url_map(data)

    @property
    def client(self) -> 'GitHubClient':
        client = self._client_ref()
        if client is None:
            raise ReferenceError(f"{type(self).__name__} outlived its GitHub client")
        return client

    def relation_url(self, relation: str) -> str:
        """
        Look up the URL of a related resource.

        Raises:
            MissingRelationError: If the API object carried no such URL
        """
        url = self.urls.get(relation)
        if not url:
            raise MissingRelationError(type(self).__name__, relation)
        return url

    def fetch(self, relation: str) -> Any:
        """GET a related resource; None if the API reported an error."""
        return self.client.get(self.relation_url(relation))
