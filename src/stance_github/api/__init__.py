"""
API package for stance-github.

This package implements the object interface to the GitHub v3 API:

1. GitHub client with token authentication and JSON helpers
2. Organizations, repositories and issues reached through hypermedia URLs
3. Error classes for unrecoverable failures
"""

from .client import GitHubClient
from .errors import (
    APIError,
    GitHubAPIError,
    TransportError,
    ResponseDecodeError,
    AuthenticationError,
    MissingRelationError
)
from .memo import CacheState, MemoSlot
from .organization import Organization
from .repository import Repository
from .issue import Issue

__all__ = [
    'GitHubClient',
    'APIError',
    'GitHubAPIError',
    'TransportError',
    'ResponseDecodeError',
    'AuthenticationError',
    'MissingRelationError',
    'CacheState',
    'MemoSlot',
    'Organization',
    'Repository',
    'Issue'
]
