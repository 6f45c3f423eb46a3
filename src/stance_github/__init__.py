"""
stance-github: an object interface to the GitHub v3 API.

Start from a client, then walk organizations, repositories and issues::

    from stance_github import GitHubClient

    github = GitHubClient().authenticate('token', token)
    for org in github.orgs():
        for repo in org.repos():
            for issue in repo.issues():
                print(issue['number'], issue['title'])

Every listing is memoized; call ``clear()`` to fetch again. GitHub limits
requests, even authenticated ones.
"""

from .version import __version__
from .config import GitHubConfig
from .api import (
    GitHubClient,
    GitHubAPIError,
    AuthenticationError,
    TransportError,
    Organization,
    Repository,
    Issue
)

__all__ = [
    '__version__',
    'GitHubConfig',
    'GitHubClient',
    'GitHubAPIError',
    'AuthenticationError',
    'TransportError',
    'Organization',
    'Repository',
    'Issue'
]
