"""
Error classes for GitHub API access.

Only conditions the caller cannot recover from are raised. A request that
completes with a non-2xx status is not an exception: the client returns
None and keeps the decoded body for ``last_error()``.
"""

from typing import Any, Optional


class APIError(Exception):
    """Base class for all API-related errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        """Initialize API error."""
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class GitHubAPIError(APIError):
    """Error talking to the GitHub API."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 response_data: Optional[Any] = None):
        """
        Initialize GitHub API error.

        Args:
            message: Error message
            status_code: HTTP status code, if a response was received
            response_data: Optional response payload for debugging
        """
        super().__init__(message, status_code)
        self.response_data = response_data


class TransportError(GitHubAPIError):
    """The request could not be built or sent."""

    def __init__(self, message: str, method: str, url: str):
        super().__init__(message)
        self.method = method
        self.url = url


class ResponseDecodeError(GitHubAPIError):
    """The response body is not valid JSON."""

    def __init__(self, message: str, status_code: int, body: str):
        super().__init__(message, status_code, response_data=body)


class AuthenticationError(GitHubAPIError):
    """Unrecognized authentication method."""

    def __init__(self, method: str):
        """
        Initialize authentication error.

        Args:
            method: The authentication method that was asked for
        """
        super().__init__(f"unrecognized authentication method '{method}'")
        self.method = method


class MissingRelationError(GitHubAPIError):
    """An entity has no hypermedia URL for the requested relation."""

    def __init__(self, entity: str, relation: str):
        super().__init__(f"{entity} has no '{relation}' URL")
        self.entity = entity
        self.relation = relation
