"""
GitHub API Client Implementation.

This module provides the entry point of the object interface:

- Token authentication
- GET/POST helpers that encode and decode JSON
- Recording of the last logical (non-2xx) error
- Optional tracing of requests and responses
- Memoized discovery of the user's organizations

Everything below the organizations is reached by following URLs that the
API hands back, never by building paths here.
"""

import json
import logging
import re
from typing import Any, List, Optional

import requests

from ..config import GitHubConfig, DEFAULT_API_URL
from ..version import __version__
from .errors import AuthenticationError, ResponseDecodeError, TransportError
from .memo import MemoSlot
from .organization import Organization
from .trace import disable_tracing, enable_tracing, trace_request, trace_response

logger = logging.getLogger(__name__)

USER_AGENT = f"stance-github/{__version__}"
USER_ORGS_ENDPOINT = "/user/orgs"

ABSOLUTE_URL = re.compile(r'^https?:')
URL_TEMPLATE = re.compile(r'\{.*?\}')


class GitHubClient:
    """
    Client for the GitHub v3 API.

    Usage:
        client = GitHubClient().authenticate('token', 'ghp_...')
        for org in client.orgs():
            for repo in org.repos():
                ...
    """

    def __init__(self, base_address: Optional[str] = None, debug: bool = False,
                 timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        """
        Initialize GitHub API client.

        Args:
            base_address: API root, defaults to https://api.github.com
            debug: Trace requests and responses to stderr
            timeout: Request timeout in seconds, None to wait indefinitely
            session: Optional pre-built requests session
        """
        base_address = base_address or DEFAULT_API_URL
        if base_address.endswith('/'):
            base_address = base_address[:-1]

        self.base_address = base_address
        self.timeout = timeout
        self.session = self._create_session(session)

        self._token: Optional[str] = None
        self._error: Any = None
        self._debug = False
        self._orgs: MemoSlot[List[Organization]] = MemoSlot("orgs")

        self.debug(debug)
        logger.info(f"GitHub client initialized for {self.base_address}")

    @classmethod
    def from_config(cls, config: GitHubConfig) -> 'GitHubClient':
        """Create a client from configuration, authenticated if it holds a token."""
        client = cls(config.api_url, debug=config.debug, timeout=config.timeout)
        if config.access_token:
            client.authenticate('token', config.access_token)
        return client

    def _create_session(self, session: Optional[requests.Session] = None) -> requests.Session:
        """Create a session for HTTP requests."""
        session = session or requests.Session()
        session.headers.update({
            'Accept': 'application/json',
            'User-Agent': USER_AGENT
        })
        return session

    def close(self) -> None:
        self.debug(False)
        self.session.close()

    def __enter__(self) -> 'GitHubClient':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def debug(self, on: bool) -> 'GitHubClient':
        """Enable or disable request/response tracing."""
        on = bool(on)
        if on and not self._debug:
            enable_tracing()
        elif self._debug and not on:
            disable_tracing()
        self._debug = on
        return self

    @property
    def debugging(self) -> bool:
        return self._debug

    def authenticate(self, method: str, credential: str) -> 'GitHubClient':
        """
        Set credentials for subsequent requests.

        Only personal access tokens are supported::

            client = GitHubClient().authenticate('token', token)

        Raises:
            AuthenticationError: If the method is not 'token'
        """
        if method == 'token':
            self._token = credential
            return self

        raise AuthenticationError(method)

    def url(self, path: Optional[str]) -> str:
        """
        Resolve a path against the API root.

        Absolute URLs (usually copied from an earlier response) are returned
        as they are, minus any ``{...}`` template placeholders.
        """
        if path and ABSOLUTE_URL.match(path):
            return URL_TEMPLATE.sub('', path)

        path = path or '/'
        if path.startswith('/'):
            path = path[1:]
        return f"{self.base_address}/{path}"

    def get(self, path: str) -> Any:
        """
        GET a resource.

        Returns:
            Decoded JSON body, or None if the API answered with an error
            (see ``last_error()``)
        """
        return self._request('GET', path)

    def post(self, path: str, payload: Any = None) -> Any:
        """
        POST a JSON payload to a resource.

        Returns:
            Decoded JSON body, or None if the API answered with an error
            (see ``last_error()``)
        """
        return self._request('POST', path, payload)

    def _request(self, method: str, path: str, payload: Any = None) -> Any:
        """
        Send a request and decode the response.

        Raises:
            TransportError: When the request cannot be built or sent
            ResponseDecodeError: When the response body is not JSON
        """
        url = self.url(path)

        headers = {}
        if method == 'POST':
            headers['Content-Type'] = 'application/json'
        if self._token:
            headers['Authorization'] = f'token {self._token}'

        try:
            body = json.dumps(payload) if payload is not None else None
            request = self.session.prepare_request(
                requests.Request(method, url, headers=headers, data=body)
            )
        except (requests.exceptions.RequestException, TypeError, ValueError) as e:
            logger.error(f"Unable to create {method} {url} request: {e}")
            raise TransportError(f"unable to create {method} {url} request: {e}", method, url) from e

        if self._debug:
            trace_request(request, path)

        try:
            logger.debug(f"Making {method} request to {url}")
            response = self.session.send(request, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Unable to send {method} {url} request: {e}")
            raise TransportError(f"unable to send {method} {url} request: {e}", method, url) from e

        if self._debug:
            trace_response(response)

        data = self._decode(response, method, url)
        if not 200 <= response.status_code < 300:
            logger.warning(f"{method} {url} failed with status {response.status_code}")
            self._error = data
            return None
        return data

    def _decode(self, response: requests.Response, method: str, url: str) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ResponseDecodeError(
                f"{method} {url} returned a body that is not JSON: {e}",
                response.status_code,
                response.text
            ) from e

    def last_error(self) -> Any:
        """
        Return the most recent logical failure, or None if there was none.

        Later successes do not clear it, so only consult this right after a
        call has returned None.
        """
        return self._error

    def orgs(self) -> Optional[List[Organization]]:
        """
        Retrieve all organizations visible to the current credentials.

        Memoized until ``clear()``. Returns None if the request failed.
        """
        def fetch_orgs() -> Optional[List[Organization]]:
            data = self.get(USER_ORGS_ENDPOINT)
            if data is None:
                return None
            logger.debug(f"Fetched {len(data)} organizations")
            return [Organization(self, item) for item in data]

        return self._orgs.get(fetch_orgs)

    def clear(self) -> 'GitHubClient':
        """Forget the memoized organizations and return the client."""
        self._orgs.clear()
        return self
