"""GitHub API configuration module."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_API_URL = "https://api.github.com"
DEBUG_ENV_VAR = "STANCE_GITHUB_DEBUG"


@dataclass
class GitHubConfig:
    """
    GitHub API configuration.

    The client itself never looks at the environment; callers build a
    config (usually with ``from_env``) and hand it to
    ``GitHubClient.from_config``.
    """

    access_token: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    debug: bool = False  # Trace requests and responses to stderr
    timeout: Optional[float] = None  # Seconds; None waits indefinitely

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> 'GitHubConfig':
        """
        Create GitHub config from environment variables.

        Args:
            load_env_file: Also read a .env file from the working directory
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        token = os.getenv('GITHUB_TOKEN')
        if not token:
            token = os.getenv('GITHUB_API_TOKEN')  # Fallback

        timeout = os.getenv('GITHUB_TIMEOUT')

        return cls(
            access_token=token or None,
            api_url=os.getenv('GITHUB_API_URL', DEFAULT_API_URL),
            debug=os.getenv(DEBUG_ENV_VAR, '') == 'on',
            timeout=float(timeout) if timeout else None
        )
