"""
Configuration package for stance-github.

Environment variables are read here and nowhere else.
"""

from .github_config import GitHubConfig, DEFAULT_API_URL, DEBUG_ENV_VAR

__all__ = [
    'GitHubConfig',
    'DEFAULT_API_URL',
    'DEBUG_ENV_VAR'
]
