"""Issues and pull requests of a repository."""

from typing import Any, Dict


class Issue:
    """
    A single issue as returned by the API.

    Pull requests are listed alongside issues; they carry a ``pull_request``
    field and are otherwise kept exactly as received.
    """

    def __init__(self, data: Dict[str, Any]):
        self.data = data

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def __repr__(self) -> str:
        return f"Issue(number={self.data.get('number')!r}, title={self.data.get('title')!r})"
