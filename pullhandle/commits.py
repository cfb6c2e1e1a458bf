import functools
import logging
from typing import Any, Dict

from pullhandle.repos import Repo

log = logging.getLogger(__name__)


@functools.total_ordering
class Commit:
    """A commit in a repository, addressed by its sha."""

    def __init__(self, repo: Repo, sha: str) -> None:
        self._repo = repo
        self._sha = sha

    @property
    def repo(self) -> Repo:
        return self._repo

    @property
    def sha(self) -> str:
        return self._sha

    @property
    def url(self) -> str:
        return f"{self._repo.url}/commits/{self._sha}"

    def json(self) -> Dict[str, Any]:
        log.debug("Fetching commit %s of %s", self._sha, self._repo)
        return self._repo.requester.json(self.url)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Commit):
            return NotImplemented
        return self._sha == other._sha

    def __lt__(self, other: "Commit") -> bool:
        if not isinstance(other, Commit):
            return NotImplemented
        return self._sha < other._sha

    def __hash__(self) -> int:
        return hash(self._sha)

    def __repr__(self) -> str:
        return f"Commit({self._repo.name!r}, {self._sha!r})"
