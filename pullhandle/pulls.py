import functools
import logging
from typing import Any, Dict, Iterable, Iterator

from pullhandle.commits import Commit
from pullhandle.errors import TransportError
from pullhandle.repos import Repo

log = logging.getLogger(__name__)


@functools.total_ordering
class Pull:
    """Base class for all pull request handles.

    A handle only knows which pull request it points at (repository and
    number). Everything else lives on the server: `json()` fetches it fresh
    every time and `patch()` sends partial documents for the server to merge.

    Handles compare, hash and sort by number alone.
    """

    def __init__(self, repo: Repo, number: int) -> None:
        if isinstance(number, bool) or not isinstance(number, int) or number < 1:
            raise ValueError(f"Pull request number must be positive, got {number!r}")
        self._repo = repo
        self._number = number

    @property
    def repo(self) -> Repo:
        return self._repo

    @property
    def number(self) -> int:
        return self._number

    def commits(self) -> Iterable[Commit]:
        raise NotImplementedError()

    def files(self) -> Iterable[Dict[str, Any]]:
        raise NotImplementedError()

    def merge(self, message: str) -> None:
        raise NotImplementedError()

    def json(self) -> Dict[str, Any]:
        raise NotImplementedError()

    def patch(self, document: Dict[str, Any]) -> None:
        raise NotImplementedError()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pull):
            return NotImplemented
        return self._number == other._number

    def __lt__(self, other: "Pull") -> bool:
        if not isinstance(other, Pull):
            return NotImplemented
        return self._number < other._number

    def __hash__(self) -> int:
        return hash(self._number)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._repo.name!r}, {self._number})"


class PullCommits:
    def __init__(self, pull: "GitHubPull") -> None:
        self.pull = pull

    def __iter__(self) -> Iterator[Commit]:
        url = f"{self.pull.url}/commits"
        for item in self.pull.repo.requester.paginate(url):
            if not isinstance(item, dict) or not isinstance(item.get("sha"), str):
                raise TransportError("Expected a commit object", url=url)
            yield Commit(self.pull.repo, item["sha"])


class GitHubPull(Pull):
    """
    Pull request living at `/repos/{owner}/{name}/pulls/{number}`.
    """

    @property
    def url(self) -> str:
        return f"{self.repo.url}/pulls/{self.number}"

    def commits(self) -> Iterable[Commit]:
        return PullCommits(self)

    def files(self) -> Iterable[Dict[str, Any]]:
        return self.repo.requester.paginate(f"{self.url}/files")

    def merge(self, message: str) -> None:
        log.debug("Merging pull request #%d of %s", self.number, self.repo)
        self.repo.requester.put(f"{self.url}/merge", {"commit_message": message})

    def json(self) -> Dict[str, Any]:
        snapshot = self.repo.requester.json(self.url)
        if not isinstance(snapshot, dict):
            raise TransportError("Expected a JSON object", url=self.url)
        return snapshot

    def patch(self, document: Dict[str, Any]) -> None:
        self.repo.requester.patch(self.url, document)
