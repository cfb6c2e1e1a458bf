import copy
import os
from typing import Any, Dict, Iterable, List, Optional

from pullhandle.commits import Commit
from pullhandle.pulls import Pull
from pullhandle.repos import Repo

dir = os.path.dirname(__file__)


def fixture_path(s):
    return os.path.join(dir, 'fixtures/', s)


class JsonWrapper(object):
    def __init__(self, json, status, links=None):
        self.status_code = status
        self.payload = json
        self.links = links or {}

    def json(self):
        return self.payload


class Requester(object):
    """
    Stands in for a real requester; hands back the same fixture for every
    call and remembers what it was asked.
    """

    def __init__(self, fixture):
        self.fixture = fixture
        self.calls = []

    def get(self, url, params=None):
        self.url = url
        self.calls.append(('GET', url, params))
        return JsonWrapper(self.fixture, 200)

    def json(self, url):
        return self.get(url).json()

    def paginate(self, url):
        self.url = url
        self.calls.append(('PAGINATE', url, None))
        return list(self.fixture)

    def patch(self, url, data):
        self.url = url
        self.data = data
        self.calls.append(('PATCH', url, data))
        return JsonWrapper(self.fixture, 200)

    def put(self, url, data):
        self.url = url
        self.data = data
        self.calls.append(('PUT', url, data))
        return JsonWrapper(self.fixture, 200)


class FakePull(Pull):
    """
    In-memory pull request. Patches are recorded and merged into the stored
    document the way the server would, and every `json()` hands out a copy.
    """

    def __init__(
        self,
        repo: Repo,
        number: int,
        document: Optional[Dict[str, Any]] = None,
        commit_shas: Iterable[str] = (),
        files: Iterable[Dict[str, Any]] = (),
    ) -> None:
        super().__init__(repo, number)
        self.document = dict(document or {})
        self.commit_shas = list(commit_shas)
        self.changed_files = list(files)
        self.patches: List[Dict[str, Any]] = []
        self.merges: List[str] = []

    def commits(self) -> Iterable[Commit]:
        return [Commit(self.repo, sha) for sha in self.commit_shas]

    def files(self) -> Iterable[Dict[str, Any]]:
        return [dict(f) for f in self.changed_files]

    def merge(self, message: str) -> None:
        self.merges.append(message)
        self.document["state"] = "closed"
        self.document["merged"] = True

    def json(self) -> Dict[str, Any]:
        return copy.deepcopy(self.document)

    def patch(self, document: Dict[str, Any]) -> None:
        self.patches.append(dict(document))
        self.document.update(document)

