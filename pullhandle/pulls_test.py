import json

import mock
import pytest

from pullhandle.commits import Commit
from pullhandle.errors import TransportError
from pullhandle.http_client import BasicAuthRequester
from pullhandle.pulls import GitHubPull, Pull
from pullhandle.repos import Repo
from pullhandle.testing_utils import Requester, fixture_path

repo_name = 'justinabrahms/imhotep'
pull_url = 'https://api.github.com/repos/justinabrahms/imhotep/pulls/10'

# via https://api.github.com/repos/justinabrahms/imhotep/pulls/10
with open(fixture_path('pull_request.json')) as f:
    pull_json_fixture = json.loads(f.read())


def make_pull(fixture=None, number=10, name=repo_name):
    requester = Requester(pull_json_fixture if fixture is None else fixture)
    return GitHubPull(Repo(requester, name), number), requester


def test_identity():
    repo = Repo(Requester({}), repo_name)
    pull = GitHubPull(repo, 10)
    assert pull.number == 10
    assert pull.repo is repo


@pytest.mark.parametrize('number', [0, -1, '10', 1.5, True])
def test_number_must_be_positive_int(number):
    with pytest.raises(ValueError):
        GitHubPull(Repo(Requester({}), repo_name), number)


def test_ordering_by_number_regardless_of_repo():
    a, _ = make_pull(number=3, name='zzz/zzz')
    b, _ = make_pull(number=7, name='aaa/aaa')
    assert a < b
    assert not b < a
    assert sorted([b, a]) == [a, b]


def test_equality_by_number():
    a, _ = make_pull(number=3, name='foo/bar')
    b, _ = make_pull(number=3, name='baz/qux')
    assert a == b
    assert hash(a) == hash(b)


def test_json():
    pull, requester = make_pull()
    assert pull.json() == pull_json_fixture
    assert requester.url == pull_url


def test_json_refetches_every_call():
    pull, requester = make_pull()
    first = pull.json()
    second = pull.json()
    assert first == second
    assert len([c for c in requester.calls if c[0] == 'GET']) == 2


def test_json_rejects_non_object():
    pull, _ = make_pull(fixture=[1, 2])
    with pytest.raises(TransportError):
        pull.json()


def test_json_propagates_transport_errors():
    requester = mock.Mock()
    requester.json.side_effect = TransportError('nope', status=500)
    pull = GitHubPull(Repo(requester, repo_name), 10)
    with pytest.raises(TransportError):
        pull.json()


def test_patch_sends_document_as_is():
    pull, requester = make_pull()
    pull.patch({'anything': ['goes']})
    assert requester.calls[-1] == ('PATCH', pull_url, {'anything': ['goes']})


def test_merge():
    pull, requester = make_pull()
    pull.merge('Merging the cache option')
    assert requester.calls[-1] == (
        'PUT', pull_url + '/merge', {'commit_message': 'Merging the cache option'})


def test_merge_propagates_conflicts():
    requester = mock.Mock()
    requester.put.side_effect = TransportError('conflict', status=409)
    pull = GitHubPull(Repo(requester, repo_name), 10)
    with pytest.raises(TransportError):
        pull.merge('msg')


def test_files():
    files = [{'filename': 'imhotep/app.py'}, {'filename': 'setup.py'}]
    pull, requester = make_pull(fixture=files)
    assert list(pull.files()) == files
    assert requester.url == pull_url + '/files'


def test_commits():
    shas = [{'sha': 'abc'}, {'sha': 'def'}]
    pull, requester = make_pull(fixture=shas)
    commits = list(pull.commits())
    assert [c.sha for c in commits] == ['abc', 'def']
    assert all(isinstance(c, Commit) for c in commits)
    assert commits[0].repo is pull.repo
    assert requester.url == pull_url + '/commits'


def test_commits_are_lazy_and_restartable():
    pull, requester = make_pull(fixture=[{'sha': 'abc'}])
    commits = pull.commits()
    assert not requester.calls
    assert len(list(commits)) == 1
    assert len(list(commits)) == 1
    assert len(requester.calls) == 2


def test_base_pull_is_abstract():
    pull = Pull(Repo(Requester({}), repo_name), 1)
    with pytest.raises(NotImplementedError):
        pull.json()
    with pytest.raises(NotImplementedError):
        pull.patch({})


@pytest.mark.parametrize('page', [
    [{'no_sha': 1}],
    ['str'],
    [{'sha': 12}],
])
def test_commits_reject_malformed_items(page):
    pull, _ = make_pull(fixture=page)
    with pytest.raises(TransportError) as e:
        list(pull.commits())
    assert e.value.url == pull_url + '/commits'


def test_files_reject_non_object_items():
    requester = BasicAuthRequester('user', 'pass')
    pull = GitHubPull(Repo(requester, repo_name), 10)
    page = mock.Mock(status_code=200, links={}, content=b'')
    page.json.return_value = [{'filename': 'setup.py'}, 'str']
    with mock.patch('requests.request', return_value=page):
        with pytest.raises(TransportError):
            list(pull.files())
