import pathlib
import sys

import pytest

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))
from repo_push import GitHubError, RepoExistsError


class FakeGitHub:
    """In-memory stand-in for GitHubClient: repos by name, file shas by path."""

    def __init__(self, login="octo", repos=(), files=None):
        self.login = login
        self.repos = set(repos)
        self.files = dict(files or {})
        self.fail_put = {}
        self.fail_probe = {}
        self.create_error = None
        self.puts = []

    def get_authenticated_user(self):
        return {"login": self.login, "id": 1}

    def list_repos(self, sort="updated", per_page=100):
        return [{"name": n} for n in sorted(self.repos)][:per_page]

    def _repo(self, name):
        return {"name": name, "html_url": f"https://github.com/{self.login}/{name}"}

    def create_repo(self, name, description="", private=False, auto_init=False):
        if self.create_error:
            raise self.create_error
        if name in self.repos:
            raise RepoExistsError("name already exists on this account", status=422)
        self.repos.add(name)
        return self._repo(name)

    def get_repo(self, owner, name):
        if name not in self.repos:
            raise GitHubError("Not Found", status=404)
        return self._repo(name)

    def get_file_sha(self, owner, repo, path):
        if path in self.fail_probe:
            raise self.fail_probe[path]
        return self.files.get(path)

    def put_file(self, owner, repo, path, content_b64, message, sha=None):
        if path in self.fail_put:
            raise self.fail_put[path]
        self.puts.append({"path": path, "content": content_b64, "message": message, "sha": sha})
        self.files[path] = f"sha-{len(self.puts)}"
        return {"content": {"path": path}}


@pytest.fixture
def fake_github():
    return FakeGitHub()


@pytest.fixture
def project(tmp_path):
    """A small project tree with files that should and should not be pushed."""
    (tmp_path / "README.md").write_text("# demo\n")
    (tmp_path / "package.json").write_text("{}")
    (tmp_path / "package-lock.json").write_text("{}")
    (tmp_path / ".env").write_text("SECRET=1")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "index.ts").write_text("export {}\n")
    (tmp_path / "src" / "lib").mkdir()
    (tmp_path / "src" / "lib" / "util.ts").write_text("export const x = 1\n")
    for skipped in ("node_modules/react", ".git", "dist", ".cache", ".hidden"):
        d = tmp_path / skipped
        d.mkdir(parents=True)
        (d / "file.js").write_text("x")
    return tmp_path
