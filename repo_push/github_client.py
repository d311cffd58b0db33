"""Minimal GitHub REST client covering the calls the push service needs."""
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

import config

log = logging.getLogger(__name__)


class GitHubError(Exception):
    """A GitHub API call failed; `status` is the HTTP status when there was a response."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class RepoExistsError(GitHubError):
    """Repository creation was rejected with 422 (name already taken)."""


def _error_message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return body["message"]
    return resp.text[:200] or f"HTTP {resp.status_code}"


class GitHubClient:
    def __init__(self, token: str, api_url: str = config.GITHUB_API_URL,
                 session: Optional[requests.Session] = None):
        self.api_url = api_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        })

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        resp = self.session.request(method, f"{self.api_url}{path}", **kwargs)
        if resp.status_code >= 400:
            raise GitHubError(_error_message(resp), status=resp.status_code)
        return resp

    def get_authenticated_user(self) -> Dict[str, Any]:
        return self._request("GET", "/user").json()

    def list_repos(self, sort: str = config.REPOS_SORT,
                   per_page: int = config.REPOS_PER_PAGE) -> List[Dict[str, Any]]:
        return self._request("GET", "/user/repos",
                             params={"sort": sort, "per_page": per_page}).json()

    def create_repo(self, name: str, description: str = "", private: bool = False,
                    auto_init: bool = False) -> Dict[str, Any]:
        body = {"name": name, "description": description,
                "private": private, "auto_init": auto_init}
        try:
            return self._request("POST", "/user/repos", json=body).json()
        except GitHubError as exc:
            if exc.status == 422:
                raise RepoExistsError(str(exc), status=422) from exc
            raise

    def get_repo(self, owner: str, name: str) -> Dict[str, Any]:
        return self._request("GET", f"/repos/{quote(owner)}/{quote(name)}").json()

    def _contents_path(self, owner: str, repo: str, path: str) -> str:
        return f"/repos/{quote(owner)}/{quote(repo)}/contents/{quote(path, safe='/')}"

    def get_file_sha(self, owner: str, repo: str, path: str) -> Optional[str]:
        """Return the blob sha of an existing file, or None if nothing is there.

        A directory at `path` comes back as a list and also counts as absent.
        Anything other than 404 raises.
        """
        try:
            data = self._request("GET", self._contents_path(owner, repo, path)).json()
        except GitHubError as exc:
            if exc.status == 404:
                return None
            raise
        if isinstance(data, dict):
            return data.get("sha")
        return None

    def put_file(self, owner: str, repo: str, path: str, content_b64: str,
                 message: str, sha: Optional[str] = None) -> Dict[str, Any]:
        body = {"message": message, "content": content_b64}
        if sha:
            body["sha"] = sha
        return self._request("PUT", self._contents_path(owner, repo, path), json=body).json()


def get_client(token: Optional[str] = None) -> GitHubClient:
    """Build a fresh client for one request."""
    token = token or config.get_token()
    if not token:
        raise RuntimeError("GITHUB_TOKEN env variable not set")
    return GitHubClient(token)
