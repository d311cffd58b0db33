import base64
import logging
import os
from typing import Any, Dict, Optional

import config
from .github_client import GitHubClient, RepoExistsError
from .project_files import get_project_files, to_repo_path

log = logging.getLogger(__name__)


def resolve_repo(client: GitHubClient, owner: str, name: str, description: str) -> Dict[str, Any]:
    """Create a public, empty repo, or fetch it if the name is already taken."""
    try:
        repo = client.create_repo(name, description=description, private=False, auto_init=False)
        log.info("Created repo %s/%s", owner, name)
    except RepoExistsError:
        log.info("Repo %s/%s already exists, reusing it", owner, name)
        repo = client.get_repo(owner, name)
    return repo


def upload_file(client: GitHubClient, owner: str, repo: str, root: str, path: str) -> Dict[str, Any]:
    with open(os.path.join(root, path), "rb") as f:
        content = base64.b64encode(f.read()).decode()
    repo_path = to_repo_path(path)
    sha = client.get_file_sha(owner, repo, repo_path)
    message = f"Update {repo_path}" if sha else f"Add {repo_path}"
    client.put_file(owner, repo, repo_path, content, message, sha=sha)
    return {"file": repo_path, "status": "success"}


def push_project(client: GitHubClient, repo_name: Optional[str] = None,
                 description: Optional[str] = None, root: Optional[str] = None) -> Dict[str, Any]:
    """Upload every project file under `root` to `repo_name`, one commit per file.

    Only user lookup and repo resolution are fatal. Each file gets its own entry
    in `results`, so a response with success=True may still hold per-file errors.
    """
    repo_name = repo_name or config.DEFAULT_REPO_NAME
    description = description or config.DEFAULT_REPO_DESCRIPTION
    root = root or config.PROJECT_ROOT

    owner = client.get_authenticated_user()["login"]
    repo = resolve_repo(client, owner, repo_name, description)

    files = get_project_files(root)
    log.info("Pushing %d files from %s to %s/%s", len(files), root, owner, repo_name)

    results = []
    for path in files:
        try:
            results.append(upload_file(client, owner, repo_name, root, path))
        except Exception as exc:
            log.warning("Upload failed for %s: %s", path, exc)
            results.append({"file": to_repo_path(path), "status": "error", "message": str(exc)})

    uploaded = sum(1 for r in results if r["status"] == "success")
    log.info("Uploaded %d/%d files to %s", uploaded, len(files), repo.get("html_url"))
    return {
        "success": True,
        "repoUrl": repo.get("html_url"),
        "filesUploaded": uploaded,
        "totalFiles": len(files),
        "results": results,
    }
