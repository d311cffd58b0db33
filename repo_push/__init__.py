from .github_client import GitHubClient, GitHubError, RepoExistsError, get_client
from .project_files import get_project_files, to_repo_path
from .sync import push_project, resolve_repo, upload_file
