import logging
import os

GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/")
DEFAULT_REPO_NAME = os.getenv("DEFAULT_REPO_NAME", "Medguard-AI")
DEFAULT_REPO_DESCRIPTION = os.getenv("DEFAULT_REPO_DESCRIPTION", "Medguard AI Application")
PROJECT_ROOT = os.getenv("PROJECT_ROOT", ".")

REPOS_PER_PAGE = 100
REPOS_SORT = "updated"

# Directory names are matched before the dot-prefix rule.
EXCLUDE_DIRS = {"node_modules", ".git", ".cache", ".config", "dist", ".replit"}
EXCLUDE_FILES = {"package-lock.json", ".replit"}


def get_token():
    """Return the GitHub token, read at call time so rotated credentials are picked up."""
    return os.getenv("GITHUB_TOKEN")


def configure_logging():
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
