import logging

from flask import Flask, jsonify, request

import config
from repo_push import get_client, push_project

config.configure_logging()
log = logging.getLogger(__name__)

app = Flask(__name__)

@app.get("/healthz")
def health():
    return jsonify(status="ok")

@app.get("/api/github/user")
def github_user():
    try:
        client = get_client()
        return jsonify(client.get_authenticated_user())
    except Exception as e:
        log.exception("Fetching GitHub user failed")
        return jsonify(error=str(e)), 500

@app.get("/api/github/repos")
def github_repos():
    try:
        client = get_client()
        return jsonify(client.list_repos(sort=config.REPOS_SORT, per_page=config.REPOS_PER_PAGE))
    except Exception as e:
        log.exception("Listing GitHub repos failed")
        return jsonify(error=str(e)), 500

@app.post("/api/github/push")
def github_push():
    data = request.get_json(silent=True) or {}
    try:
        client = get_client()
        result = push_project(client, data.get("repoName"), data.get("description"))
        return jsonify(result)
    except Exception as e:
        log.exception("Pushing project to GitHub failed")
        return jsonify(error=str(e)), 500
