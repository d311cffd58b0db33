import argparse, sys

import config
from repo_push import get_client, push_project


def main(argv=None):
    p = argparse.ArgumentParser(description="Push the project directory to a GitHub repo")
    p.add_argument("--repo", default=config.DEFAULT_REPO_NAME)
    p.add_argument("--description", default=config.DEFAULT_REPO_DESCRIPTION)
    p.add_argument("--root", default=config.PROJECT_ROOT)
    args = p.parse_args(argv)

    config.configure_logging()
    try:
        result = push_project(get_client(), args.repo, args.description, args.root)
    except Exception as e:
        print(f"Push failed: {e}", file=sys.stderr)
        return 1

    for r in result["results"]:
        if r["status"] == "success":
            print("Uploaded", r["file"])
        else:
            print("FAIL", r["file"], r.get("message", ""))
    print(f"Done {result['filesUploaded']}/{result['totalFiles']} → {result['repoUrl']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
