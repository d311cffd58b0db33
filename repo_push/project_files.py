import os
from typing import List

import config


def to_repo_path(path: str) -> str:
    """Path as it appears in the remote repo: '/'-separated, no leading './'."""
    path = path.replace(os.sep, "/")
    return path[2:] if path.startswith("./") else path


def get_project_files(root: str = ".") -> List[str]:
    """Depth-first list of project files relative to `root`.

    Skips EXCLUDE_DIRS and EXCLUDE_FILES by name, and anything starting with a dot.
    Entries are visited in sorted order; a directory's files come before its later siblings.
    """
    files = []
    stack = [("", iter(sorted(os.listdir(root))))]
    while stack:
        rel_dir, entries = stack[-1]
        name = next(entries, None)
        if name is None:
            stack.pop()
            continue
        rel = f"{rel_dir}/{name}" if rel_dir else name
        full = os.path.join(root, rel)
        if os.path.isdir(full):
            if name in config.EXCLUDE_DIRS or name.startswith("."):
                continue
            stack.append((rel, iter(sorted(os.listdir(full)))))
        elif name not in config.EXCLUDE_FILES and not name.startswith("."):
            files.append(rel)
    return files
