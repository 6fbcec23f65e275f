# What it does: Finds the root of a git repository, the directory that holds the `.git` metadata folder
# How it does: `find_repo_root` canonicalizes the starting path and walks up the directory tree one parent at a time until it sees a `.git` directory or runs out of parents
# What data structure it uses: A linear walk up the filesystem Tree (each directory's parent pointer is followed until the root, whose parent is itself)

import logging
import os

log = logging.getLogger(__name__)

GIT_FOLDER = '.git'


def canonicalize(path): # Returns the canonical absolute path, or just the absolute one if that fails
    path = os.path.abspath(path)
    try:
        return os.path.realpath(path)
    except OSError as e:
        log.debug("Failed to canonicalize the repo path %s: %s", path, e)
        return path


def find_repo_root(path='.', search_parents=True): # Searches for the .git directory, returns the directory holding it or None
    path = canonicalize(path)
    while True:
        log.debug("Searching in: %s", path)
        if os.path.isdir(os.path.join(path, GIT_FOLDER)):
            log.info("Found at: %s", path)
            return path
        if not search_parents:
            return None
        parent_path = os.path.dirname(path)
        if parent_path == path:
            return None
        path = parent_path


def get_git_dir(repo_root):
    return os.path.join(repo_root, GIT_FOLDER)
