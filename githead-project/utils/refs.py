# What it does: Resolves what HEAD points to, giving the current branch name and commit hash without running git
# How it does: It reads `.git/HEAD`, decides whether the line is a symbolic ref (`ref: refs/heads/main`) or a raw hash, and follows symbolic refs file by file until a hash is reached.
# The walk is an explicit loop with a step counter, so a ref that points back at itself ends in `RefCycle` instead of spinning forever
# What data structure it uses: A Linked List (each ref file points to the next one, the hash at the end is the terminal node). Failures are collected in a List so both halves of the result can be defaulted independently

import logging
import os
from typing import NamedTuple

from .errors import BranchUndeterminable, HeadUnreadable, RefCycle, TargetUnreadable
from .repository import get_git_dir

log = logging.getLogger(__name__)

HEAD_FILE_NAME = 'HEAD'
REF_PREFIX = 'ref:'
MAX_REF_DEPTH = 10


class Ref(NamedTuple):
    symbolic: bool
    value: str


class Resolution(NamedTuple):
    branch: str | None
    commit: str | None
    failures: tuple = ()


def read_ref_file(path): # Returns the first non-blank line of a ref file, stripped, or None if the file has no content
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if line:
                return line
    return None


def parse_ref(text):
    """
    Classifies a ref line. The `ref:` marker is matched case-insensitively;
    the target loses surrounding whitespace and any leading '/'.
    """
    text = text.strip()
    if text[:len(REF_PREFIX)].lower() == REF_PREFIX:
        target = text[len(REF_PREFIX):].strip().lstrip('/\\')
        return Ref(symbolic=True, value=target)
    return Ref(symbolic=False, value=text)


def ref_to_branch(target): # Turns 'refs/heads/feature/x' into 'x'
    branch = target.split('/')[-1].strip()
    if not branch:
        raise BranchUndeterminable(target)
    return branch


def ref_path(repo_root, target): # Ref names always use '/', the filesystem may not
    return os.path.join(get_git_dir(repo_root), *target.split('/'))


def _inside(git_dir, path):
    git_dir = os.path.normpath(git_dir)
    return os.path.normpath(path).startswith(git_dir + os.sep)


def dereference(repo_root, ref):
    """
    Follows symbolic refs until a direct one is found and returns its hash.
    Raises TargetUnreadable when a ref file is missing, unreadable or empty,
    and RefCycle when the chain is longer than MAX_REF_DEPTH.
    """
    chain = []
    while ref.symbolic:
        chain.append(ref.value)
        if len(chain) > MAX_REF_DEPTH:
            raise RefCycle(chain)

        path = ref_path(repo_root, ref.value)
        if not _inside(get_git_dir(repo_root), path):
            raise TargetUnreadable(path, "points outside the git directory")
        try:
            line = read_ref_file(path)
        except (OSError, ValueError) as e:
            raise TargetUnreadable(path, e) from e
        if line is None:
            raise TargetUnreadable(path, "file is empty")

        log.debug("%s -> %s", ref.value, line)
        ref = parse_ref(line)
    return ref.value


def read_head(repo_root): # Reads and classifies .git/HEAD
    head_path = os.path.join(get_git_dir(repo_root), HEAD_FILE_NAME)
    try:
        line = read_ref_file(head_path)
    except (OSError, ValueError) as e:
        raise HeadUnreadable(head_path, e) from e
    if line is None:
        raise HeadUnreadable(head_path, "file is empty")
    log.info("HEAD: %s", line)
    return parse_ref(line)


def resolve_head(repo_root, default_branch=None, default_commit=None):
    """
    Resolves the branch and commit HEAD points to.

    Never raises for resolution problems: whichever half could not be
    determined is replaced by its default and the reason is recorded in
    `Resolution.failures`. A detached HEAD takes the default branch without
    counting as a failure. If the branch ref itself cannot be read the branch
    name is still reported and only the commit falls back.
    """
    failures = []
    try:
        head = read_head(repo_root)
    except HeadUnreadable as e:
        return Resolution(default_branch, default_commit, (e,))

    branch = default_branch
    if head.symbolic:
        try:
            branch = ref_to_branch(head.value)
        except BranchUndeterminable as e:
            failures.append(e)

    try:
        commit = dereference(repo_root, head)
    except (TargetUnreadable, RefCycle) as e:
        failures.append(e)
        commit = default_commit

    return Resolution(branch, commit, tuple(failures))
