# What it does: The single entry point a build uses to get the current branch and commit, with defaults filled in
# How it does: It locates the repository, asks `refs.resolve_head` for the two values and then applies the failure policy.
# Normally every problem is logged as a warning and the matching default is used, with `fail_on_failure` the first problem is raised instead
# What data structure it uses: None beyond a pair (NamedTuple) for the result and a Dictionary for the published properties

import logging
import os
from typing import NamedTuple

from . import refs
from .config import HeadConfig
from .errors import RepositoryNotFound, ResolutionError
from .repository import canonicalize, find_repo_root

log = logging.getLogger(__name__)

PROPERTY_PREFIX = 'githead'


class HeadInfo(NamedTuple):
    branch: str
    commit: str


def _fail_or_warn(config, error):
    if config.fail_on_failure:
        raise error
    log.warning("%s", error)


def resolve(config=None):
    """
    Resolves (branch, commit) for the repository described by `config`.

    Always returns a HeadInfo unless `config.fail_on_failure` is set, in
    which case the first ResolutionError met is raised and no defaults are
    substituted.
    """
    if config is None:
        config = HeadConfig(repo_location=os.getcwd())

    location = config.repo_location
    if location is None:
        _fail_or_warn(config, ResolutionError("No repo location given!"))
        location = os.getcwd()

    search_base = canonicalize(location)
    log.info("Default location: %s", search_base)

    repo_root = find_repo_root(search_base, config.search_parent_directories)
    if repo_root is None:
        _fail_or_warn(config, RepositoryNotFound(search_base))
        return _publish(config.default_branch, config.default_commit)

    resolution = refs.resolve_head(repo_root, config.default_branch, config.default_commit)
    for failure in resolution.failures:
        _fail_or_warn(config, failure)
    return _publish(resolution.branch, resolution.commit)


def _publish(branch, commit):
    log.info("Found: %s/%s", branch, commit)
    return HeadInfo(branch, commit)


def to_properties(info, prefix=PROPERTY_PREFIX):
    return {
        f'{prefix}.branch': info.branch,
        f'{prefix}.commit': info.commit,
    }
