# What it does: Defines the failure taxonomy for locating a repository and resolving its HEAD
# How it does: Every failure is a subclass of `ResolutionError` that remembers the file or directory it is about, so a strict caller can report exactly what went wrong
# What data structure it uses: A small class hierarchy (a Tree of exception types rooted at `ResolutionError`)


class ResolutionError(Exception):
    """Base class for everything that can stop branch/commit resolution."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class RepositoryNotFound(ResolutionError):
    def __init__(self, start):
        super().__init__(f"Failed to find a git repository going upwards from: {start}", start)


class HeadUnreadable(ResolutionError):
    def __init__(self, path, reason):
        super().__init__(f"Failed to read HEAD file {path}: {reason}", path)


class TargetUnreadable(ResolutionError):
    def __init__(self, path, reason):
        super().__init__(f"Failed to read ref file {path}: {reason}", path)


class RefCycle(ResolutionError):
    def __init__(self, chain):
        self.chain = list(chain)
        super().__init__(f"Ref chain did not reach a commit within {len(self.chain) - 1} steps: {' -> '.join(self.chain)}")


class BranchUndeterminable(ResolutionError):
    def __init__(self, target):
        self.target = target
        super().__init__(f"Could not derive a branch name from ref '{target}'")


class ConfigError(ValueError):
    pass
