# The command: githead commit
# What it does: Prints the commit hash HEAD resolves to, or the default commit when it cannot be determined

from .head import resolve_from_args


def run(args):
    print(resolve_from_args(args).commit)
