# The command: githead branch
# What it does: Prints the name of the branch HEAD points to, or the default branch when it cannot be determined

from .head import resolve_from_args


def run(args):
    print(resolve_from_args(args).branch)
