import argparse
import logging
import sys
from commands import head, branch, commit
from utils.properties import FORMATS

# The main entry point for githead
def main(argv=None):
    # Options every command understands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--repo-location", help="Directory to start searching for the repository from (default: current directory).")
    common.add_argument("--no-search-parents", action="store_true", help="Only look for .git in the start directory itself.")
    common.add_argument("--default-branch", help="Branch name to use when it cannot be determined.")
    common.add_argument("--default-commit", help="Commit to use when it cannot be determined.")
    common.add_argument("--fail-on-failure", action="store_true", help="Fail instead of falling back to the defaults.")
    common.add_argument("--config", help="INI file with a [githead] section (default: githead.ini if present).")

    # The main parser
    parser = argparse.ArgumentParser(description="githead: read the current git branch and commit without git.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log more, repeat for debug output.")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: head
    head_parser = subparsers.add_parser("head", parents=[common], help="Print the branch and commit as build properties.")
    head_parser.add_argument("--format", choices=FORMATS, default="properties", help="Output format.")
    head_parser.add_argument("--output", help="Merge the properties into this file instead of printing them.")
    head_parser.set_defaults(func=head.run)

    # Command: branch
    branch_parser = subparsers.add_parser("branch", parents=[common], help="Print the current branch name.")
    branch_parser.set_defaults(func=branch.run)

    # Command: commit
    commit_parser = subparsers.add_parser("commit", parents=[common], help="Print the current commit hash.")
    commit_parser.set_defaults(func=commit.run)

    # Parse the arguments
    args = parser.parse_args(argv)

    if args.quiet:
        level = logging.ERROR
    elif args.verbose >= 2:
        level = logging.DEBUG
    elif args.verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)

    args.func(args)

if __name__ == "__main__":
    main()
