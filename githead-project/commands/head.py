# The command: githead head [--format properties|env|json] [--output <file>]
# What it does: Resolves the current branch and commit and publishes them as the `githead.branch` and `githead.commit` build properties
# How it does: It builds the config from the INI file and the command line, calls `head.resolve`, then either prints the two properties or merges them into a properties file for the build to read
# What data structure it uses: Dictionary (property name -> value)

import sys
from utils import head
from utils.config import config_from_args
from utils.errors import ConfigError, ResolutionError
from utils.properties import format_properties, merge_properties


def resolve_from_args(args): # Shared by every command: resolves HEAD or exits with a fatal error
    try:
        config = config_from_args(args)
        return head.resolve(config)
    except (ConfigError, ResolutionError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)


def run(args):
    info = resolve_from_args(args)
    props = head.to_properties(info)

    if args.output:
        try:
            merge_properties(args.output, props)
        except OSError as e:
            print(f"fatal: could not write {args.output}: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Wrote {', '.join(sorted(props))} to {args.output}")
    else:
        print(format_properties(props, args.format))
