# What it does: Holds every option that controls branch/commit resolution and loads them from a `githead.ini` file
# How it does: `HeadConfig` is an immutable record of the five options. `load_config` reads the `[githead]` section with `configparser` and command line values are layered on top with `HeadConfig.merge`
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import dataclasses
import os
from dataclasses import dataclass

from .errors import ConfigError

DEFAULT_CONFIG_FILE = 'githead.ini'
SECTION = 'githead'
UNKNOWN = 'unknown'


@dataclass(frozen=True)
class HeadConfig:
    """Options for resolving HEAD. `repo_location=None` means none was given."""

    repo_location: str | None = None
    search_parent_directories: bool = True
    default_branch: str = UNKNOWN
    default_commit: str = UNKNOWN
    fail_on_failure: bool = False

    def merge(self, **overrides): # Returns a copy with every non-None override applied
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)


def _get_bool(parser, option, fallback):
    try:
        return parser.getboolean(SECTION, option, fallback=fallback)
    except ValueError:
        value = parser.get(SECTION, option)
        raise ConfigError(f"Invalid boolean for '{SECTION}.{option}': '{value}'")


def load_config(path=None): # Reads the [githead] section of an INI file, missing file or section gives the defaults
    if path is None:
        path = DEFAULT_CONFIG_FILE
        if not os.path.exists(path):
            return HeadConfig()
    elif not os.path.exists(path):
        raise ConfigError(f"Config file not found: {path}")

    parser = configparser.ConfigParser()
    try:
        parser.read(path, encoding='utf-8')
    except configparser.Error as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e

    if not parser.has_section(SECTION):
        return HeadConfig()

    repo_location = parser.get(SECTION, 'repo_location', fallback=None)
    if repo_location:
        # Relative locations are relative to the config file, not the cwd
        repo_location = os.path.join(os.path.dirname(os.path.abspath(path)), repo_location)
    else:
        repo_location = None

    return HeadConfig(
        repo_location=repo_location,
        search_parent_directories=_get_bool(parser, 'search_parent_directories', True),
        default_branch=parser.get(SECTION, 'default_branch', fallback=UNKNOWN),
        default_commit=parser.get(SECTION, 'default_commit', fallback=UNKNOWN),
        fail_on_failure=_get_bool(parser, 'fail_on_failure', False),
    )


def config_from_args(args): # Builds the config for a command: defaults, then the INI file, then command line flags
    config = load_config(args.config)
    config = config.merge(
        repo_location=args.repo_location,
        search_parent_directories=False if args.no_search_parents else None,
        default_branch=args.default_branch,
        default_commit=args.default_commit,
        fail_on_failure=True if args.fail_on_failure else None,
    )
    if config.repo_location is None:
        config = config.merge(repo_location=os.getcwd())
    return config
