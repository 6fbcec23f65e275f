# What it does: Reads and writes the `.properties` files a build picks its variables up from
# How it does: A key ends at the first '=', ':' or whitespace, blank lines and '#'/'!' comments are skipped when reading. Merging rewrites only the lines whose keys it was asked to change and appends new keys at the end, every other line is kept verbatim
# What data structure it uses: Dictionary (property name -> value), List (the file's lines, for merging in place)

import json
import os
import re

FORMATS = ('properties', 'env', 'json')

# key, then optional whitespace, then an optional '=' or ':', then the value
_PROPERTY_LINE = re.compile(r'^([^=:\s]+)\s*[=:]?\s*(.*)$')


def parse_property_line(line): # Returns (key, value), or None for blank and comment lines
    line = line.strip()
    if not line or line.startswith(('#', '!')):
        return None
    match = _PROPERTY_LINE.match(line)
    if not match:
        return None
    return match.group(1), match.group(2).strip()


def read_properties(path):
    """
    Reads a properties file into a dict. A missing file reads as empty.
    """
    props = {}
    if not os.path.exists(path):
        return props
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            parsed = parse_property_line(line)
            if parsed:
                props[parsed[0]] = parsed[1]
    return props


def write_properties(path, props):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        for key in sorted(props):
            f.write(f"{key}={props[key]}\n")


def merge_properties(path, props): # Updates the given keys in place and returns the full property set
    lines = []
    if os.path.exists(path):
        with open(path, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()

    pending = dict(props)
    for i, line in enumerate(lines):
        parsed = parse_property_line(line)
        if parsed and parsed[0] in props:
            key = parsed[0]
            lines[i] = f"{key}={props[key]}"
            pending.pop(key, None)
    lines.extend(f"{key}={pending[key]}" for key in sorted(pending))

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write("\n".join(lines) + "\n")
    return read_properties(path)


def _env_name(key): # githead.branch -> GITHEAD_BRANCH
    return ''.join(c if c.isalnum() else '_' for c in key).upper()


def format_properties(props, style='properties'):
    if style == 'properties':
        return "\n".join(f"{key}={props[key]}" for key in sorted(props))
    if style == 'env':
        return "\n".join(f"{_env_name(key)}={props[key]}" for key in sorted(props))
    if style == 'json':
        return json.dumps(props, indent=2, sort_keys=True)
    raise ValueError(f"Unknown format: '{style}'. Choose from {', '.join(FORMATS)}")
