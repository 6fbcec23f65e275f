# Shared pytest fixtures for githead tests

import pytest
import os
import sys

# Add githead-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'githead-project'))

COMMIT_HASH = 'e83c5163316f89bfbde7d9ab23ca2e25604af290'
OTHER_HASH = '8d0e41234f24b6da002d962a26c2495ea16a425f'


def write_file(path, content):
    # Writes a file, creating parent directories as needed
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


@pytest.fixture
def temp_dir(tmp_path, monkeypatch):
    # A canonical scratch directory that is also the cwd, the original cwd comes back afterwards
    path = os.path.realpath(str(tmp_path))
    monkeypatch.chdir(path)
    return path


@pytest.fixture
def temp_repo(temp_dir):
    # Creates a .git layout on the master branch with no commits yet
    git_dir = os.path.join(temp_dir, '.git')
    os.makedirs(os.path.join(git_dir, 'objects'))
    os.makedirs(os.path.join(git_dir, 'refs', 'heads'))
    write_file(os.path.join(git_dir, 'HEAD'), 'ref: refs/heads/master\n')

    return temp_dir


@pytest.fixture
def repo_with_commit(temp_repo):
    # Creates a repo whose master branch points at COMMIT_HASH
    write_file(os.path.join(temp_repo, '.git', 'refs', 'heads', 'master'), COMMIT_HASH + '\n')
    return temp_repo, COMMIT_HASH


@pytest.fixture
def git_file(temp_repo):
    # Writes a file relative to the repo's .git directory
    def write(relative_path, content):
        write_file(os.path.join(temp_repo, '.git', *relative_path.split('/')), content)
    return write
