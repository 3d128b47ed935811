"""Pytest fixtures for git-prompt-status tests"""
import tempfile
from pathlib import Path

import git
import pytest


def commit_file(repo, name, content, message=None):
    """Write a file into the work tree, stage and commit it."""
    path = Path(repo.working_dir) / name
    path.write_text(content)
    repo.index.add([name])
    return repo.index.commit(message or f"Update {name}")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture
def mock_config():
    """Create a configuration dictionary."""
    return {
        'mode': 'fancy',
        'disable_stats': [],
        'ignore_repos': [],
        'backend': 'gitpython',
        'lite': False,
        'assume_unchanged_size': 0,
        'max_traversal_steps': 5000,
        'traversal_timeout': None,
        'verbose': False,
        'debug': False,
    }


def _configure(repo):
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")


@pytest.fixture
def empty_repo(temp_dir):
    """Create a Git repository without any commit."""
    repo_path = temp_dir / "empty_repo"
    repo_path.mkdir()
    repo = git.Repo.init(repo_path)
    _configure(repo)
    repo.git.symbolic_ref("HEAD", "refs/heads/main")

    yield repo

    repo.close()


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with one commit on main and no remote."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)
    _configure(repo)

    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    repo.git.branch('-M', 'main')

    yield repo

    repo.close()


@pytest.fixture
def tracked_repo(git_repo, temp_dir):
    """A repository whose main branch tracks origin/main, in sync."""
    remote_path = temp_dir / "remote.git"
    remote = git.Repo.init(remote_path, bare=True)

    git_repo.create_remote('origin', str(remote_path))
    git_repo.git.push('-u', 'origin', 'main')

    yield git_repo

    remote.close()


@pytest.fixture
def diverged_repo(tracked_repo):
    """main is 1 commit ahead of and 2 commits behind origin/main."""
    repo = tracked_repo
    commit_file(repo, "a.txt", "a\n", "Upstream 1")
    commit_file(repo, "b.txt", "b\n", "Upstream 2")
    repo.git.push('origin', 'main')
    repo.git.reset('--hard', 'HEAD~2')
    commit_file(repo, "c.txt", "c\n", "Local 1")
    yield repo


@pytest.fixture
def conflicted_repo(git_repo):
    """A repository in the middle of a merge with one conflicted file."""
    repo = git_repo
    repo.git.checkout('-b', 'other')
    commit_file(repo, "README.md", "other side\n", "Other change")
    repo.git.checkout('main')
    commit_file(repo, "README.md", "main side\n", "Main change")
    try:
        repo.git.merge('other')
    except git.exc.GitCommandError:
        pass  # Conflict expected
    yield repo


@pytest.fixture
def commit():
    """Expose commit_file to tests."""
    return commit_file
