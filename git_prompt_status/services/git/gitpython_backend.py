"""GitPython backed repository access."""

import git
from typing import Iterator, List, Optional

from git_prompt_status.exceptions import (
    GitCommandFailedError,
    NoCommitsError,
    RepositoryNotFoundError,
    TraversalError,
)
from git_prompt_status.logging_config import get_logger
from git_prompt_status.models.status import ChangeRecord, CommitRef
from git_prompt_status.services.classifier import parse_porcelain
from git_prompt_status.services.git.backend import GitBackend

logger = get_logger(__name__)


class GitPythonBackend(GitBackend):
    """Backend using GitPython's Repo object."""

    def __init__(self, repo: git.Repo):
        """Initialize the backend.

        Args:
            repo: An opened, non-bare repository
        """
        self.repo = repo
        # `git status` must not refresh and rewrite the index
        self.repo.git.update_environment(GIT_OPTIONAL_LOCKS="0")

    @classmethod
    def open(cls, path: str, **options) -> "GitPythonBackend":
        try:
            repo = git.Repo(path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise RepositoryNotFoundError(path) from e

        if repo.bare or not repo.working_tree_dir:
            repo.close()
            raise RepositoryNotFoundError(path)

        logger.debug(f"Opened repository at {repo.working_tree_dir}")
        return cls(repo)

    @property
    def root(self) -> str:
        return str(self.repo.working_tree_dir)

    @property
    def git_dir(self) -> str:
        return str(self.repo.git_dir)

    def head_commit(self) -> CommitRef:
        try:
            return CommitRef(self.repo.head.commit.hexsha)
        except ValueError as e:
            # HEAD points at an unborn branch
            raise NoCommitsError(self.branch_name()) from e

    def branch_name(self) -> Optional[str]:
        if self.repo.head.is_detached:
            return None
        return self.repo.active_branch.name

    def upstream_commit(self) -> Optional[CommitRef]:
        if self.repo.head.is_detached:
            return None

        branch = self.repo.active_branch
        try:
            tracking = branch.tracking_branch()
        except Exception as e:
            logger.debug(f"Could not read tracking configuration for {branch.name}: {e}")
            return None

        if tracking is None:
            return None

        try:
            return CommitRef(tracking.commit.hexsha)
        except ValueError:
            # Configured but never fetched
            logger.debug(f"Upstream {tracking.name} of {branch.name} does not exist locally")
            return None

    def change_records(self) -> List[ChangeRecord]:
        try:
            status = self.repo.git.status("--porcelain")
        except git.exc.GitCommandError as e:
            raise GitCommandFailedError("status --porcelain", e.status, str(e.stderr).strip()) from e
        return parse_porcelain(status)

    def history_of(self, commit: CommitRef) -> Iterator[CommitRef]:
        try:
            for entry in self.repo.iter_commits(commit.hexsha):
                yield CommitRef(entry.hexsha)
        except (git.exc.GitCommandError, ValueError) as e:
            raise TraversalError(f"reading history of {commit.short}: {e}") from e

    def stash_count(self) -> int:
        try:
            reflog = self.repo.git.rev_list("-g", "refs/stash")
        except git.exc.GitCommandError:
            return 0
        return len([line for line in reflog.split("\n") if line.strip()])

    def close(self) -> None:
        self.repo.close()
