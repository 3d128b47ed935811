"""Abstract git backend consumed by the status service."""

import os
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional

from git_prompt_status.models.status import ChangeRecord, CommitRef


class GitBackend(ABC):
    """Read-only view of one repository.

    The classifier and the divergence calculator only ever see the values
    returned here, so backends can be swapped without touching either.
    """

    @classmethod
    @abstractmethod
    def open(cls, path: str, **options) -> "GitBackend":
        """Open the repository containing path.

        Raises:
            RepositoryNotFoundError: If path is not inside a repository
        """

    @property
    @abstractmethod
    def root(self) -> str:
        """Working tree root of the repository."""

    @property
    @abstractmethod
    def git_dir(self) -> str:
        """Path of the repository's git directory."""

    @abstractmethod
    def head_commit(self) -> CommitRef:
        """Commit HEAD points at.

        Raises:
            NoCommitsError: If the repository has no commits yet
        """

    @abstractmethod
    def branch_name(self) -> Optional[str]:
        """Short name of the current branch, None when HEAD is detached."""

    @abstractmethod
    def upstream_commit(self) -> Optional[CommitRef]:
        """Commit of the current branch's upstream, None when there is none."""

    @abstractmethod
    def change_records(self) -> List[ChangeRecord]:
        """Working tree and index changes, one record per path."""

    @abstractmethod
    def history_of(self, commit: CommitRef) -> Iterator[CommitRef]:
        """Yield commit and its ancestors, most recent first, each once."""

    @abstractmethod
    def stash_count(self) -> int:
        """Number of stash entries."""

    def index_size(self) -> int:
        """Size of the index file in bytes, 0 when it does not exist."""
        try:
            return os.path.getsize(os.path.join(self.git_dir, "index"))
        except OSError:
            return 0

    def close(self) -> None:
        """Release backend resources."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
