"""Service collecting the git prompt information for one directory"""

import os
from typing import Optional, Type, Union, TYPE_CHECKING

from git_prompt_status.constants import EMPTY_REPO_LABEL
from git_prompt_status.exceptions import (
    GitPromptStatusError,
    NoCommitsError,
    RepositoryNotFoundError,
    UpstreamNotConfiguredError,
)
from git_prompt_status.logging_config import get_logger
from git_prompt_status.models.status import (
    Divergence,
    RepoPrompt,
    RepoStatusSummary,
    StatusCounts,
)
from git_prompt_status.services.classifier import classify
from git_prompt_status.services.divergence import DivergenceCalculator
from git_prompt_status.services.git import GitBackend, get_backend

if TYPE_CHECKING:
    from git_prompt_status.config import Config

logger = get_logger(__name__)


def _normalize(path: str) -> str:
    return os.path.normcase(os.path.realpath(os.path.expanduser(path)))


class StatusService:
    """Build a RepoPrompt from a repository, degrading instead of failing."""

    def __init__(self, config: Union["Config", dict], backend_cls: Optional[Type[GitBackend]] = None):
        """Initialize the service.

        Args:
            config: Configuration dictionary or Config object
            backend_cls: Backend class to use instead of the configured one
        """
        self.config = config
        self.backend_cls = backend_cls or get_backend(config.get("backend", "gitpython"))
        self.disable_stats = list(config.get("disable_stats", []) or [])
        self.ignore_repos = {_normalize(path) for path in config.get("ignore_repos", []) or []}
        self.calculator = DivergenceCalculator(
            max_steps=config.get("max_traversal_steps", 5000),
            timeout=config.get("traversal_timeout"),
        )

    def _open(self, path: str) -> GitBackend:
        options = {}
        if self.config.get("command_timeout"):
            options["timeout"] = self.config.get("command_timeout")
        return self.backend_cls.open(path, **options)

    def _is_disabled(self, category: str) -> bool:
        return category in self.disable_stats

    def is_ignored(self, root: str) -> bool:
        """Check if a repository root is listed in ignore_repos."""
        return _normalize(root) in self.ignore_repos

    def collect(self, path: str) -> Optional[RepoPrompt]:
        """Collect branch and status information for the repository at path.

        Returns:
            RepoPrompt, or None when path is not in a repository or the
            repository is ignored
        """
        try:
            backend = self._open(path)
        except RepositoryNotFoundError as e:
            logger.debug(str(e))
            return None

        with backend:
            if self.is_ignored(backend.root):
                logger.debug(f"Repository {backend.root} is ignored")
                return None
            return self._collect(backend)

    def _collect(self, backend: GitBackend) -> RepoPrompt:
        branch, detached = self.get_branch_label(backend)

        if self.config.get("lite", False):
            return RepoPrompt(branch=branch, summary=RepoStatusSummary(), root=backend.root, detached=detached)

        summary = RepoStatusSummary.from_parts(
            self.get_change_counts(backend),
            self.get_divergence(backend),
            self.get_stash_count(backend),
        )
        # Zeroed before anyone evaluates dirty/has_info
        summary = summary.disable(self.disable_stats)

        logger.debug(f"Status for {backend.root}: {summary}")
        return RepoPrompt(branch=branch, summary=summary, root=backend.root, detached=detached)

    def get_branch_label(self, backend: GitBackend) -> tuple:
        """Return (label, detached) for the current HEAD."""
        try:
            branch = backend.branch_name()
            if branch:
                return branch, False
            return backend.head_commit().short, True
        except NoCommitsError as e:
            logger.debug(str(e))
            return e.branch or EMPTY_REPO_LABEL, False
        except GitPromptStatusError as e:
            logger.debug(f"Could not determine branch: {e}")
            return EMPTY_REPO_LABEL, False

    def get_change_counts(self, backend: GitBackend) -> StatusCounts:
        """Classify working tree changes, or zeros when skipped or failing."""
        if all(self._is_disabled(name) for name in ("staged", "notStaged", "untracked", "conflicted")):
            return StatusCounts(0, 0, 0, 0)

        limit_kib = self.config.get("assume_unchanged_size", 0)
        if limit_kib and backend.index_size() > limit_kib * 1024:
            logger.debug(f"Index larger than {limit_kib} KiB, assuming unchanged")
            return StatusCounts(0, 0, 0, 0)

        try:
            return classify(backend.change_records())
        except GitPromptStatusError as e:
            logger.debug(f"Could not read working tree status: {e}")
            return StatusCounts(0, 0, 0, 0)

    def get_divergence(self, backend: GitBackend) -> Divergence:
        """Compute ahead/behind against the upstream, (0, 0) on any failure."""
        if self._is_disabled("ahead") and self._is_disabled("behind"):
            return Divergence(0, 0)

        try:
            local = backend.head_commit()
            upstream = backend.upstream_commit()
            if upstream is None:
                raise UpstreamNotConfiguredError(backend.branch_name())
            return self.calculator.calculate(local, upstream, backend.history_of)
        except (NoCommitsError, UpstreamNotConfiguredError) as e:
            logger.debug(str(e))
        except GitPromptStatusError as e:
            logger.debug(f"Could not compute ahead/behind: {e}")
        return Divergence(0, 0)

    def get_stash_count(self, backend: GitBackend) -> int:
        """Count stash entries, 0 when disabled or unreadable."""
        if self._is_disabled("stashed"):
            return 0
        try:
            return backend.stash_count()
        except GitPromptStatusError as e:
            logger.debug(f"Could not count stash entries: {e}")
            return 0
