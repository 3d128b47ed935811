"""Repository status models"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, List, NamedTuple, Tuple

from git_prompt_status.constants import SHORT_HASH_LENGTH


class Category(Enum):
    """Counted pieces of information, in display order."""
    AHEAD = "ahead"
    BEHIND = "behind"
    STAGED = "staged"
    NOT_STAGED = "notStaged"
    UNTRACKED = "untracked"
    CONFLICTED = "conflicted"
    STASHED = "stashed"


# Display name -> RepoStatusSummary field
CATEGORY_FIELDS = {
    Category.AHEAD: "ahead",
    Category.BEHIND: "behind",
    Category.STAGED: "staged",
    Category.NOT_STAGED: "not_staged",
    Category.UNTRACKED: "untracked",
    Category.CONFLICTED: "conflicted",
    Category.STASHED: "stashed",
}


@dataclass(frozen=True)
class ChangeRecord:
    """One path reported by porcelain status: XY codes plus the path."""
    index_code: str
    worktree_code: str
    path: str = ""

    @property
    def code(self) -> str:
        return f"{self.index_code}{self.worktree_code}"

    @property
    def is_malformed(self) -> bool:
        """True when either code is not a single character."""
        return (
            not isinstance(self.index_code, str)
            or not isinstance(self.worktree_code, str)
            or len(self.index_code) != 1
            or len(self.worktree_code) != 1
        )


@dataclass(frozen=True)
class CommitRef:
    """Commit identity within one repository."""
    hexsha: str

    @property
    def short(self) -> str:
        return self.hexsha[:SHORT_HASH_LENGTH]

    def __str__(self) -> str:
        return self.hexsha


class Divergence(NamedTuple):
    """Commits exclusive to the local branch and to its upstream."""
    ahead: int
    behind: int


class StatusCounts(NamedTuple):
    """Working tree change counts produced by the classifier."""
    staged: int
    not_staged: int
    untracked: int
    conflicted: int


@dataclass(frozen=True)
class RepoStatusSummary:
    """Everything the formatter shows next to the branch name.

    Built fresh for every render and never mutated; ``disable`` returns a copy.
    """
    ahead: int = 0
    behind: int = 0
    staged: int = 0
    not_staged: int = 0
    untracked: int = 0
    conflicted: int = 0
    stashed: int = 0

    @classmethod
    def from_parts(cls, counts: StatusCounts, divergence: Divergence, stashed: int = 0) -> "RepoStatusSummary":
        return cls(
            ahead=divergence.ahead,
            behind=divergence.behind,
            staged=counts.staged,
            not_staged=counts.not_staged,
            untracked=counts.untracked,
            conflicted=counts.conflicted,
            stashed=stashed,
        )

    @property
    def dirty(self) -> bool:
        """True when the working tree or index has any change."""
        return self.untracked + self.not_staged + self.staged + self.conflicted > 0

    @property
    def has_info(self) -> bool:
        """True when there is anything to show besides the branch."""
        return self.dirty or self.ahead + self.behind + self.stashed > 0

    def disable(self, categories: Iterable[str]) -> "RepoStatusSummary":
        """Return a copy with the named categories zeroed.

        Args:
            categories: Display names such as "notStaged" or "stashed"

        Raises:
            ValueError: If a name is not a known category
        """
        zeroed = {}
        for name in categories:
            category = Category(name)
            zeroed[CATEGORY_FIELDS[category]] = 0
        if not zeroed:
            return self
        return replace(self, **zeroed)

    def count_of(self, category: Category) -> int:
        return getattr(self, CATEGORY_FIELDS[category])

    def counts(self) -> List[Tuple[Category, int]]:
        """Return (category, count) pairs in display order."""
        return [(category, self.count_of(category)) for category in Category]


@dataclass(frozen=True)
class RepoPrompt:
    """Branch label plus status summary for one repository."""
    branch: str
    summary: RepoStatusSummary
    root: str = ""
    detached: bool = False
