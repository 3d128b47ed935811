"""Shared constants for git-prompt-status."""

from dataclasses import dataclass
from typing import Dict, FrozenSet, List


# Porcelain status alphabet
STATUS_UNCHANGED = " "
STATUS_UNTRACKED = "??"

# Unmerged pairs as documented for `git status --porcelain`
CONFLICT_CODES: FrozenSet[str] = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})


# Category display names, in display order
CATEGORY_NAMES: List[str] = [
    "ahead",
    "behind",
    "staged",
    "notStaged",
    "untracked",
    "conflicted",
    "stashed",
]


# Display modes
MODE_SIMPLE = "simple"
MODE_COMPACT = "compact"
MODE_FANCY = "fancy"
MODES: List[str] = [MODE_SIMPLE, MODE_COMPACT, MODE_FANCY]


# Backends
BACKEND_GITPYTHON = "gitpython"
BACKEND_COMMAND = "command"
BACKENDS: List[str] = [BACKEND_GITPYTHON, BACKEND_COMMAND]


# Traversal and subprocess guards
DEFAULT_MAX_TRAVERSAL_STEPS = 5000
DEFAULT_COMMAND_TIMEOUT = 2.0

SHORT_HASH_LENGTH = 7
EMPTY_REPO_LABEL = "(no commits)"


@dataclass(frozen=True)
class SymbolSet:
    """Glyphs used when rendering the git segment."""

    branch: str
    detached: str
    ahead: str
    behind: str
    staged: str
    not_staged: str
    untracked: str
    conflicted: str
    stashed: str

    def for_category(self, category: str) -> str:
        """Return the glyph of a category display name."""
        return {
            "ahead": self.ahead,
            "behind": self.behind,
            "staged": self.staged,
            "notStaged": self.not_staged,
            "untracked": self.untracked,
            "conflicted": self.conflicted,
            "stashed": self.stashed,
        }[category]


DEFAULT_SYMBOLS = SymbolSet(
    branch="\ue0a0",
    detached="⚓",
    ahead="⬆",
    behind="⬇",
    staged="✔",
    not_staged="✎",
    untracked="+",
    conflicted="✼",
    stashed="⚑",
)

ASCII_SYMBOLS = SymbolSet(
    branch="",
    detached="@",
    ahead="^",
    behind="v",
    staged="*",
    not_staged="~",
    untracked="+",
    conflicted="!",
    stashed="$",
)


# Segment colors (256-color palette indexes, foreground/background)
THEME: Dict[str, tuple] = {
    "repo_clean": (0, 148),
    "repo_dirty": (15, 161),
    "ahead": (250, 240),
    "behind": (250, 240),
    "staged": (15, 22),
    "notStaged": (15, 130),
    "untracked": (15, 52),
    "conflicted": (15, 9),
    "stashed": (15, 20),
}
