"""Data models for git-prompt-status."""

from .status import (
    Category,
    ChangeRecord,
    CommitRef,
    Divergence,
    RepoPrompt,
    RepoStatusSummary,
    StatusCounts,
)

__all__ = [
    "Category",
    "ChangeRecord",
    "CommitRef",
    "Divergence",
    "RepoPrompt",
    "RepoStatusSummary",
    "StatusCounts",
]
