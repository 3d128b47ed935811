"""Segment building for the simple, compact and fancy display modes."""

from dataclasses import dataclass
from typing import Dict, List, Optional

from git_prompt_status.constants import (
    MODE_COMPACT,
    MODE_SIMPLE,
    THEME,
    SymbolSet,
)
from git_prompt_status.formatters.branch import format_branch_label
from git_prompt_status.models.status import RepoPrompt, RepoStatusSummary


@dataclass
class Segment:
    """One colored piece of the prompt."""
    name: str
    content: str
    foreground: Optional[int] = None
    background: Optional[int] = None


def format_stat(count: int, symbol: str, mode: str) -> str:
    """
    Format one category for the inline modes.

    Args:
        count: Category count, nothing is shown when 0
        symbol: Category glyph
        mode: simple or compact

    Returns:
        "" for 0, the bare glyph in simple mode, " <count><glyph>" in compact
    """
    if count <= 0:
        return ""
    if mode == MODE_COMPACT:
        return f" {count}{symbol}"
    return symbol


def format_stats(summary: RepoStatusSummary, symbols: SymbolSet, mode: str) -> str:
    """Concatenate format_stat over every category in display order."""
    return "".join(
        format_stat(count, symbols.for_category(category.value), mode)
        for category, count in summary.counts()
    )


def stat_segments(summary: RepoStatusSummary, symbols: SymbolSet,
                  theme: Dict[str, tuple] = THEME) -> List[Segment]:
    """One git-status segment per nonzero category."""
    segments = []
    for category, count in summary.counts():
        if count <= 0:
            continue
        foreground, background = theme[category.value]
        segments.append(Segment(
            name="git-status",
            content=f"{count}{symbols.for_category(category.value)}",
            foreground=foreground,
            background=background,
        ))
    return segments


def build_segments(prompt: RepoPrompt, symbols: SymbolSet, mode: str,
                   theme: Dict[str, tuple] = THEME) -> List[Segment]:
    """
    Build the segments of the git part of the prompt.

    Args:
        prompt: Collected repository information (disabled categories
            already zeroed)
        symbols: Glyph table
        mode: simple, compact or fancy
        theme: Color table

    Returns:
        A git-branch segment, followed in fancy mode by git-status segments
    """
    summary = prompt.summary
    foreground, background = theme["repo_dirty"] if summary.dirty else theme["repo_clean"]
    branch = Segment(
        name="git-branch",
        content=format_branch_label(prompt, symbols),
        foreground=foreground,
        background=background,
    )

    if mode == MODE_SIMPLE:
        if summary.has_info:
            branch.content += " " + format_stats(summary, symbols, mode)
        return [branch]

    if mode == MODE_COMPACT:
        if summary.has_info:
            branch.content += format_stats(summary, symbols, mode)
        return [branch]

    return [branch] + stat_segments(summary, symbols, theme)
