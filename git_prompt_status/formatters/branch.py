"""Branch label formatting utilities."""

from git_prompt_status.constants import SymbolSet
from git_prompt_status.models.status import RepoPrompt


def format_branch_label(prompt: RepoPrompt, symbols: SymbolSet) -> str:
    """
    Format the branch part of the git segment.

    Args:
        prompt: Collected repository information
        symbols: Glyph table

    Returns:
        Branch name, or detached marker plus short hash, prefixed by the
        branch glyph when the table has one

    Example:
        "main", "@ 1a2b3c4" with ASCII_SYMBOLS
    """
    label = prompt.branch
    if prompt.detached and symbols.detached:
        label = f"{symbols.detached} {label}"
    if symbols.branch:
        label = f"{symbols.branch} {label}"
    return label
