"""Formatting utilities for git-prompt-status.

This package turns a collected RepoPrompt into display segments:
- branch: Branch label formatting
- segments: Segment building per display mode
- render: Rich text rendering
"""

# Branch formatters
from .branch import format_branch_label

# Segment formatters
from .segments import (
    Segment,
    build_segments,
    format_stat,
    format_stats,
    stat_segments,
)

# Rendering
from .render import render_segments, segment_style

__all__ = [
    # Branch
    "format_branch_label",
    # Segments
    "Segment",
    "build_segments",
    "format_stat",
    "format_stats",
    "stat_segments",
    # Render
    "render_segments",
    "segment_style",
]
