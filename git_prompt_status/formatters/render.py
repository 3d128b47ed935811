"""Rendering of segments with rich."""

from typing import List

from rich.style import Style
from rich.text import Text

from git_prompt_status.formatters.segments import Segment


def segment_style(segment: Segment) -> Style:
    """Rich style for a segment's palette colors."""
    return Style(
        color=f"color({segment.foreground})" if segment.foreground is not None else None,
        bgcolor=f"color({segment.background})" if segment.background is not None else None,
    )


def render_segments(segments: List[Segment], color: bool = True) -> Text:
    """
    Join segments into one line of text.

    Args:
        segments: Segments in display order
        color: If False, no styles are attached

    Returns:
        Text with each segment padded by one space on both sides
    """
    text = Text(no_wrap=True, end="")
    for segment in segments:
        style = segment_style(segment) if color else None
        text.append(f" {segment.content} ", style=style)
    return text
