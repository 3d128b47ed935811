"""Command-line argument parsing for git-prompt-status."""

import argparse
from typing import List, Optional, Sequence

from git_prompt_status.__version__ import __version__
from git_prompt_status.constants import (
    BACKENDS,
    BACKEND_GITPYTHON,
    CATEGORY_NAMES,
    DEFAULT_COMMAND_TIMEOUT,
    DEFAULT_MAX_TRAVERSAL_STEPS,
    MODES,
    MODE_FANCY,
)


def comma_list(value: str) -> List[str]:
    """Split a comma separated option value, dropping empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_args(argv: Optional[Sequence[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-prompt-status",
        description="Print branch, ahead/behind and change counts of a git repository for a shell prompt",
    )
    parser.add_argument("--version", action="version", version=f"git-prompt-status {__version__}")
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=MODE_FANCY,
        help="Display mode: symbols only, inline counts, or one segment per count (default: fancy)",
    )
    parser.add_argument(
        "--disable-stats",
        type=comma_list,
        default=[],
        metavar="LIST",
        help=f"Comma separated categories to hide ({', '.join(CATEGORY_NAMES)})",
    )
    parser.add_argument(
        "--ignore-repos",
        type=comma_list,
        default=[],
        metavar="LIST",
        help="Comma separated repository roots to print nothing for",
    )
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        default=BACKEND_GITPYTHON,
        help="Read the repository with GitPython or by running the git binary (default: gitpython)",
    )
    parser.add_argument("--lite", action="store_true", help="Only show the branch")
    parser.add_argument(
        "--assume-unchanged-size",
        type=int,
        default=0,
        metavar="KIB",
        help="Skip working tree status when the index is larger than this many KiB (0 = never)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=DEFAULT_MAX_TRAVERSAL_STEPS,
        metavar="N",
        help=f"Maximum history steps for ahead/behind (default: {DEFAULT_MAX_TRAVERSAL_STEPS})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Wall-clock limit for the ahead/behind history walk",
    )
    parser.add_argument(
        "--command-timeout",
        type=float,
        default=DEFAULT_COMMAND_TIMEOUT,
        metavar="SECONDS",
        help=f"Timeout for each git command of the command backend (default: {DEFAULT_COMMAND_TIMEOUT})",
    )
    parser.add_argument("--ascii", action="store_true", help="Use ASCII symbols")
    parser.add_argument("--no-color", action="store_true", help="Print plain text without colors")
    parser.add_argument("--cwd", default=None, metavar="PATH", help="Directory to inspect (default: current)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output on stderr")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--log-file", default=None, metavar="PATH", help="Also write all log messages to a file")

    return parser.parse_args(argv)
