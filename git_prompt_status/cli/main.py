"""Entry point for git-prompt-status"""

import os
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.text import Text

from git_prompt_status.cli.args import parse_args
from git_prompt_status.config import Config
from git_prompt_status.constants import ASCII_SYMBOLS, DEFAULT_SYMBOLS
from git_prompt_status.exceptions import GitPromptStatusError
from git_prompt_status.formatters import build_segments, render_segments
from git_prompt_status.logging_config import get_logger, setup_logging
from git_prompt_status.services.status_service import StatusService

logger = get_logger(__name__)


def build_config(parsed_args) -> Config:
    """Build a validated Config from parsed arguments."""
    return Config(
        mode=parsed_args.mode,
        disable_stats=parsed_args.disable_stats,
        ascii_symbols=parsed_args.ascii,
        color=not parsed_args.no_color,
        lite=parsed_args.lite,
        ignore_repos=parsed_args.ignore_repos,
        backend=parsed_args.backend,
        assume_unchanged_size=parsed_args.assume_unchanged_size,
        max_traversal_steps=parsed_args.max_steps,
        traversal_timeout=parsed_args.timeout,
        command_timeout=parsed_args.command_timeout,
        verbose=parsed_args.verbose,
        debug=parsed_args.debug,
        log_file=parsed_args.log_file,
    )


def render_prompt(path: str, config: Config) -> Optional[Text]:
    """Collect and format the git segment for path.

    Returns:
        None when there is nothing to show, otherwise the segment Text
    """
    prompt = StatusService(config).collect(path)
    if prompt is None:
        return None
    symbols = ASCII_SYMBOLS if config.ascii_symbols else DEFAULT_SYMBOLS
    segments = build_segments(prompt, symbols, config.mode)
    return render_segments(segments, color=config.color)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)

    try:
        config = build_config(parsed_args)
    except ValueError as e:
        print(f"git-prompt-status: {e}", file=sys.stderr)
        return 2

    setup_logging(verbose=config.verbose, debug=config.debug, log_file=config.log_file)
    if config.debug:
        for key, value in config.to_dict().items():
            logger.debug(f"config {key}: {value}")

    console = Console(
        highlight=False,
        soft_wrap=True,
        force_terminal=config.color or None,
        color_system="256" if config.color else None,
    )

    try:
        text = render_prompt(parsed_args.cwd or os.getcwd(), config)
    except KeyboardInterrupt:
        return 1
    except GitPromptStatusError as e:
        logger.debug(f"Nothing rendered: {e}")
        return 0
    except Exception as e:
        # The prompt must keep working whatever the repository looks like
        logger.warning(f"Error rendering git status: {e}")
        if config.debug:
            logger.exception("Traceback")
        return 0

    if text is not None:
        console.print(text, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
