"""Tests for logging setup"""
import logging

from git_prompt_status.logging_config import get_logger, setup_logging


def test_logger_names_keep_subpackage():
    """Only the package prefix is stripped, so names never collide with GitPython's `git.*`."""
    logger = get_logger("git_prompt_status.services.git.command_backend")
    assert logger.name == "services.git.command_backend"
    assert get_logger("git_prompt_status.config").name == "config"


def test_log_file_receives_debug(temp_dir):
    """The log file gets debug records while the console stays at WARNING."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    log_file = temp_dir / "logs" / "prompt.log"

    setup_logging(log_file=str(log_file))
    try:
        get_logger("git_prompt_status.services.status_service").debug("walk truncated")
        for handler in root_logger.handlers:
            handler.flush()
        assert "walk truncated" in log_file.read_text()
    finally:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(saved_level)
