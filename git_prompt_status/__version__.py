"""Version information for git-prompt-status."""

__version__ = "0.1.0"
