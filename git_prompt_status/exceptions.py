"""Custom exceptions for git-prompt-status"""

from typing import Optional


class GitPromptStatusError(Exception):
    """Base exception for all git-prompt-status errors."""
    pass


class RepositoryNotFoundError(GitPromptStatusError):
    """Exception raised when a path is not inside a git repository."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No git repository found at '{path}'")


class NoCommitsError(GitPromptStatusError):
    """Exception raised when the repository has no commits yet."""

    def __init__(self, branch: Optional[str] = None):
        self.branch = branch
        error_msg = "Repository has no commits"
        if branch:
            error_msg += f" (unborn branch '{branch}')"
        super().__init__(error_msg)


class UpstreamNotConfiguredError(GitPromptStatusError):
    """Exception raised when the current branch has no upstream."""

    def __init__(self, branch: Optional[str] = None):
        self.branch = branch
        if branch:
            error_msg = f"Branch '{branch}' has no upstream configured"
        else:
            error_msg = "HEAD is detached, no upstream available"
        super().__init__(error_msg)


class TraversalError(GitPromptStatusError):
    """Exception raised when walking a commit history fails."""

    def __init__(self, message: Optional[str] = None):
        self.message = message

        error_msg = "Commit history traversal failed"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class GitCommandFailedError(GitPromptStatusError):
    """Exception raised when an invocation of the git binary fails."""

    def __init__(self, command: str, status: Optional[int] = None, stderr: Optional[str] = None):
        self.command = command
        self.status = status
        self.stderr = stderr

        error_msg = f"Git command '{command}' failed"
        if status is not None:
            error_msg += f" (exit {status})"
        if stderr:
            error_msg += f": {stderr}"

        super().__init__(error_msg)
