"""Git backends for git-prompt-status."""

from typing import Type

from git_prompt_status.constants import BACKEND_COMMAND, BACKEND_GITPYTHON
from .backend import GitBackend
from .command_backend import GitCommandBackend, GitEnvironment, GitResult, run_git
from .gitpython_backend import GitPythonBackend

BACKENDS = {
    BACKEND_GITPYTHON: GitPythonBackend,
    BACKEND_COMMAND: GitCommandBackend,
}


def get_backend(name: str) -> Type[GitBackend]:
    """Return the backend class registered under name."""
    try:
        return BACKENDS[name]
    except KeyError:
        raise ValueError(f"Unknown backend '{name}', expected one of {sorted(BACKENDS)}") from None


__all__ = [
    "GitBackend",
    "GitPythonBackend",
    "GitCommandBackend",
    "GitEnvironment",
    "GitResult",
    "run_git",
    "get_backend",
]
