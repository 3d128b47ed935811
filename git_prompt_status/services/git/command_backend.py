"""Repository access by running the git binary."""

import os
import signal
import subprocess
import sys
import threading
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional

from git_prompt_status.constants import DEFAULT_COMMAND_TIMEOUT
from git_prompt_status.exceptions import (
    GitCommandFailedError,
    NoCommitsError,
    RepositoryNotFoundError,
    TraversalError,
)
from git_prompt_status.logging_config import get_logger
from git_prompt_status.models.status import ChangeRecord, CommitRef
from git_prompt_status.services.classifier import parse_porcelain
from git_prompt_status.services.git.backend import GitBackend

logger = get_logger(__name__)

_POSIX = sys.platform != "win32"


def home_env_name() -> str:
    """Name of the variable holding the home directory on this platform."""
    return "USERPROFILE" if sys.platform == "win32" else "HOME"


@dataclass(frozen=True)
class GitEnvironment:
    """Environment handed to every git process.

    Only the variables git needs are passed, with a fixed locale so output
    parsing does not depend on the user's language settings.
    """
    home: str = ""
    path: str = ""
    lang: str = "C"
    home_var: str = "HOME"
    optional_locks: bool = False  # Keep `git status` from refreshing the index

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "GitEnvironment":
        """Snapshot the relevant variables of an environment (default os.environ)."""
        environ = os.environ if environ is None else environ
        home_var = home_env_name()
        return cls(
            home=environ.get(home_var, ""),
            path=environ.get("PATH", ""),
            home_var=home_var,
        )

    def as_env(self) -> Dict[str, str]:
        """Build the mapping passed to subprocess."""
        return {
            "LANG": self.lang,
            "LC_ALL": self.lang,
            self.home_var: self.home,
            "PATH": self.path,
            "GIT_OPTIONAL_LOCKS": "1" if self.optional_locks else "0",
        }


@dataclass
class GitResult:
    """Result of a git command."""
    returncode: int
    stdout: str
    stderr: str
    timed_out: bool = False

    @property
    def success(self) -> bool:
        return self.returncode == 0 and not self.timed_out


def run_git(
    args: List[str],
    cwd: str,
    env: GitEnvironment,
    timeout: float = DEFAULT_COMMAND_TIMEOUT,
) -> GitResult:
    """
    Run a git command with timeout handling.

    Args:
        args: Git command arguments (e.g., ["status", "--porcelain"])
        cwd: Directory the command runs in
        env: Environment for the git process
        timeout: Timeout in seconds

    Returns:
        GitResult with returncode, stdout, stderr, and timed_out flag
    """
    cmd = ["git", "-C", str(cwd)] + args
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
            env=env.as_env(),
        )
        return GitResult(
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
    except subprocess.TimeoutExpired:
        return GitResult(
            returncode=-1,
            stdout="",
            stderr=f"Command timed out after {timeout}s",
            timed_out=True,
        )
    except OSError as e:
        # git is not installed or cwd is unusable
        return GitResult(returncode=-1, stdout="", stderr=str(e))


def _kill(process: subprocess.Popen) -> None:
    """Kill a git process started by history_of along with its children."""
    if not _POSIX:
        process.kill()
        return
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        # Whole group already exited
        pass


class GitCommandBackend(GitBackend):
    """Backend shelling out to the git binary."""

    def __init__(
        self,
        root: str,
        git_dir: str,
        env: Optional[GitEnvironment] = None,
        timeout: float = DEFAULT_COMMAND_TIMEOUT,
    ):
        """Initialize the backend.

        Args:
            root: Working tree root
            git_dir: Absolute git directory
            env: Environment for git processes (default: snapshot of os.environ)
            timeout: Timeout in seconds for each git command
        """
        self._root = root
        self._git_dir = git_dir
        self.env = env if env is not None else GitEnvironment.from_environ()
        self.timeout = timeout

    @classmethod
    def open(cls, path: str, env: Optional[GitEnvironment] = None,
             timeout: float = DEFAULT_COMMAND_TIMEOUT, **options) -> "GitCommandBackend":
        env = env if env is not None else GitEnvironment.from_environ()
        result = run_git(["rev-parse", "--show-toplevel", "--absolute-git-dir"], path, env, timeout)
        if not result.success:
            logger.debug(f"Not a repository at {path}: {result.stderr.strip()}")
            raise RepositoryNotFoundError(path)

        lines = result.stdout.splitlines()
        if len(lines) < 2:
            raise RepositoryNotFoundError(path)

        logger.debug(f"Opened repository at {lines[0]}")
        return cls(lines[0], lines[1], env=env, timeout=timeout)

    @property
    def root(self) -> str:
        return self._root

    @property
    def git_dir(self) -> str:
        return self._git_dir

    def _run(self, args: List[str]) -> GitResult:
        return run_git(args, self._root, self.env, self.timeout)

    def _check(self, args: List[str]) -> str:
        result = self._run(args)
        if not result.success:
            raise GitCommandFailedError(" ".join(args), result.returncode, result.stderr.strip())
        return result.stdout

    def head_commit(self) -> CommitRef:
        result = self._run(["rev-parse", "--verify", "--quiet", "HEAD"])
        if not result.success:
            if result.timed_out:
                raise GitCommandFailedError("rev-parse HEAD", result.returncode, result.stderr.strip())
            raise NoCommitsError(self.branch_name())
        return CommitRef(result.stdout.strip())

    def branch_name(self) -> Optional[str]:
        result = self._run(["symbolic-ref", "--short", "--quiet", "HEAD"])
        if not result.success:
            return None
        return result.stdout.strip() or None

    def upstream_commit(self) -> Optional[CommitRef]:
        result = self._run(["rev-parse", "--verify", "--quiet", "@{upstream}"])
        if not result.success:
            return None
        return CommitRef(result.stdout.strip())

    def change_records(self) -> List[ChangeRecord]:
        return parse_porcelain(self._check(["status", "--porcelain"]))

    def history_of(self, commit: CommitRef) -> Iterator[CommitRef]:
        cmd = ["git", "-C", self._root, "rev-list", commit.hexsha]
        try:
            process = subprocess.Popen(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                env=self.env.as_env(),
                # Own process group, so helpers git spawns die with it
                start_new_session=_POSIX,
            )
        except OSError as e:
            raise TraversalError(str(e)) from e

        # Reading stdout blocks, so the deadline is enforced by killing git
        expired = threading.Event()

        def expire():
            expired.set()
            _kill(process)

        timer = threading.Timer(self.timeout, expire)
        timer.daemon = True
        timer.start()
        try:
            for line in process.stdout:
                line = line.strip()
                if line:
                    yield CommitRef(line)
            try:
                process.wait(timeout=self.timeout)
            except subprocess.TimeoutExpired:
                expired.set()
            if expired.is_set():
                raise TraversalError(f"rev-list {commit.short} timed out after {self.timeout}s")
            if process.returncode != 0:
                raise TraversalError(f"rev-list {commit.short} exited {process.returncode}")
        finally:
            timer.cancel()
            if process.poll() is None:
                _kill(process)
                process.wait()
            process.stdout.close()

    def stash_count(self) -> int:
        result = self._run(["rev-list", "--walk-reflogs", "refs/stash"])
        if not result.success:
            return 0
        return len([line for line in result.stdout.splitlines() if line.strip()])
