"""Ahead/behind computation by lockstep history walking.

The two histories are treated as chains that share everything up to a single
fork point and never merge again afterwards, which is the usual relation
between a local branch and its upstream. Histories with merges after the fork
may be miscounted; no general merge-base search is attempted.
"""

import time
from typing import Callable, Iterable, Iterator, List, Optional

from git_prompt_status.constants import DEFAULT_MAX_TRAVERSAL_STEPS
from git_prompt_status.exceptions import TraversalError
from git_prompt_status.logging_config import get_logger
from git_prompt_status.models.status import CommitRef, Divergence

logger = get_logger(__name__)

HistoryOf = Callable[[CommitRef], Iterable[CommitRef]]

_EXHAUSTED = object()


def _next_commit(history: Iterator[CommitRef]):
    """Advance a history iterator, wrapping backend failures."""
    try:
        return next(history, _EXHAUSTED)
    except TraversalError:
        raise
    except Exception as e:
        raise TraversalError(str(e)) from e


def _close(history: Iterator[CommitRef]) -> None:
    close = getattr(history, "close", None)
    if close is not None:
        close()


def fork_point_counts(local_seen: List[CommitRef], upstream_seen: List[CommitRef]) -> Divergence:
    """Count commits on each side of the fork of two fully walked histories.

    Both sequences are compared from their oldest end; the length of the
    shared tail is removed from each side.
    """
    bound = min(len(local_seen), len(upstream_seen))
    i = 0
    while i < bound and local_seen[-1 - i] == upstream_seen[-1 - i]:
        i += 1
    return Divergence(len(local_seen) - i, len(upstream_seen) - i)


def partial_counts(local_seen: List[CommitRef], upstream_seen: List[CommitRef]) -> Divergence:
    """Best-effort counts from a walk that was cut short.

    If any commit was seen on both sides it is the fork point (or older), and
    its positions give the counts. Otherwise the number of commits walked on
    each side is reported. That is not a bound: a branch that is only ahead
    still shows the upstream commits walked so far as behind.
    """
    upstream_positions = {commit: index for index, commit in enumerate(upstream_seen)}
    for index, commit in enumerate(local_seen):
        if commit in upstream_positions:
            return Divergence(index, upstream_positions[commit])
    return Divergence(len(local_seen), len(upstream_seen))


class DivergenceCalculator:
    """Compute how far a local branch and its upstream have drifted apart."""

    def __init__(self, max_steps: int = DEFAULT_MAX_TRAVERSAL_STEPS, timeout: Optional[float] = None):
        """Initialize the calculator.

        Args:
            max_steps: Maximum lockstep rounds before the walk is truncated
            timeout: Optional wall-clock limit in seconds for the walk
        """
        if max_steps <= 0:
            raise ValueError(f"max_steps must be positive, got {max_steps}")
        self.max_steps = max_steps
        self.timeout = timeout

    def calculate(
        self,
        local: Optional[CommitRef],
        upstream: Optional[CommitRef],
        history_of: HistoryOf,
    ) -> Divergence:
        """Return (ahead, behind) of local relative to upstream.

        Args:
            local: Local HEAD commit, None when there is none
            upstream: Upstream commit, None when no upstream is configured
            history_of: Callable yielding a commit and its ancestors, most
                recent first, each commit at most once

        Raises:
            TraversalError: If reading either history fails
        """
        if local is None or upstream is None:
            return Divergence(0, 0)

        if local == upstream:
            return Divergence(0, 0)

        try:
            local_history = iter(history_of(local))
            upstream_history = iter(history_of(upstream))
        except Exception as e:
            raise TraversalError(str(e)) from e

        try:
            return self._walk(local, upstream, local_history, upstream_history)
        finally:
            _close(local_history)
            _close(upstream_history)

    def _walk(
        self,
        local: CommitRef,
        upstream: CommitRef,
        local_history: Iterator[CommitRef],
        upstream_history: Iterator[CommitRef],
    ) -> Divergence:
        local_seen: List[CommitRef] = []
        upstream_seen: List[CommitRef] = []
        local_done = upstream_done = False
        deadline = time.monotonic() + self.timeout if self.timeout is not None else None
        steps = 0

        while not (local_done and upstream_done):
            if steps >= self.max_steps or (deadline is not None and time.monotonic() > deadline):
                logger.debug(
                    f"History walk truncated after {steps} steps "
                    f"({len(local_seen)} local, {len(upstream_seen)} upstream commits)"
                )
                return partial_counts(local_seen, upstream_seen)
            steps += 1

            local_commit = None
            if not local_done:
                local_commit = _next_commit(local_history)
                if local_commit is _EXHAUSTED:
                    local_done = True
                else:
                    local_seen.append(local_commit)

            upstream_commit = None
            if not upstream_done:
                upstream_commit = _next_commit(upstream_history)
                if upstream_commit is _EXHAUSTED:
                    upstream_done = True
                else:
                    upstream_seen.append(upstream_commit)

            # Local walked through the upstream tip: pure fast-forward ahead
            if not local_done and local_commit == upstream:
                return Divergence(len(local_seen) - 1, 0)
            if not upstream_done and upstream_commit == local:
                return Divergence(0, len(upstream_seen) - 1)

        return fork_point_counts(local_seen, upstream_seen)


def divergence(
    local: Optional[CommitRef],
    upstream: Optional[CommitRef],
    history_of: HistoryOf,
    max_steps: int = DEFAULT_MAX_TRAVERSAL_STEPS,
    timeout: Optional[float] = None,
) -> Divergence:
    """Shortcut for DivergenceCalculator(max_steps, timeout).calculate(...)."""
    return DivergenceCalculator(max_steps=max_steps, timeout=timeout).calculate(local, upstream, history_of)
