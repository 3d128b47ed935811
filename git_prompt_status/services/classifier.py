"""Classification of porcelain status records into change categories."""

from typing import Iterable, List

from git_prompt_status.constants import CONFLICT_CODES, STATUS_UNCHANGED, STATUS_UNTRACKED
from git_prompt_status.models.status import ChangeRecord, StatusCounts


def parse_porcelain(output: str) -> List[ChangeRecord]:
    """Parse `git status --porcelain` output into change records.

    Format: XY path, where X is the index state and Y the working tree
    state. Renames keep the "old -> new" text as the path.

    Args:
        output: Raw porcelain v1 output

    Returns:
        One ChangeRecord per path line; blank and short lines are skipped
    """
    records = []
    for line in output.split("\n"):
        line = line.rstrip("\r")
        if len(line) < 3:
            continue
        records.append(ChangeRecord(line[0], line[1], line[3:]))
    return records


def classify(records: Iterable[ChangeRecord]) -> StatusCounts:
    """Count change records per category.

    Every record lands in untracked, conflicted, or the staged/not staged
    pair, never in more than one of those groups. Unmerged pairs are checked
    before the staged/not staged split since they carry non-space codes on
    both sides.

    Args:
        records: Change records in any order

    Returns:
        StatusCounts(staged, not_staged, untracked, conflicted)
    """
    staged = not_staged = untracked = conflicted = 0

    for record in records:
        if record.is_malformed:
            continue

        code = record.code
        if code == STATUS_UNTRACKED:
            untracked += 1
        elif code in CONFLICT_CODES:
            conflicted += 1
        else:
            if record.index_code != STATUS_UNCHANGED:
                staged += 1
            if record.worktree_code != STATUS_UNCHANGED:
                not_staged += 1

    return StatusCounts(staged, not_staged, untracked, conflicted)
