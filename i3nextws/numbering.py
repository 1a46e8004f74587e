# Workspace number planning.
#
# These functions only compute numbers, they never talk to i3. The mapping
# returned by compute_renumber_mapping is what the controller uses to relocate
# windows and rename workspaces.
from typing import Dict, Iterable, List

from i3nextws import log_util
from i3nextws.snapshot import WorkspaceSummary

logger = log_util.logger

RenumberMapping = Dict[int, int]


def get_workspace_numbers(workspaces: Iterable[WorkspaceSummary]) -> List[int]:
    return sorted(ws.num for ws in workspaces)


def find_next_free_number(sorted_numbers: Iterable[int]) -> int:
    """Returns the lowest positive number not in `sorted_numbers`.

    `sorted_numbers` must be sorted in ascending order. Zero and negative
    numbers (i3 reports -1 for unnumbered workspaces) never match a candidate,
    so they are skipped.
    """
    candidate = 1
    for number in sorted_numbers:
        if number > candidate:
            break
        if number == candidate:
            candidate += 1
    return candidate


def compute_renumber_mapping(numbers: Iterable[int]) -> RenumberMapping:
    """Maps the k-th smallest number to k.

    The result preserves the relative order of the workspaces and has no gaps.
    Numbers are assumed to be unique, as workspace numbers are in i3.
    """
    mapping = {
        old_number: new_number
        for new_number, old_number in enumerate(sorted(numbers), start=1)
    }
    logger.debug('Renumber mapping: %s', mapping)
    return mapping


def is_identity(mapping: RenumberMapping) -> bool:
    return all(old == new for old, new in mapping.items())
