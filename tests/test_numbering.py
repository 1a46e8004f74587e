import pytest

from i3nextws import numbering
from i3nextws.snapshot import WorkspaceSummary


# yapf: disable
@pytest.mark.parametrize('numbers,next_free', [
    ([], 1),
    ([1], 2),
    ([2, 3, 4], 1),
    ([1, 2, 4], 3),
    ([1, 2, 3], 4),
    ([1, 3, 5, 6], 2),
    ([-1, 1, 2], 3),
    ([-1, -1, 2], 1),
    ([0, 1], 2),
])
# yapf: enable
def test_find_next_free_number(numbers, next_free):
    assert numbering.find_next_free_number(sorted(numbers)) == next_free


@pytest.mark.parametrize('numbers', [
    [1],
    [1, 2, 4],
    [2, 3, 4],
    [1, 3, 7, 8, 20],
    [5, 2, 9],
])
def test_next_free_number_is_smallest_absent(numbers):
    next_free = numbering.find_next_free_number(sorted(numbers))
    assert next_free not in numbers
    assert all(n in numbers for n in range(1, next_free))


def test_get_workspace_numbers_sorted():
    workspaces = [
        WorkspaceSummary(4, False, '4'),
        WorkspaceSummary(-1, False, 'mail'),
        WorkspaceSummary(2, True, '2'),
    ]
    assert numbering.get_workspace_numbers(workspaces) == [-1, 2, 4]


def test_compute_renumber_mapping():
    assert numbering.compute_renumber_mapping([5, 2, 9]) == {2: 1, 5: 2, 9: 3}


def test_compute_renumber_mapping_empty():
    assert numbering.compute_renumber_mapping([]) == {}


@pytest.mark.parametrize('numbers', [
    [1],
    [3],
    [1, 3, 4],
    [10, 2, 7, 5],
    [100, 1, 50, 51, 2],
])
def test_compute_renumber_mapping_is_ordered_bijection(numbers):
    mapping = numbering.compute_renumber_mapping(numbers)
    assert sorted(mapping.keys()) == sorted(numbers)
    assert sorted(mapping.values()) == list(range(1, len(numbers) + 1))
    for old1 in numbers:
        for old2 in numbers:
            assert (old1 < old2) == (mapping[old1] < mapping[old2])


@pytest.mark.parametrize('numbers', [[1], [1, 2], [3, 1, 2]])
def test_compute_renumber_mapping_consecutive_is_identity(numbers):
    mapping = numbering.compute_renumber_mapping(numbers)
    assert numbering.is_identity(mapping)


def test_is_identity():
    assert numbering.is_identity({})
    assert numbering.is_identity({1: 1, 2: 2})
    assert not numbering.is_identity({1: 1, 3: 2})
