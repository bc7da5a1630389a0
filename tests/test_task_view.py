import pytest

from whisker.task_view import ArchetypeGroup, ArchetypeSlice, TaskInfo, split_tasks
from whisker.world_filter import ArchetypeFilterResult, EntityBlock, WorldFilterResult


def _filter_result(*archetype_blocks):
    result = WorldFilterResult()
    for position, blocks in enumerate(archetype_blocks):
        archetype = ArchetypeFilterResult(archetype=f"arch{position}")
        for begin, end in blocks:
            archetype.add_block(EntityBlock(begin, end))
        result.filtered_archetypes.append(archetype)
        result.total_entity_count += archetype.entities_count
    return result


def _expand(blocks):
    return [index for block in blocks for index in range(block.begin, block.end)]


def _all_filtered(result):
    return [
        (position, index)
        for position, archetype in enumerate(result.filtered_archetypes)
        for index in _expand(archetype.blocks)
    ]


def _covered(groups):
    return [
        (piece.archetype_index, index)
        for group in groups
        for piece in group
        for index in _expand(piece)
    ]


@pytest.mark.parametrize("num_tasks", [1, 2, 3, 4, 7, 13, 40])
def test_tasks_cover_every_entity_once_in_order(num_tasks):
    result = _filter_result([(0, 5), (8, 12)], [(2, 4)], [(0, 7)])
    groups = list(split_tasks(result, num_tasks))
    assert len(groups) == num_tasks
    assert _covered(groups) == _all_filtered(result)


@pytest.mark.parametrize("num_tasks", [1, 3, 5, 16])
def test_task_sizes_are_balanced(num_tasks):
    result = _filter_result([(0, 9)], [(0, 7)])
    sizes = [group.task_size() for group in split_tasks(result, num_tasks)]
    assert sum(sizes) == result.total_entity_count
    assert max(sizes) - min(sizes) <= 1
    assert sizes == sorted(sizes, reverse=True)


def test_task_ids_are_consecutive():
    result = _filter_result([(0, 6)])
    ids = [group.info.id for group in split_tasks(result, 4)]
    assert ids == list(range(4))


def test_slice_sizes_match_task_size():
    result = _filter_result([(0, 3)], [(0, 2)], [(5, 9)])
    for group in split_tasks(result, 2):
        assert sum(piece.size for piece in group) == group.task_size()
        for piece in group:
            assert sum(block.size for block in piece) == piece.size


def test_slice_knows_its_archetype():
    result = _filter_result([(0, 3)], [(0, 3)])
    (group,) = split_tasks(result, 1)
    assert [piece.archetype for piece in group] == ["arch0", "arch1"]


def test_slice_skips_across_blocks():
    result = _filter_result([(0, 2), (10, 14)])
    piece = ArchetypeSlice(0, result.filtered_archetypes[0], 3, 2)
    assert list(piece) == [EntityBlock(11, 13)]


def test_slice_starting_at_block_end_moves_to_next_block():
    result = _filter_result([(0, 2), (10, 14)])
    piece = ArchetypeSlice(0, result.filtered_archetypes[0], 2, 4)
    assert list(piece) == [EntityBlock(10, 14)]


def test_group_starting_inside_archetype():
    result = _filter_result([(0, 4)], [(0, 4)])
    group = ArchetypeGroup(TaskInfo(size=5, first_archetype=0, first_entity=2), result)
    assert [(piece.archetype_index, piece.first_entity, piece.size) for piece in group] == [
        (0, 2, 2),
        (1, 0, 3),
    ]


def test_empty_task_yields_nothing():
    result = _filter_result([(0, 2)])
    groups = list(split_tasks(result, 5))
    assert [group.task_size() for group in groups].count(0) == 3
    assert all(list(group) == [] for group in groups if group.task_size() == 0)


def test_no_archetypes():
    result = WorldFilterResult()
    groups = list(split_tasks(result, 3))
    assert _covered(groups) == []


def test_zero_tasks_rejected():
    with pytest.raises(ValueError):
        list(split_tasks(_filter_result([(0, 2)]), 0))