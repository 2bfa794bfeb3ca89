"""Expansion of partial patterns into their possible next steps."""

from __future__ import annotations

from collections.abc import Iterable

from .pattern import GroupType, Pattern


def _with_group(pattern: Pattern, group, group_type: GroupType) -> Pattern:
    derived = pattern.copy()
    derived.add_group(group, group_type)
    for tile in group:
        derived.remove_tile(tile)
    return derived


def first_group_patterns(pattern: Pattern) -> list[Pattern]:
    """Patterns made by grouping the first ungrouped tile.

    In order: as a sequence, as a three of a kind, as the pair. The given
    pattern is left unchanged.
    """
    result: list[Pattern] = []
    sequence = pattern.next_sequence()
    if sequence is not None and not pattern.has_four_group():
        result.append(_with_group(pattern, sequence, GroupType.SEQUENCE_CLOSE))
    three = pattern.next_three_same()
    if three is not None and not pattern.has_four_group():
        result.append(_with_group(pattern, three, GroupType.THREE_CLOSE))
    pair = pattern.next_pair()
    if pair is not None and not pattern.has_pair():
        result.append(_with_group(pattern, pair, GroupType.PAIR_CLOSE))
    return result


def format_patterns(patterns: Iterable[Pattern]) -> str:
    return "\n".join(f"Pat {i} :{pattern}" for i, pattern in enumerate(patterns))