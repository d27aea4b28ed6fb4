"""Conceptual relatedness between two words."""

from tensegrity.graph.lexicon import (
    CROSS_REINFORCING_GROUPS,
    conceptual_groups_of,
    synonym_groups_of,
)


def are_conceptually_related(first: str, second: str) -> bool:
    """
    Check whether two words earn the conceptual edge bonus.

    Related means any of:
    - the same word
    - members of a common synonym group
    - members of a common conceptual group
    - members of two cross-reinforcing groups (abstraction/physics,
      computational_linguistics/probability)
    """
    if first == second:
        return True

    if synonym_groups_of(first) & synonym_groups_of(second):
        return True

    groups_first = set(conceptual_groups_of(first))
    groups_second = set(conceptual_groups_of(second))
    if groups_first & groups_second:
        return True

    for group_a in groups_first:
        for group_b in groups_second:
            if frozenset([group_a, group_b]) in CROSS_REINFORCING_GROUPS:
                return True

    return False
