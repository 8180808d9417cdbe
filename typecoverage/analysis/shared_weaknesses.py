# ABOUTME: Detects weaknesses shared by two or more roster members.
# ABOUTME: A team fragility signal independent of recommendations.

from collections import Counter
from collections.abc import Iterable

SHARED_WEAKNESS_THRESHOLD = 2


def find_shared_weaknesses(per_member_weaknesses: Iterable[Iterable[str]]) -> frozenset[str]:
    """Return the types that at least two members are weak to.

    Args:
        per_member_weaknesses: One weakness set per roster member.

    Returns:
        Frozenset of shared weakness types (empty for fewer than two members).
    """
    counts: Counter[str] = Counter()
    for weaknesses in per_member_weaknesses:
        counts.update(set(weaknesses))

    return frozenset(type_name for type_name, count in counts.items() if count >= SHARED_WEAKNESS_THRESHOLD)
