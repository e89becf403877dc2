from typing import List, Sequence, Tuple

SEAT_COUNT = 2


def assign_seats(member_order: Sequence[str]) -> List[str]:
    """The first two room members, in join order, take the seats."""
    return list(member_order[:SEAT_COUNT])


def seat_changes(current: Sequence[str], desired: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Return ``(added, removed)`` going from ``current`` to ``desired`` seats."""
    added = [seat for seat in desired if seat not in current]
    removed = [seat for seat in current if seat not in desired]
    return added, removed
