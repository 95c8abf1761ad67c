"""BusiestCSPolicy — find the CS serving the most customers, 0 on a tie."""

from __future__ import annotations

from collections.abc import Mapping, Sized

NO_WINNER = 0


def pick_busiest(assignment: Mapping[int, Sized]) -> int:
    """Scan CSs in mapping order, tracking (leader, max_count).

    - count > max_count: the CS becomes the sole leader.
    - count == max_count: the leader is reset to 0 and stays 0 until a later
      CS strictly exceeds max_count. Ties cascade: a new leader can be reset
      again by a later CS with the same count.
    - count < max_count: nothing changes.

    Returns:
        The leader's id, or 0 when the maximum is shared or there are no CSs.
    """
    leader = NO_WINNER
    max_count = -1

    for cs_id, customers in assignment.items():
        count = len(customers)
        if count > max_count:
            leader, max_count = cs_id, count
        elif count == max_count:
            leader = NO_WINNER

    return leader
