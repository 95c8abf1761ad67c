"""LowestCapablePolicy — give each customer to the weakest CS that can serve them."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

from balancer.domain.entities.customer import Customer
from balancer.domain.entities.customer_success import CustomerSuccess


def available_customer_successes(
    customer_successes: Iterable[CustomerSuccess],
    away_ids: Iterable[int],
) -> list[CustomerSuccess]:
    """Drop CSs that are away and order the rest by score ascending."""
    away = set(away_ids)
    return sorted((cs for cs in customer_successes if cs.id not in away), key=lambda cs: cs.score)


def assign_customers(
    customer_successes: Sequence[CustomerSuccess],
    customers: Sequence[Customer],
    away_ids: Sequence[int],
) -> tuple[dict[int, list[int]], list[int]]:
    """Greedy lowest-capable assignment.

    1. Keep only available CSs, sorted by score.
    2. Walk customers by score (stable, so equal scores keep input order).
    3. Each customer goes to the first CS whose score >= the customer's score,
       found by a lower-bound search over the sorted CS scores.

    Every available CS is present in the mapping, in ascending score order,
    even with no customers. Customers no CS can serve are returned separately.
    The caller's sequences are never reordered.

    Returns:
        (assignment, unassigned) where assignment maps CS id to customer ids.
    """
    available = available_customer_successes(customer_successes, away_ids)
    scores = [cs.score for cs in available]

    assignment: dict[int, list[int]] = {cs.id: [] for cs in available}
    unassigned: list[int] = []

    for customer in sorted(customers, key=lambda c: c.score):
        index = bisect_left(scores, customer.score)
        if index == len(available):
            unassigned.append(customer.id)
            continue
        assignment[available[index].id].append(customer.id)

    return assignment, unassigned
