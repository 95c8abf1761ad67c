"""BalanceCustomersUseCase — full pipeline: validate → assign → tally."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from balancer.config import Settings
from balancer.domain.entities.balancing_result import BalancingResult
from balancer.domain.entities.customer import Customer
from balancer.domain.entities.customer_success import CustomerSuccess
from balancer.domain.errors import InputValidationError
from balancer.domain.policies.busiest_cs import NO_WINNER, pick_busiest
from balancer.domain.policies.input_validation import validate_inputs
from balancer.domain.policies.lowest_capable import assign_customers
from balancer.domain.value_objects.limits import Limits

logger = logging.getLogger(__name__)


class BalanceCustomersUseCase:
    """Distributes customers among available CSs and reports the busiest one."""

    def __init__(self, limits: Limits | None = None):
        self._limits = limits if limits is not None else Settings().limits()

    def execute(
        self,
        customer_successes: Sequence[CustomerSuccess],
        customers: Sequence[Customer],
        away_ids: Sequence[int],
    ) -> BalancingResult:
        """Run one balancing round.

        Pipeline:
        1. Validate all inputs (fails before any assignment)
        2. Assign each customer to the lowest-capable available CS
        3. Pick the CS with the most customers (0 on a tie)

        Raises:
            InputValidationError: if any input constraint is violated.
        """
        try:
            validate_inputs(customer_successes, customers, away_ids, self._limits)
        except InputValidationError as e:
            logger.warning("Balancing rejected: kind=%s bound=%s", e.kind.name, e.bound)
            raise

        assignment, unassigned = assign_customers(customer_successes, customers, away_ids)
        for cs_id, customer_ids in assignment.items():
            logger.debug("CS %d: %d customers", cs_id, len(customer_ids))

        if unassigned:
            logger.warning(
                "%d of %d customers exceed every available CS score",
                len(unassigned), len(customers),
            )

        winner_id = pick_busiest(assignment)
        if winner_id == NO_WINNER:
            logger.info("No single busiest CS among %d available", len(assignment))
        else:
            logger.info(
                "Busiest CS: %d with %d customers", winner_id, len(assignment[winner_id])
            )

        return BalancingResult(
            winner_id=winner_id,
            assignment={cs_id: tuple(ids) for cs_id, ids in assignment.items()},
            unassigned=tuple(unassigned),
        )


def customer_success_balancing(
    customer_successes: Sequence[CustomerSuccess],
    customers: Sequence[Customer],
    away_ids: Sequence[int],
) -> int:
    """Return the id of the CS serving the most customers, or 0 if none is unique."""
    return BalanceCustomersUseCase().execute(customer_successes, customers, away_ids).winner_id
