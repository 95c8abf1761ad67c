"""InputValidationPolicy — reject inputs outside the supported ranges."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from balancer.domain.entities.customer import Customer
from balancer.domain.entities.customer_success import CustomerSuccess
from balancer.domain.errors import InputValidationError
from balancer.domain.value_objects.enums import ValidationErrorKind
from balancer.domain.value_objects.limits import DEFAULT_LIMITS, Limits


def _out_of_range(values: Iterable[int], bound: int) -> tuple[int, ...]:
    return tuple(v for v in values if v <= 0 or v >= bound)


def _check_count(kind: ValidationErrorKind, count: int, bound: int) -> None:
    if count <= 0 or count >= bound:
        raise InputValidationError(kind, count, bound)


def _check_values(kind: ValidationErrorKind, values: Iterable[int], bound: int) -> None:
    offending = _out_of_range(values, bound)
    if offending:
        raise InputValidationError(kind, offending, bound)


def validate_inputs(
    customer_successes: Sequence[CustomerSuccess],
    customers: Sequence[Customer],
    away_ids: Sequence[int],
    limits: Limits = DEFAULT_LIMITS,
) -> bool:
    """Check every balancing constraint, failing on the first violation.

    Order of checks:
      1. CS scores are pairwise distinct.
      2. CS count in (0, max_cs_count).
      3. Customer count in (0, max_customer_count).
      4. Away count <= floor(CS count / 2). Equality is allowed here,
         unlike the other bounds.
      5-8. Every CS id, CS score, customer id and customer score lies in
         (0, bound).

    Returns:
        True when all checks pass.

    Raises:
        InputValidationError: describing the first violated constraint.
    """
    score_counts = Counter(cs.score for cs in customer_successes)
    duplicated = tuple(sorted(s for s, n in score_counts.items() if n > 1))
    if duplicated:
        raise InputValidationError(
            ValidationErrorKind.DUPLICATE_AGENT_SCORE, duplicated, len(customer_successes)
        )

    _check_count(
        ValidationErrorKind.AGENT_COUNT_OUT_OF_RANGE,
        len(customer_successes),
        limits.max_cs_count,
    )
    _check_count(
        ValidationErrorKind.CUSTOMER_COUNT_OUT_OF_RANGE,
        len(customers),
        limits.max_customer_count,
    )

    max_away = limits.max_away(len(customer_successes))
    if len(away_ids) > max_away:
        raise InputValidationError(
            ValidationErrorKind.AWAY_COUNT_OUT_OF_RANGE, len(away_ids), max_away
        )

    _check_values(
        ValidationErrorKind.AGENT_ID_OUT_OF_RANGE,
        (cs.id for cs in customer_successes),
        limits.max_cs_id,
    )
    _check_values(
        ValidationErrorKind.AGENT_SCORE_OUT_OF_RANGE,
        (cs.score for cs in customer_successes),
        limits.max_cs_score,
    )
    _check_values(
        ValidationErrorKind.CUSTOMER_ID_OUT_OF_RANGE,
        (c.id for c in customers),
        limits.max_customer_id,
    )
    _check_values(
        ValidationErrorKind.CUSTOMER_SCORE_OUT_OF_RANGE,
        (c.score for c in customers),
        limits.max_customer_score,
    )
    return True
