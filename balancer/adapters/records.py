"""Entity builders for raw ``{"id": .., "score": ..}`` records and score lists."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from balancer.domain.entities.customer import Customer
from balancer.domain.entities.customer_success import CustomerSuccess

E = TypeVar("E", CustomerSuccess, Customer)


def parse_int_field(record: Mapping[str, Any], key: str) -> int:
    """Read an integer field, accepting integral strings like ``" 42 "``.

    Raises:
        ValueError: if the key is missing or the value is not an integer.
    """
    if key not in record:
        raise ValueError(f"Record {dict(record)!r} has no '{key}' field")
    raw = record[key]
    if isinstance(raw, bool):
        raise ValueError(f"Field '{key}' must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        digits = raw.strip().removeprefix("-")
        if digits.isascii() and digits.isdigit():
            return int(raw.strip())
    raise ValueError(f"Field '{key}' must be an integer, got {raw!r}")


def _from_records(records: Iterable[Mapping[str, Any]], factory: Callable[..., E]) -> list[E]:
    return [
        factory(id=parse_int_field(r, "id"), score=parse_int_field(r, "score"))
        for r in records
    ]


def customer_successes_from_records(records: Iterable[Mapping[str, Any]]) -> list[CustomerSuccess]:
    return _from_records(records, CustomerSuccess)


def customers_from_records(records: Iterable[Mapping[str, Any]]) -> list[Customer]:
    return _from_records(records, Customer)


def entities_from_scores(scores: Iterable[int], factory: Callable[..., E]) -> list[E]:
    """Number entities 1..n in the order their scores are given."""
    return [factory(id=i, score=score) for i, score in enumerate(scores, start=1)]


def entities_with_score(size: int, score: int, factory: Callable[..., E]) -> list[E]:
    """Build ``size`` entities with ids 1..size that all share ``score``."""
    return [factory(id=i, score=score) for i in range(1, size + 1)]
