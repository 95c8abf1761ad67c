"""Limits value object — exclusive upper bounds for every validated input."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Limits:
    max_cs_count: int = 1000
    max_customer_count: int = 1_000_000
    max_cs_id: int = 1000
    max_cs_score: int = 10_000
    max_customer_id: int = 1_000_000
    max_customer_score: int = 100_000

    @staticmethod
    def max_away(cs_count: int) -> int:
        """At most half of the CSs (rounded down) may be away."""
        return cs_count // 2


DEFAULT_LIMITS = Limits()
