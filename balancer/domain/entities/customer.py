"""Customer entity — an account that needs a CS with enough capacity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    id: int
    score: int
