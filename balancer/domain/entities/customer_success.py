"""CustomerSuccess entity — a support representative with a capacity score."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerSuccess:
    id: int
    score: int
