"""BalancingResult entity — the outcome of distributing customers among CSs."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BalancingResult:
    winner_id: int  # 0 = tie or no available CS
    assignment: dict[int, tuple[int, ...]] = field(default_factory=dict)
    unassigned: tuple[int, ...] = ()

    @property
    def assigned_count(self) -> int:
        return sum(len(ids) for ids in self.assignment.values())

    def customers_of(self, cs_id: int) -> tuple[int, ...]:
        return self.assignment.get(cs_id, ())
