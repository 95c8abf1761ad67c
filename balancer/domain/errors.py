"""Domain errors raised before any balancing work starts."""

from __future__ import annotations

from balancer.domain.value_objects.enums import ValidationErrorKind


class InputValidationError(ValueError):
    """An input violated one of the balancing constraints.

    Attributes:
        kind: which constraint failed.
        value: the offending count, or a tuple of the offending elements.
        bound: the limit the value was checked against.
    """

    def __init__(self, kind: ValidationErrorKind, value: int | tuple[int, ...], bound: int):
        self.kind = kind
        self.value = value
        self.bound = bound
        super().__init__(self._render())

    def _render(self) -> str:
        label = self.kind.value
        if self.kind == ValidationErrorKind.DUPLICATE_AGENT_SCORE:
            return f"Invalid {label}: {self.value}. All CSs should have different levels."
        if self.kind == ValidationErrorKind.AWAY_COUNT_OUT_OF_RANGE:
            return (
                f"Invalid {label}: {self.value}. "
                f"The number of CSs away must be at most {self.bound}."
            )
        return (
            f"Invalid {label}: {self.value}. "
            f"The {label} must be greater than 0 and less than {self.bound}."
        )
