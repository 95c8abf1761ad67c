"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class ValidationErrorKind(str, Enum):
    """Category of an input violation; the value is the label used in messages."""

    DUPLICATE_AGENT_SCORE = "scores of CSs, they should be different"
    AGENT_COUNT_OUT_OF_RANGE = "number of CSs allowed"
    CUSTOMER_COUNT_OUT_OF_RANGE = "number of customers"
    AWAY_COUNT_OUT_OF_RANGE = "number of CSs away allowed"
    AGENT_ID_OUT_OF_RANGE = "value to CS ID"
    AGENT_SCORE_OUT_OF_RANGE = "value to CS score"
    CUSTOMER_ID_OUT_OF_RANGE = "value to customer ID"
    CUSTOMER_SCORE_OUT_OF_RANGE = "value to customer score"
