"""Application configuration via Pydantic Settings.

NOTE: Each limit is mapped to an explicit env variable name (MAX_CS_COUNT,
MAX_CUSTOMER_SCORE, etc.) to avoid silent misconfiguration. Overrides may only
tighten a limit; the defaults are the hard ceilings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from balancer.domain.value_objects.limits import DEFAULT_LIMITS, Limits


def _limit(default: int, alias: str):
    return Field(default=default, gt=0, le=default, validation_alias=alias)


class Settings(BaseSettings):
    # Input limits (exclusive upper bounds)
    max_cs_count: int = _limit(DEFAULT_LIMITS.max_cs_count, "MAX_CS_COUNT")
    max_customer_count: int = _limit(DEFAULT_LIMITS.max_customer_count, "MAX_CUSTOMER_COUNT")
    max_cs_id: int = _limit(DEFAULT_LIMITS.max_cs_id, "MAX_CS_ID")
    max_cs_score: int = _limit(DEFAULT_LIMITS.max_cs_score, "MAX_CS_SCORE")
    max_customer_id: int = _limit(DEFAULT_LIMITS.max_customer_id, "MAX_CUSTOMER_ID")
    max_customer_score: int = _limit(DEFAULT_LIMITS.max_customer_score, "MAX_CUSTOMER_SCORE")

    # .env files are shared with other tools; unrelated keys are skipped
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def limits(self) -> Limits:
        return Limits(
            max_cs_count=self.max_cs_count,
            max_customer_count=self.max_customer_count,
            max_cs_id=self.max_cs_id,
            max_cs_score=self.max_cs_score,
            max_customer_id=self.max_customer_id,
            max_customer_score=self.max_customer_score,
        )
