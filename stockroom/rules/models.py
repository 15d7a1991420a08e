from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class DiscountRules(BaseModel):
    min_rate: float = 0.0
    max_rate: float = 1.0
    min_price: float = 0.0
    round_digits: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def check_rate_bounds(self) -> "DiscountRules":
        if self.min_rate > self.max_rate:
            raise ValueError(
                f"min_rate ({self.min_rate}) must not exceed max_rate ({self.max_rate})"
            )
        return self

class ObservabilityRules(BaseModel):
    log_level: LogLevel = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    model_config = ConfigDict(extra="forbid")

class InventoryRules(BaseModel):
    schema_version: Literal[1] = 1
    project_slug: str = Field(default="stockroom", min_length=1)
    discount: DiscountRules = Field(default_factory=DiscountRules)
    observability: ObservabilityRules = Field(default_factory=ObservabilityRules)
