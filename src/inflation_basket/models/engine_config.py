from pydantic import BaseModel, Field, field_validator

class EngineConfig(BaseModel):
    benchmark_inflation_pct: float = Field(3.0, description="National inflation figure to compare against")
    high_threshold_pct: float = Field(5.0, description="Aggregate at or above this is labelled high")

    @field_validator('high_threshold_pct')
    @classmethod
    def validate_threshold(cls, v):
        if v <= 0:
            raise ValueError("High inflation threshold must be positive")
        return v
