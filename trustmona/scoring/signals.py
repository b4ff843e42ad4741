from dataclasses import dataclass, field
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from trustmona.types import RiskLevel


@dataclass(frozen=True)
class DomainAgeSignal:
    age_years: Optional[float] = None
    source: Optional[str] = None
    error: Optional[str] = None

    @property
    def available(self) -> bool:
        return self.age_years is not None


@dataclass(frozen=True)
class ProviderSignal:
    risk_level: RiskLevel
    risk_score: int
    reasons: List[str] = field(default_factory=list)
    degraded: bool = False


class ModelVerdict(BaseModel):
    """Schema the model's JSON answer must match."""

    risk_level: RiskLevel
    risk_score: float = Field(allow_inf_nan=False)
    reasons: List[str] = Field(default_factory=list)

    @field_validator("risk_level", mode="before")
    @classmethod
    def _normalize_level(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("risk_score", mode="before")
    @classmethod
    def _reject_bool(cls, value):
        if isinstance(value, bool):
            raise ValueError("risk_score must be a number")
        return value

    @field_validator("reasons", mode="before")
    @classmethod
    def _coerce_reasons(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            return [str(item) for item in value]
        raise ValueError("reasons must be a list")
