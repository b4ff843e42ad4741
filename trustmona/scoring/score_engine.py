import math
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from trustmona.config import get_weight
from trustmona.scoring.signals import DomainAgeSignal, ProviderSignal
from trustmona.scoring.threat_classifier import classify_trust_score
from trustmona.types import ConfigCat, RiskLevel, StatusLabel

NEW_DOMAIN_YEARS = get_weight(ConfigCat.DOMAIN, "new_domain_years", 1.0)
NEW_DOMAIN_PENALTY = get_weight(ConfigCat.DOMAIN, "new_domain_penalty", 25.0)
MODEL_URL_WEIGHT = get_weight(ConfigCat.MODEL, "url_weight", 0.6)


@dataclass(frozen=True)
class ScanResult:
    trust_score: int
    status_label: StatusLabel
    risk_level: RiskLevel
    reasons: List[str] = field(default_factory=list)
    domain: Optional[str] = None


def clamp_trust_score(score: float) -> int:
    """Round half up and bound to [0, 100]."""
    return int(min(100, max(0, math.floor(score + 0.5))))


# ============================================================
# DOMAIN AGE CONTRIBUTION
# ============================================================

def domain_age_contribution(age: DomainAgeSignal) -> Tuple[float, List[str]]:
    """Returns: (risk points, reasons)"""
    if not age.available:
        return 0.0, ["Domain age unavailable"]

    if age.age_years < NEW_DOMAIN_YEARS:
        return float(NEW_DOMAIN_PENALTY), ["Very new domain"]

    return 0.0, [f"Domain age: {age.age_years:.1f} years"]


# ============================================================
# SCAN AGGREGATION
# ============================================================

def aggregate_url_scan(domain: str, age: DomainAgeSignal, signal: ProviderSignal) -> ScanResult:
    risk, reasons = domain_age_contribution(age)

    # Kept as a float until the final rounding
    risk += signal.risk_score * MODEL_URL_WEIGHT

    trust_score = clamp_trust_score(100 - risk)

    return ScanResult(
        trust_score=trust_score,
        status_label=classify_trust_score(trust_score),
        risk_level=signal.risk_level,
        reasons=reasons + list(signal.reasons),
        domain=domain,
    )


def aggregate_text_scan(signal: ProviderSignal) -> ScanResult:
    # Raw score, no weighting and no domain component
    trust_score = clamp_trust_score(100 - signal.risk_score)

    return ScanResult(
        trust_score=trust_score,
        status_label=classify_trust_score(trust_score),
        risk_level=signal.risk_level,
        reasons=list(signal.reasons),
    )
