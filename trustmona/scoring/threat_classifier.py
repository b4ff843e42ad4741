from trustmona.config import get_weight
from trustmona.types import ConfigCat, StatusLabel

HIGH_RISK_BELOW = get_weight(ConfigCat.STATUS, "high_risk_below", 40)
MEDIUM_RISK_BELOW = get_weight(ConfigCat.STATUS, "medium_risk_below", 70)


def classify_trust_score(trust_score: int) -> StatusLabel:
    # Upper bounds are exclusive: 40 is medium, 70 is low
    if trust_score < HIGH_RISK_BELOW:
        return StatusLabel.HIGH_RISK
    if trust_score < MEDIUM_RISK_BELOW:
        return StatusLabel.MEDIUM_RISK
    return StatusLabel.LOW_RISK
